#
# PROJECT: ascii3d
# MODULE: ascii3d/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, (int, float)):
            return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> 'Vec3':
        """Unit vector in the same direction; the zero vector maps to itself."""
        m = self.length()
        if m == 0:
            return Vec3(0, 0, 0)
        return self / m

    def lerp(self, other, t: float) -> 'Vec3':
        return Vec3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t
        )


Vec3.ZERO = Vec3(0, 0, 0)
Vec3.ONE = Vec3(1, 1, 1)
Vec3.UNIT_X = Vec3(1, 0, 0)
Vec3.UNIT_Y = Vec3(0, 1, 0)
Vec3.UNIT_Z = Vec3(0, 0, 1)


class Mat4:
    """4x4 homogeneous transform, 16 floats in column-major order.

    Element (row, col) lives at index ``col * 4 + row``, so the translation
    column is m[12], m[13], m[14]. ``a @ b`` means "apply b, then a".
    """
    __slots__ = ('m',)

    def __init__(self, values=None):
        if values is None:
            self.m = _IDENTITY
        else:
            if len(values) != 16:
                raise ValueError(f"Mat4 needs 16 values, got {len(values)}")
            self.m = tuple(float(v) for v in values)

    def __repr__(self):
        m = self.m
        rows = []
        for r in range(4):
            rows.append(", ".join(f"{m[c * 4 + r]:.3f}" for c in range(4)))
        return "Mat4(\n  " + "\n  ".join(rows) + "\n)"

    def __eq__(self, other):
        if isinstance(other, Mat4):
            return self.m == other.m
        return NotImplemented

    def __hash__(self):
        return hash(self.m)

    def element(self, row: int, col: int) -> float:
        return self.m[col * 4 + row]

    @classmethod
    def identity(cls) -> 'Mat4':
        return cls(_IDENTITY)

    @classmethod
    def translation(cls, x, y, z) -> 'Mat4':
        return cls((
            1, 0, 0, 0,
            0, 1, 0, 0,
            0, 0, 1, 0,
            x, y, z, 1,
        ))

    @classmethod
    def scale(cls, sx, sy, sz) -> 'Mat4':
        return cls((
            sx, 0, 0, 0,
            0, sy, 0, 0,
            0, 0, sz, 0,
            0, 0, 0, 1,
        ))

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat4':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls((
            1, 0, 0, 0,
            0, c, s, 0,
            0, -s, c, 0,
            0, 0, 0, 1,
        ))

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat4':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls((
            c, 0, -s, 0,
            0, 1, 0, 0,
            s, 0, c, 0,
            0, 0, 0, 1,
        ))

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat4':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls((
            c, s, 0, 0,
            -s, c, 0, 0,
            0, 0, 1, 0,
            0, 0, 0, 1,
        ))

    @classmethod
    def rotation(cls, rx: float, ry: float, rz: float) -> 'Mat4':
        """Combined rotation Rz * Ry * Rx (X applied first)."""
        return cls.rotation_z(rz) @ cls.rotation_y(ry) @ cls.rotation_x(rx)

    @classmethod
    def perspective(cls, fov: float, aspect: float, near: float, far: float) -> 'Mat4':
        """
        Symmetric perspective frustum.

        Args:
            fov: vertical field of view in radians.
            aspect: width / height.
            near, far: clip plane distances.

        Raises:
            ValueError: for a frustum that cannot be built (zero-width FOV,
                zero aspect or coincident clip planes).
        """
        tan_half = math.tan(fov / 2.0)
        if tan_half == 0 or aspect == 0 or near == far:
            raise ValueError(
                f"Degenerate frustum: fov={fov}, aspect={aspect}, near={near}, far={far}")
        f = 1.0 / tan_half
        range_inv = 1.0 / (near - far)
        return cls((
            f / aspect, 0, 0, 0,
            0, f, 0, 0,
            0, 0, (far + near) * range_inv, -1,
            0, 0, 2 * far * near * range_inv, 0,
        ))

    @classmethod
    def look_at(cls, eye: Vec3, target: Vec3, up: Vec3) -> 'Mat4':
        """
        View matrix looking from eye towards target.

        An up vector parallel to the view direction produces a degenerate
        (zero x/y rows) matrix rather than an error; such a view draws
        nothing useful but never faults.
        """
        z_axis = (eye - target).normalize()
        x_axis = up.cross(z_axis).normalize()
        y_axis = z_axis.cross(x_axis)
        return cls((
            x_axis.x, y_axis.x, z_axis.x, 0,
            x_axis.y, y_axis.y, z_axis.y, 0,
            x_axis.z, y_axis.z, z_axis.z, 0,
            -x_axis.dot(eye), -y_axis.dot(eye), -z_axis.dot(eye), 1,
        ))

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            a = self.m
            b = other.m
            res = [0.0] * 16
            for c in range(4):
                for r in range(4):
                    val = 0.0
                    for k in range(4):
                        val += a[k * 4 + r] * b[c * 4 + k]
                    res[c * 4 + r] = val
            return Mat4(res)
        return NotImplemented

    def transform_homogeneous(self, v: Vec3):
        """Multiply (v, 1) and return the raw (x, y, z, w) tuple."""
        m = self.m
        x = m[0] * v.x + m[4] * v.y + m[8] * v.z + m[12]
        y = m[1] * v.x + m[5] * v.y + m[9] * v.z + m[13]
        z = m[2] * v.x + m[6] * v.y + m[10] * v.z + m[14]
        w = m[3] * v.x + m[7] * v.y + m[11] * v.z + m[15]
        return x, y, z, w

    def transform_point(self, v: Vec3) -> Vec3:
        """Transform a point (w=1); divides by the resulting w unless it is 0 or 1."""
        x, y, z, w = self.transform_homogeneous(v)
        if w != 1.0 and w != 0.0:
            return Vec3(x / w, y / w, z / w)
        return Vec3(x, y, z)

    def transform_direction(self, v: Vec3) -> Vec3:
        """Transform a direction (w=0): upper-left 3x3 only, no translation."""
        m = self.m
        return Vec3(
            m[0] * v.x + m[4] * v.y + m[8] * v.z,
            m[1] * v.x + m[5] * v.y + m[9] * v.z,
            m[2] * v.x + m[6] * v.y + m[10] * v.z,
        )


_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)
