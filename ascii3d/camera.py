#
# PROJECT: ascii3d
# MODULE: ascii3d/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .math_utils import Mat4, Vec3


class Camera:
    """
    Look-at camera with a symmetric perspective frustum.

    Stores eye position, target, up vector, vertical field-of-view
    (radians) and near/far clip planes. Treated as a value: use
    copy_with() or orbit() to derive a moved camera.
    """
    __slots__ = ('position', 'target', 'up', 'fov', 'near', 'far')

    def __init__(self, position: Vec3 = Vec3(0, 0, 5), target: Vec3 = Vec3.ZERO,
                 up: Vec3 = Vec3.UNIT_Y, fov: float = 1.0,
                 near: float = 0.1, far: float = 100.0):
        self.position = position
        self.target = target
        self.up = up
        self.fov = fov          # ~57 degrees
        self.near = near
        self.far = far

    def __repr__(self):
        return f"Camera(position={self.position!r}, target={self.target!r}, fov={self.fov})"

    @classmethod
    def orbit(cls, distance: float = 5.0, azimuth: float = 0.0, elevation: float = 0.0,
              target: Vec3 = Vec3.ZERO, fov: float = 1.0,
              near: float = 0.1, far: float = 100.0) -> 'Camera':
        """Place the camera on a sphere around target.

        Azimuth turns around +Y starting from +Z, elevation lifts towards +Y.
        """
        cos_el = math.cos(elevation)
        offset = Vec3(
            distance * cos_el * math.sin(azimuth),
            distance * math.sin(elevation),
            distance * cos_el * math.cos(azimuth),
        )
        return cls(position=offset + target, target=target, up=Vec3.UNIT_Y,
                   fov=fov, near=near, far=far)

    @property
    def view_matrix(self) -> Mat4:
        return Mat4.look_at(self.position, self.target, self.up)

    def projection_matrix(self, aspect_ratio: float) -> Mat4:
        return Mat4.perspective(self.fov, aspect_ratio, self.near, self.far)

    def view_projection_matrix(self, aspect_ratio: float) -> Mat4:
        return self.projection_matrix(aspect_ratio) @ self.view_matrix

    def copy_with(self, **changes) -> 'Camera':
        values = {name: getattr(self, name) for name in self.__slots__}
        unknown = set(changes) - set(values)
        if unknown:
            raise TypeError(f"Unknown camera fields: {', '.join(sorted(unknown))}")
        values.update(changes)
        return Camera(**values)
