#
# PROJECT: ascii3d
# MODULE: ascii3d/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from typing import NamedTuple

from .math_utils import Vec3

logger = logging.getLogger(__name__)


class MeshLoadError(ValueError):
    """Raised when an OBJ file cannot be read or holds no usable geometry."""


class Face(NamedTuple):
    """Triangle given by three vertex indices, wound counter-clockwise
    when seen from the outside."""
    v0: int
    v1: int
    v2: int


class Shape:
    """
    Base for renderable geometry.

    Subclasses provide ``vertices``; ``edges`` (index pairs) drive the
    wireframe renderers and ``faces`` (triangles) drive culling and the
    solid renderers. A shape without edges or faces is valid and simply
    draws nothing in the renderers that need them.
    """
    vertices = ()
    edges = ()
    faces = ()


class Box(Shape):
    """
    Axis-aligned cube centered at the origin.

    Vertex layout (size 1)::

        z = -0.5          z = +0.5
        3 ---- 2          7 ---- 6
        |      |          |      |
        0 ---- 1          4 ---- 5
    """

    edges = (
        (0, 1), (1, 2), (2, 3), (3, 0),
        (4, 5), (5, 6), (6, 7), (7, 4),
        (0, 4), (1, 5), (2, 6), (3, 7),
    )

    faces = (
        Face(0, 2, 1), Face(0, 3, 2),  # -Z
        Face(4, 5, 6), Face(4, 6, 7),  # +Z
        Face(3, 6, 2), Face(3, 7, 6),  # +Y
        Face(0, 1, 5), Face(0, 5, 4),  # -Y
        Face(1, 2, 6), Face(1, 6, 5),  # +X
        Face(0, 4, 7), Face(0, 7, 3),  # -X
    )

    def __init__(self, size: float = 1.0):
        self.size = size
        h = size / 2.0
        self.vertices = (
            Vec3(-h, -h, -h), Vec3(h, -h, -h), Vec3(h, h, -h), Vec3(-h, h, -h),
            Vec3(-h, -h, h), Vec3(h, -h, h), Vec3(h, h, h), Vec3(-h, h, h),
        )


class Pyramid(Shape):
    """Square-based pyramid centered at the origin, apex on +Y.

    Wireframe only: it has no faces, so solid renderers skip it.
    """

    edges = (
        (0, 1), (1, 2), (2, 3), (3, 0),
        (0, 4), (1, 4), (2, 4), (3, 4),
    )

    def __init__(self, size: float = 1.0):
        self.size = size
        h = size / 2.0
        self.vertices = (
            Vec3(-h, -h, -h), Vec3(h, -h, -h), Vec3(h, -h, h), Vec3(-h, -h, h),
            Vec3(0, h, 0),
        )


class Mesh(Shape):
    """
    Arbitrary polygon mesh.

    Polygons are fan-triangulated into faces. Unless explicit edges are
    given, the outline of every polygon becomes the edge set (deduplicated,
    so shared edges are drawn once).
    """

    def __init__(self, vertices, polygons, edges=None):
        self.vertices = tuple(v if isinstance(v, Vec3) else Vec3(*v) for v in vertices)
        n = len(self.vertices)
        faces = []
        outline = {}
        for poly in polygons:
            if len(poly) < 3:
                continue
            if any(idx < 0 or idx >= n for idx in poly):
                raise MeshLoadError(f"Polygon {tuple(poly)} references a missing vertex")
            for i in range(1, len(poly) - 1):
                faces.append(Face(poly[0], poly[i], poly[i + 1]))
            for i in range(len(poly)):
                a, b = poly[i], poly[(i + 1) % len(poly)]
                outline[(a, b) if a < b else (b, a)] = None
        self.faces = tuple(faces)
        self.edges = tuple(edges) if edges is not None else tuple(outline)

    @classmethod
    def from_obj(cls, filename) -> 'Mesh':
        """
        Load ``v`` and ``f`` records from a Wavefront OBJ file.

        Handles the v/vt/vn face syntax and negative (relative) indices.

        Raises:
            MeshLoadError: if the file cannot be read or parsed, or holds
                no vertices or faces.
        """
        vertices = []
        polygons = []
        try:
            with open(filename, 'r') as f:
                for line in f:
                    if line.startswith('v '):
                        coords = [float(x) for x in line.split()[1:4]]
                        if len(coords) != 3:
                            raise ValueError(f"malformed vertex record {line.strip()!r}")
                        vertices.append(coords)
                    elif line.startswith('f '):
                        face = []
                        for token in line.split()[1:]:
                            idx = int(token.split('/')[0])
                            # OBJ indices are 1-based; negatives count back from the end
                            face.append(idx - 1 if idx > 0 else len(vertices) + idx)
                        polygons.append(face)
        except (OSError, ValueError) as e:
            raise MeshLoadError(f"Could not load '{filename}': {e}") from e

        if not vertices or not polygons:
            raise MeshLoadError(f"'{filename}' contains no vertices or faces")

        mesh = cls(vertices, polygons)
        logger.info("Loaded %s: %d vertices, %d triangles, %d edges",
                    filename, len(mesh.vertices), len(mesh.faces), len(mesh.edges))
        return mesh
