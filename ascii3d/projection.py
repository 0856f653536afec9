#
# PROJECT: ascii3d
# MODULE: ascii3d/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import NamedTuple, Optional

from .math_utils import Mat4, Vec3

# Largest accepted screen coordinate; squares and products of such values
# stay finite in the rasterizer and culling arithmetic
COORD_LIMIT = 1e150


class ProjectedPoint(NamedTuple):
    """Screen position plus the NDC depth used for z-testing (lower = nearer)."""
    x: float
    y: float
    depth: float


def project(point: Vec3, mvp: Mat4, width: int, height: int,
            aspect_correction: float = 2.0, snap: bool = True) -> Optional[ProjectedPoint]:
    """
    Project a point to pixel coordinates.

    Returns None when the homogeneous w is <= 0 (at or behind the camera),
    or when the point lands beyond COORD_LIMIT pixels or at a non-finite
    coordinate.
    X is scaled by aspect_correction to compensate for character cells
    being taller than wide; screen Y grows downward. With snap the
    coordinates are rounded to integer pixels.
    """
    x, y, z, w = mvp.transform_homogeneous(point)
    if w <= 0:
        return None

    ndc_x = x / w * aspect_correction
    ndc_y = y / w

    sx = (ndc_x + 1) * 0.5 * width
    sy = (1 - ndc_y) * 0.5 * height
    depth = z / w
    if not (abs(sx) <= COORD_LIMIT and abs(sy) <= COORD_LIMIT and math.isfinite(depth)):
        return None
    if snap:
        sx = math.floor(sx + 0.5)
        sy = math.floor(sy + 0.5)
    return ProjectedPoint(sx, sy, depth)


def project_vertices(vertices, mvp: Mat4, width: int, height: int,
                     aspect_correction: float = 2.0, snap: bool = True):
    """Project every vertex; rejected vertices are None at their index."""
    return [project(v, mvp, width, height, aspect_correction, snap) for v in vertices]


def signed_area(p0, p1, p2) -> float:
    """Twice the signed screen-space area of a triangle (shoelace)."""
    return (p1[0] - p0[0]) * (p2[1] - p0[1]) - (p2[0] - p0[0]) * (p1[1] - p0[1])


def is_front_facing(p0, p1, p2) -> bool:
    # Screen Y is flipped, so outward counter-clockwise faces come out negative
    return signed_area(p0, p1, p2) < 0


def front_faces(faces, projected):
    """
    Yield (face, p0, p1, p2) for every front-facing triangle.

    Triangles with a vertex rejected by projection are neither front nor
    back facing and are skipped.
    """
    for face in faces:
        p0 = projected[face[0]]
        p1 = projected[face[1]]
        p2 = projected[face[2]]
        if p0 is None or p1 is None or p2 is None:
            continue
        if is_front_facing(p0, p1, p2):
            yield face, p0, p1, p2


def front_facing_faces(shape, mvp: Mat4, width: int, height: int,
                       aspect_correction: float = 2.0):
    projected = project_vertices(shape.vertices, mvp, width, height, aspect_correction, snap=False)
    return [face for face, _, _, _ in front_faces(shape.faces, projected)]


def normalize_edge(a: int, b: int):
    return (a, b) if a < b else (b, a)


def visible_edges(shape, mvp: Mat4, width: int, height: int, aspect_correction: float = 2.0):
    """
    Edges belonging to at least one front-facing triangle.

    Each edge appears once as a (min, max) pair, in the order first seen.
    Culling uses unrounded screen coordinates so small triangles keep a
    meaningful winding.
    """
    seen = {}
    for face in front_facing_faces(shape, mvp, width, height, aspect_correction):
        v0, v1, v2 = face
        seen[normalize_edge(v0, v1)] = None
        seen[normalize_edge(v1, v2)] = None
        seen[normalize_edge(v2, v0)] = None
    return list(seen)
