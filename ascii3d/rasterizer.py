#
# PROJECT: ascii3d
# MODULE: ascii3d/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Line and triangle rasterization.

Both routines are buffer-agnostic: they call ``plot(x, y, depth)`` for
every covered pixel and leave depth testing to the buffer.
"""

import math


def _round(v: float) -> int:
    return int(math.floor(v + 0.5))


def clip_segment(x0, y0, x1, y1, width, height):
    """
    Liang-Barsky clip of a segment against [0, width-1] x [0, height-1].
    Returns (t0, t1) along the segment, or None if nothing is visible.
    """
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0), (dx, width - 1 - x0), (-dy, y0), (dy, height - 1 - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1: return None
            if t > t0: t0 = t
        else:
            if t < t0: return None
            if t < t1: t1 = t
    return t0, t1


def draw_line(plot, x0: int, y0: int, x1: int, y1: int,
              depth0: float, depth1: float, width: int, height: int):
    """
    Bresenham line from (x0, y0) to (x1, y1), both endpoints included.

    Depth is interpolated by the squared distance travelled from the
    start, normalized by the squared length. Segments reaching outside
    the target are clipped first so far-off projected endpoints cost
    nothing extra; the clipped part keeps the depths of the full segment.
    """
    if width <= 0 or height <= 0:
        return

    # Depth is always measured along the unclipped segment
    ox, oy = x0, y0
    total = (x1 - x0) * (x1 - x0) + (y1 - y0) * (y1 - y0)
    if total == 0:
        total = 1
    d_depth = depth1 - depth0

    inside = (0 <= x0 < width and 0 <= y0 < height and
              0 <= x1 < width and 0 <= y1 < height)
    if not inside:
        clipped = clip_segment(x0, y0, x1, y1, width, height)
        if clipped is None:
            return
        t0, t1 = clipped
        dx, dy = x1 - x0, y1 - y0
        x0, y0, x1, y1 = (
            _round(x0 + dx * t0), _round(y0 + dy * t0),
            _round(x0 + dx * t1), _round(y0 + dy * t1),
        )

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    x, y = x0, y0
    while True:
        t = ((x - ox) * (x - ox) + (y - oy) * (y - oy)) / total
        if t > 1.0: t = 1.0
        plot(x, y, depth0 + d_depth * t)

        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            if x == x1: break
            err += dy
            x += sx
        if e2 <= dx:
            if y == y1: break
            err += dx
            y += sy


def fill_triangle(plot, p0, p1, p2, width: int, height: int):
    """
    Scanline-fill a triangle of integer (x, y, depth) points.

    The vertices are sorted by y and the triangle split into a flat-bottom
    half (v0 down to v1) and a flat-top half (v2 up to v1). Each covered
    pixel gets its depth by barycentric interpolation. Scanlines and
    spans are clamped to the target.
    """
    if width <= 0 or height <= 0:
        return

    # Sort vertices by Y
    if p0[1] > p1[1]: p0, p1 = p1, p0
    if p0[1] > p2[1]: p0, p2 = p2, p0
    if p1[1] > p2[1]: p1, p2 = p2, p1

    x0, y0, z0 = p0
    x1, y1, z1 = p1
    x2, y2, z2 = p2

    denom = (y1 - y2) * (x0 - x2) + (x2 - x1) * (y0 - y2)
    flat_depth = (z0 + z1 + z2) / 3.0

    def depth_at(x, y):
        if abs(denom) < 0.0001:
            return flat_depth
        w0 = ((y1 - y2) * (x - x2) + (x2 - x1) * (y - y2)) / denom
        w1 = ((y2 - y0) * (x - x2) + (x0 - x2) * (y - y2)) / denom
        return w0 * z0 + w1 * z1 + (1 - w0 - w1) * z2

    def span(y, xa, xb):
        start, end = _round(xa), _round(xb)
        if start > end: start, end = end, start
        if start < 0: start = 0
        if end > width - 1: end = width - 1
        for x in range(start, end + 1):
            plot(x, y, depth_at(x, y))

    # Flat-bottom half: rows y0..y1 inclusive
    if y1 != y0:
        inv_slope1 = (x1 - x0) / (y1 - y0)
        inv_slope2 = (x2 - x0) / (y2 - y0)
        for y in range(max(y0, 0), min(y1, height - 1) + 1):
            span(y, x0 + inv_slope1 * (y - y0), x0 + inv_slope2 * (y - y0))

    # Flat-top half: rows y2 down to just below y1, or down to y1 itself
    # when the triangle has a flat top edge that no other half covers
    if y2 != y1:
        inv_slope1 = (x2 - x1) / (y2 - y1)
        inv_slope2 = (x2 - x0) / (y2 - y0)
        stop = y1 - 1 if y1 == y0 else y1
        for y in range(min(y2, height - 1), max(stop, -1), -1):
            span(y, x2 - inv_slope1 * (y2 - y), x2 - inv_slope2 * (y2 - y))
