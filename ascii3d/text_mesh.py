#
# PROJECT: ascii3d
# MODULE: ascii3d/text_mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from functools import cached_property

from .math_utils import Vec3
from .mesh import Shape

# Stroke font: each glyph is a list of ((x1, y1), (x2, y2)) segments in a
# unit cell, (0, 0) bottom-left to (1, 1) top-right.
STROKE_FONT = {
    'A': [((0, 0), (0.5, 1)), ((0.5, 1), (1, 0)), ((0.2, 0.4), (0.8, 0.4))],
    'B': [((0, 0), (0, 1)), ((0, 1), (0.7, 1)), ((0.7, 1), (0.8, 0.9)),
          ((0.8, 0.9), (0.8, 0.6)), ((0.8, 0.6), (0.7, 0.5)), ((0.7, 0.5), (0, 0.5)),
          ((0.7, 0.5), (0.8, 0.4)), ((0.8, 0.4), (0.8, 0.1)), ((0.8, 0.1), (0.7, 0)),
          ((0.7, 0), (0, 0))],
    'C': [((1, 0.2), (0.8, 0)), ((0.8, 0), (0.2, 0)), ((0.2, 0), (0, 0.2)),
          ((0, 0.2), (0, 0.8)), ((0, 0.8), (0.2, 1)), ((0.2, 1), (0.8, 1)),
          ((0.8, 1), (1, 0.8))],
    'D': [((0, 0), (0, 1)), ((0, 1), (0.6, 1)), ((0.6, 1), (0.9, 0.8)),
          ((0.9, 0.8), (0.9, 0.2)), ((0.9, 0.2), (0.6, 0)), ((0.6, 0), (0, 0))],
    'E': [((1, 0), (0, 0)), ((0, 0), (0, 1)), ((0, 1), (1, 1)), ((0, 0.5), (0.7, 0.5))],
    'F': [((0, 0), (0, 1)), ((0, 1), (1, 1)), ((0, 0.5), (0.7, 0.5))],
    'G': [((1, 0.8), (0.8, 1)), ((0.8, 1), (0.2, 1)), ((0.2, 1), (0, 0.8)),
          ((0, 0.8), (0, 0.2)), ((0, 0.2), (0.2, 0)), ((0.2, 0), (0.8, 0)),
          ((0.8, 0), (1, 0.2)), ((1, 0.2), (1, 0.5)), ((1, 0.5), (0.5, 0.5))],
    'H': [((0, 0), (0, 1)), ((1, 0), (1, 1)), ((0, 0.5), (1, 0.5))],
    'I': [((0.3, 0), (0.7, 0)), ((0.5, 0), (0.5, 1)), ((0.3, 1), (0.7, 1))],
    'J': [((0.3, 1), (0.8, 1)), ((0.8, 1), (0.8, 0.2)), ((0.8, 0.2), (0.6, 0)),
          ((0.6, 0), (0.3, 0)), ((0.3, 0), (0.1, 0.2))],
    'K': [((0, 0), (0, 1)), ((0, 0.5), (1, 1)), ((0.4, 0.7), (1, 0))],
    'L': [((0, 1), (0, 0)), ((0, 0), (1, 0))],
    'M': [((0, 0), (0, 1)), ((0, 1), (0.5, 0.5)), ((0.5, 0.5), (1, 1)), ((1, 1), (1, 0))],
    'N': [((0, 0), (0, 1)), ((0, 1), (1, 0)), ((1, 0), (1, 1))],
    'O': [((0.2, 0), (0, 0.2)), ((0, 0.2), (0, 0.8)), ((0, 0.8), (0.2, 1)),
          ((0.2, 1), (0.8, 1)), ((0.8, 1), (1, 0.8)), ((1, 0.8), (1, 0.2)),
          ((1, 0.2), (0.8, 0)), ((0.8, 0), (0.2, 0))],
    'P': [((0, 0), (0, 1)), ((0, 1), (0.8, 1)), ((0.8, 1), (1, 0.8)),
          ((1, 0.8), (1, 0.6)), ((1, 0.6), (0.8, 0.5)), ((0.8, 0.5), (0, 0.5))],
    'Q': [((0.2, 0), (0, 0.2)), ((0, 0.2), (0, 0.8)), ((0, 0.8), (0.2, 1)),
          ((0.2, 1), (0.8, 1)), ((0.8, 1), (1, 0.8)), ((1, 0.8), (1, 0.2)),
          ((1, 0.2), (0.8, 0)), ((0.8, 0), (0.2, 0)), ((0.6, 0.3), (1, 0))],
    'R': [((0, 0), (0, 1)), ((0, 1), (0.8, 1)), ((0.8, 1), (1, 0.8)),
          ((1, 0.8), (1, 0.6)), ((1, 0.6), (0.8, 0.5)), ((0.8, 0.5), (0, 0.5)),
          ((0.5, 0.5), (1, 0))],
    'S': [((1, 0.8), (0.8, 1)), ((0.8, 1), (0.2, 1)), ((0.2, 1), (0, 0.8)),
          ((0, 0.8), (0, 0.6)), ((0, 0.6), (0.2, 0.5)), ((0.2, 0.5), (0.8, 0.5)),
          ((0.8, 0.5), (1, 0.4)), ((1, 0.4), (1, 0.2)), ((1, 0.2), (0.8, 0)),
          ((0.8, 0), (0.2, 0)), ((0.2, 0), (0, 0.2))],
    'T': [((0, 1), (1, 1)), ((0.5, 1), (0.5, 0))],
    'U': [((0, 1), (0, 0.2)), ((0, 0.2), (0.2, 0)), ((0.2, 0), (0.8, 0)),
          ((0.8, 0), (1, 0.2)), ((1, 0.2), (1, 1))],
    'V': [((0, 1), (0.5, 0)), ((0.5, 0), (1, 1))],
    'W': [((0, 1), (0.25, 0)), ((0.25, 0), (0.5, 0.5)), ((0.5, 0.5), (0.75, 0)),
          ((0.75, 0), (1, 1))],
    'X': [((0, 0), (1, 1)), ((0, 1), (1, 0))],
    'Y': [((0, 1), (0.5, 0.5)), ((0.5, 0.5), (1, 1)), ((0.5, 0.5), (0.5, 0))],
    'Z': [((0, 1), (1, 1)), ((1, 1), (0, 0)), ((0, 0), (1, 0))],
    '0': [((0.2, 0), (0, 0.2)), ((0, 0.2), (0, 0.8)), ((0, 0.8), (0.2, 1)),
          ((0.2, 1), (0.8, 1)), ((0.8, 1), (1, 0.8)), ((1, 0.8), (1, 0.2)),
          ((1, 0.2), (0.8, 0)), ((0.8, 0), (0.2, 0)), ((0.2, 0.2), (0.8, 0.8))],
    '1': [((0.3, 0.8), (0.5, 1)), ((0.5, 1), (0.5, 0)), ((0.3, 0), (0.7, 0))],
    '2': [((0, 0.8), (0.2, 1)), ((0.2, 1), (0.8, 1)), ((0.8, 1), (1, 0.8)),
          ((1, 0.8), (1, 0.6)), ((1, 0.6), (0, 0)), ((0, 0), (1, 0))],
    '3': [((0, 0.8), (0.2, 1)), ((0.2, 1), (0.8, 1)), ((0.8, 1), (1, 0.8)),
          ((1, 0.8), (1, 0.6)), ((1, 0.6), (0.8, 0.5)), ((0.8, 0.5), (0.4, 0.5)),
          ((0.8, 0.5), (1, 0.4)), ((1, 0.4), (1, 0.2)), ((1, 0.2), (0.8, 0)),
          ((0.8, 0), (0.2, 0)), ((0.2, 0), (0, 0.2))],
    '4': [((0.7, 0), (0.7, 1)), ((0.7, 1), (0, 0.4)), ((0, 0.4), (1, 0.4))],
    '5': [((1, 1), (0, 1)), ((0, 1), (0, 0.5)), ((0, 0.5), (0.8, 0.5)),
          ((0.8, 0.5), (1, 0.4)), ((1, 0.4), (1, 0.2)), ((1, 0.2), (0.8, 0)),
          ((0.8, 0), (0.2, 0)), ((0.2, 0), (0, 0.2))],
    '6': [((1, 0.8), (0.8, 1)), ((0.8, 1), (0.2, 1)), ((0.2, 1), (0, 0.8)),
          ((0, 0.8), (0, 0.2)), ((0, 0.2), (0.2, 0)), ((0.2, 0), (0.8, 0)),
          ((0.8, 0), (1, 0.2)), ((1, 0.2), (1, 0.4)), ((1, 0.4), (0.8, 0.5)),
          ((0.8, 0.5), (0, 0.5))],
    '7': [((0, 1), (1, 1)), ((1, 1), (0.3, 0))],
    '8': [((0.2, 0.5), (0, 0.4)), ((0, 0.4), (0, 0.2)), ((0, 0.2), (0.2, 0)),
          ((0.2, 0), (0.8, 0)), ((0.8, 0), (1, 0.2)), ((1, 0.2), (1, 0.4)),
          ((1, 0.4), (0.8, 0.5)), ((0.8, 0.5), (1, 0.6)), ((1, 0.6), (1, 0.8)),
          ((1, 0.8), (0.8, 1)), ((0.8, 1), (0.2, 1)), ((0.2, 1), (0, 0.8)),
          ((0, 0.8), (0, 0.6)), ((0, 0.6), (0.2, 0.5)), ((0.2, 0.5), (0.8, 0.5))],
    '9': [((0, 0.2), (0.2, 0)), ((0.2, 0), (0.8, 0)), ((0.8, 0), (1, 0.2)),
          ((1, 0.2), (1, 0.8)), ((1, 0.8), (0.8, 1)), ((0.8, 1), (0.2, 1)),
          ((0.2, 1), (0, 0.8)), ((0, 0.8), (0, 0.6)), ((0, 0.6), (0.2, 0.5)),
          ((0.2, 0.5), (1, 0.5))],
    ' ': [],
    '!': [((0.5, 0.3), (0.5, 1)), ((0.5, 0), (0.5, 0.1))],
    '.': [((0.4, 0), (0.6, 0)), ((0.6, 0), (0.6, 0.15)), ((0.6, 0.15), (0.4, 0.15)),
          ((0.4, 0.15), (0.4, 0))],
    ',': [((0.4, 0.15), (0.6, 0.15)), ((0.6, 0.15), (0.5, -0.1))],
    '?': [((0, 0.8), (0.2, 1)), ((0.2, 1), (0.8, 1)), ((0.8, 1), (1, 0.8)),
          ((1, 0.8), (1, 0.6)), ((1, 0.6), (0.5, 0.4)), ((0.5, 0.4), (0.5, 0.25)),
          ((0.5, 0), (0.5, 0.1))],
    '-': [((0.2, 0.5), (0.8, 0.5))],
    '_': [((0, 0), (1, 0))],
    ':': [((0.4, 0.6), (0.6, 0.6)), ((0.6, 0.6), (0.6, 0.75)), ((0.6, 0.75), (0.4, 0.75)),
          ((0.4, 0.75), (0.4, 0.6)), ((0.4, 0.1), (0.6, 0.1)), ((0.6, 0.1), (0.6, 0.25)),
          ((0.6, 0.25), (0.4, 0.25)), ((0.4, 0.25), (0.4, 0.1))],
    '/': [((0, 0), (1, 1))],
    '(': [((0.6, 0), (0.4, 0.2)), ((0.4, 0.2), (0.4, 0.8)), ((0.4, 0.8), (0.6, 1))],
    ')': [((0.4, 0), (0.6, 0.2)), ((0.6, 0.2), (0.6, 0.8)), ((0.6, 0.8), (0.4, 1))],
}


class Text3D(Shape):
    """
    Extruded stroke-font text, wireframe only.

    Each stroke becomes a tube: the segment at the front (+depth/2) and
    back (-depth/2) planes plus the two connectors. Glyphs advance by
    char_width + spacing and the whole string is centered on the origin.
    Characters missing from STROKE_FONT contribute no geometry.
    """

    def __init__(self, text: str, char_width: float = 0.6, char_height: float = 1.0,
                 char_depth: float = 0.2, spacing: float = 0.15):
        self.text = text
        self.char_width = char_width
        self.char_height = char_height
        self.char_depth = char_depth
        self.spacing = spacing

    def _strokes(self):
        """Yield (x_offset, segment) for every stroke of the upper-cased text."""
        upper = self.text.upper()
        advance = self.char_width + self.spacing
        start_x = -(len(upper) * advance - self.spacing) / 2.0
        for i, ch in enumerate(upper):
            offset = start_x + i * advance
            for segment in STROKE_FONT.get(ch, ()):
                yield offset, segment

    @cached_property
    def vertices(self):
        half_depth = self.char_depth / 2.0
        w, h = self.char_width, self.char_height
        verts = []
        for offset, ((x1, y1), (x2, y2)) in self._strokes():
            sx, sy = offset + x1 * w, (y1 - 0.5) * h
            ex, ey = offset + x2 * w, (y2 - 0.5) * h
            verts.extend((
                Vec3(sx, sy, half_depth),
                Vec3(ex, ey, half_depth),
                Vec3(sx, sy, -half_depth),
                Vec3(ex, ey, -half_depth),
            ))
        return tuple(verts)

    @cached_property
    def edges(self):
        edges = []
        for j, _ in enumerate(self._strokes()):
            base = j * 4
            edges.extend((
                (base, base + 1),      # front
                (base + 2, base + 3),  # back
                (base, base + 2),
                (base + 1, base + 3),
            ))
        return tuple(edges)
