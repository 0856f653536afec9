#
# PROJECT: ascii3d
# MODULE: ascii3d/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Frame buffers and their text encoders.

All buffers are flat row-major lists (index ``y * width + x``) with a
parallel depth store; lower depth is nearer and a write only lands when
it is strictly nearer than what is already there.
"""

INF = float('inf')

# ASCII characters from dark to light
ASCII_RAMP = " .:-=+*#%@"

BRAILLE_BASE = 0x2800
BRAILLE_EMPTY = chr(BRAILLE_BASE)

# Braille dot mapping for a 2x4 cell, indexed by (row + col * 4):
#  1 4
#  2 5
#  3 6
#  7 8
BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

# Ordered-dither thresholds per sub-pixel, indexed by (row * 2 + col)
DITHER_THRESHOLDS = (
    0.875, 0.625,
    0.375, 0.125,
    0.750, 0.500,
    0.250, 1.000,
)
# Dot forced on for a lit cell whose samples all fall below threshold
CENTER_DOT = 0x10


def braille_bit(dx: int, dy: int) -> int:
    """Dot bit for column dx (0-1) and row dy (0-3) of a Braille cell."""
    return BRAILLE_REMAP[dy + dx * 4]


def braille_char(mask: int) -> str:
    return chr(BRAILLE_BASE + mask)


def encode_shaded_cell(samples) -> str:
    """
    Convert the 8 brightness samples of one cell (row-major, -1 = untouched)
    to a Braille glyph.

    A dot is set when its sample reaches its dither threshold. A touched
    cell that lights no dot but has a nonzero mean brightness gets the
    single center dot so faint surfaces stay visible.
    """
    total = 0.0
    touched = 0
    mask = 0
    for i, b in enumerate(samples):
        if b < 0:
            continue
        touched += 1
        total += b
        if b >= DITHER_THRESHOLDS[i]:
            mask |= BRAILLE_REMAP[(i >> 1) + (i & 1) * 4]

    if not touched:
        return BRAILLE_EMPTY
    if mask == 0 and total / touched > 0.0:
        mask = CENTER_DOT
    return braille_char(mask)


class CharBuffer:
    """Character grid with a per-cell depth buffer."""
    __slots__ = ['width', 'height', 'cells', 'depth', 'empty_char']

    def __init__(self, width: int, height: int, empty_char: str = ' '):
        self.width = max(0, width)
        self.height = max(0, height)
        self.empty_char = empty_char
        self.cells = [empty_char] * (self.width * self.height)
        self.depth = [INF] * (self.width * self.height)

    def clear(self):
        n = self.width * self.height
        self.cells = [self.empty_char] * n
        self.depth = [INF] * n

    def set_pixel(self, x: int, y: int, char: str, depth: float = 0.0):
        if x < 0 or x >= self.width or y < 0 or y >= self.height: return
        i = y * self.width + x
        if depth < self.depth[i]:
            self.depth[i] = depth
            self.cells[i] = char

    def get_pixel(self, x: int, y: int) -> str:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return self.empty_char
        return self.cells[y * self.width + x]

    def render(self) -> str:
        w = self.width
        return '\n'.join(''.join(self.cells[y * w:(y + 1) * w]) for y in range(self.height))


class BrailleBuffer:
    """
    Dot buffer at 2x4 sub-pixel resolution per terminal cell.

    ``cells`` holds one dot mask per character cell; ``depth`` is kept per
    sub-pixel.
    """
    __slots__ = ['width', 'height', 'pixel_width', 'pixel_height', 'cells', 'depth']

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self.pixel_width = self.width * 2
        self.pixel_height = self.height * 4
        self.cells = [0] * (self.width * self.height)
        self.depth = [INF] * (self.pixel_width * self.pixel_height)

    def clear(self):
        self.cells = [0] * (self.width * self.height)
        self.depth = [INF] * (self.pixel_width * self.pixel_height)

    def set_pixel(self, px: int, py: int, depth: float = 0.0):
        if px < 0 or px >= self.pixel_width or py < 0 or py >= self.pixel_height: return
        i = py * self.pixel_width + px
        if not depth < self.depth[i]:
            return
        self.depth[i] = depth
        # (py & 3) gives row 0-3 in block, (px & 1) gives col 0-1
        self.cells[(py >> 2) * self.width + (px >> 1)] |= BRAILLE_REMAP[(py & 3) + (px & 1) * 4]

    def get_cell(self, cx: int, cy: int) -> int:
        if cx < 0 or cx >= self.width or cy < 0 or cy >= self.height:
            return 0
        return self.cells[cy * self.width + cx]

    def render(self) -> str:
        w = self.width
        return '\n'.join(
            ''.join(braille_char(mask) for mask in self.cells[y * w:(y + 1) * w])
            for y in range(self.height))


class ShadeBuffer:
    """
    Sub-pixel brightness buffer for solid Braille output.

    Brightness samples are stored raw (-1 marks an untouched sub-pixel) and
    only quantized to dots by encode_shaded_cell at render time.
    """
    __slots__ = ['width', 'height', 'pixel_width', 'pixel_height', 'brightness', 'depth']

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self.pixel_width = self.width * 2
        self.pixel_height = self.height * 4
        n = self.pixel_width * self.pixel_height
        self.brightness = [-1.0] * n
        self.depth = [INF] * n

    def clear(self):
        n = self.pixel_width * self.pixel_height
        self.brightness = [-1.0] * n
        self.depth = [INF] * n

    def set_sample(self, px: int, py: int, brightness: float, depth: float = 0.0):
        if px < 0 or px >= self.pixel_width or py < 0 or py >= self.pixel_height: return
        i = py * self.pixel_width + px
        if depth < self.depth[i]:
            self.depth[i] = depth
            self.brightness[i] = brightness

    def get_sample(self, px: int, py: int) -> float:
        if px < 0 or px >= self.pixel_width or py < 0 or py >= self.pixel_height:
            return -1.0
        return self.brightness[py * self.pixel_width + px]

    def cell_samples(self, cx: int, cy: int):
        """The 8 samples of cell (cx, cy), row-major within the cell."""
        pw = self.pixel_width
        b = self.brightness
        samples = []
        for dy in range(4):
            row = (cy * 4 + dy) * pw + cx * 2
            samples.append(b[row])
            samples.append(b[row + 1])
        return samples

    def render(self) -> str:
        lines = []
        for cy in range(self.height):
            lines.append(''.join(encode_shaded_cell(self.cell_samples(cx, cy))
                                 for cx in range(self.width)))
        return '\n'.join(lines)
