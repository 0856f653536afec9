#
# PROJECT: ascii3d
# MODULE: ascii3d/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .canvas import ASCII_RAMP, BrailleBuffer, CharBuffer, ShadeBuffer
from .config import RenderConfig, RenderMode, ShadingStyle, DEFAULT_LIGHT_DIRECTION
from .math_utils import Mat4
from .projection import front_faces, project, project_vertices, visible_edges
from .rasterizer import draw_line, fill_triangle

SOLID_BRIGHTNESS = 0.7


def shade(style: ShadingStyle, normal, avg_depth: float, light_direction, ambient: float) -> float:
    """Brightness in [0, 1] of a face for the given shading style."""
    if style is ShadingStyle.DEPTH:
        # Nearer (lower NDC depth) is brighter
        return (1 - max(-1.0, min(1.0, avg_depth))) / 2
    if style is ShadingStyle.LIT:
        return ambient + (1 - ambient) * max(0.0, normal.dot(light_direction))
    return SOLID_BRIGHTNESS


def ramp_char(ramp: str, brightness: float) -> str:
    """Pick the ramp glyph for a brightness in [0, 1] (dark to light)."""
    idx = int(math.floor(brightness * (len(ramp) - 1) + 0.5))
    return ramp[max(0, min(len(ramp) - 1, idx))]


class WireframeRenderer:
    """
    Shared edge-drawing pipeline for the ASCII and Braille wireframe modes.

    Subclasses supply the buffer, its pixel resolution and how a depth
    tested point is plotted.
    """

    def __init__(self, width: int, height: int, aspect_correction: float = 2.0):
        self.width = width
        self.height = height
        self.aspect_correction = aspect_correction

    @property
    def pixel_width(self) -> int:
        return self.buffer.width

    @property
    def pixel_height(self) -> int:
        return self.buffer.height

    def project(self, point, view_projection: Mat4):
        return project(point, view_projection, self.pixel_width, self.pixel_height,
                       self.aspect_correction)

    def _plot(self, x, y, depth):
        raise NotImplementedError

    def _plot_particle(self, particle, p):
        self._plot(p.x, p.y, p.depth)

    def _draw_edges(self, edges, projected):
        pw, ph = self.pixel_width, self.pixel_height
        for a, b in edges:
            p0 = projected[a]
            p1 = projected[b]
            # Skip edges with an endpoint behind the camera
            if p0 is None or p1 is None:
                continue
            draw_line(self._plot, p0.x, p0.y, p1.x, p1.y, p0.depth, p1.depth, pw, ph)

    def render_shape(self, shape, model_matrix: Mat4, view_projection: Mat4):
        """Draw every edge of the shape."""
        mvp = view_projection @ model_matrix
        projected = project_vertices(shape.vertices, mvp, self.pixel_width, self.pixel_height,
                                     self.aspect_correction)
        self._draw_edges(shape.edges, projected)

    def render_shape_culled(self, shape, model_matrix: Mat4, view_projection: Mat4):
        """Draw only the edges of front-facing triangles."""
        mvp = view_projection @ model_matrix
        edges = visible_edges(shape, mvp, self.pixel_width, self.pixel_height,
                              self.aspect_correction)
        projected = project_vertices(shape.vertices, mvp, self.pixel_width, self.pixel_height,
                                     self.aspect_correction)
        self._draw_edges(edges, projected)

    def render_particles(self, particles, view_projection: Mat4, transform: Mat4 = None):
        """Plot particles as single depth-tested points, optionally moved by transform."""
        for particle in particles:
            pos = particle.position
            if transform is not None:
                pos = transform.transform_point(pos)
            p = self.project(pos, view_projection)
            if p is not None:
                self._plot_particle(particle, p)

    def clear(self):
        self.buffer.clear()

    def get_frame(self) -> str:
        return self.buffer.render()


class AsciiRenderer(WireframeRenderer):
    """Wireframe drawn with one glyph per character cell; particles use their own glyph."""

    def __init__(self, width: int, height: int, aspect_correction: float = 2.0,
                 wireframe_char: str = '*'):
        super().__init__(width, height, aspect_correction)
        self.wireframe_char = wireframe_char
        self.buffer = CharBuffer(width, height)

    def _plot(self, x, y, depth):
        self.buffer.set_pixel(x, y, self.wireframe_char, depth)

    def _plot_particle(self, particle, p):
        self.buffer.set_pixel(p.x, p.y, particle.char, p.depth)


class BrailleRenderer(WireframeRenderer):
    """Wireframe drawn as Braille dots at 2x4 sub-pixels per cell."""

    def __init__(self, width: int, height: int, aspect_correction: float = 2.0):
        super().__init__(width, height, aspect_correction)
        self.buffer = BrailleBuffer(width, height)

    @property
    def pixel_width(self) -> int:
        return self.buffer.pixel_width

    @property
    def pixel_height(self) -> int:
        return self.buffer.pixel_height

    def _plot(self, x, y, depth):
        self.buffer.set_pixel(x, y, depth)


class SolidRenderer(WireframeRenderer):
    """
    Shaded-triangle pipeline shared by the solid ASCII and Braille modes.

    Front-facing triangles get a flat brightness from the shading style,
    are ordered back-to-front by mean depth and scanline filled with a
    per-pixel depth test. ShadingStyle.WIREFRAME falls back to edges.
    """

    def __init__(self, width: int, height: int, aspect_correction: float = 2.0,
                 light_direction=None, ambient_light: float = 0.1):
        super().__init__(width, height, aspect_correction)
        light = light_direction if light_direction is not None else DEFAULT_LIGHT_DIRECTION
        self.light_direction = light.normalize()
        self.ambient_light = ambient_light

    def _fill(self, p0, p1, p2, brightness):
        raise NotImplementedError

    def render_shape(self, shape, model_matrix: Mat4, view_projection: Mat4,
                     style: ShadingStyle = ShadingStyle.LIT):
        if style is ShadingStyle.WIREFRAME:
            super().render_shape(shape, model_matrix, view_projection)
            return

        mvp = view_projection @ model_matrix
        vertices = shape.vertices
        projected = project_vertices(vertices, mvp, self.pixel_width, self.pixel_height,
                                     self.aspect_correction)

        queue = []
        for face, p0, p1, p2 in front_faces(shape.faces, projected):
            v0 = vertices[face[0]]
            local_normal = (vertices[face[1]] - v0).cross(vertices[face[2]] - v0).normalize()
            world_normal = model_matrix.transform_direction(local_normal).normalize()
            avg_depth = (p0.depth + p1.depth + p2.depth) / 3
            brightness = shade(style, world_normal, avg_depth,
                               self.light_direction, self.ambient_light)
            queue.append((avg_depth, p0, p1, p2, brightness))

        # Painter's order (far first); the depth buffer still decides each pixel
        queue.sort(key=lambda entry: entry[0], reverse=True)
        for _depth, p0, p1, p2, brightness in queue:
            self._fill(p0, p1, p2, brightness)


class SolidAsciiRenderer(SolidRenderer):
    """Solid faces drawn with a dark-to-light character ramp."""

    def __init__(self, width: int, height: int, aspect_correction: float = 2.0,
                 light_direction=None, ambient_light: float = 0.1,
                 shading_ramp: str = ASCII_RAMP, wireframe_char: str = '*'):
        super().__init__(width, height, aspect_correction, light_direction, ambient_light)
        self.shading_ramp = shading_ramp
        self.wireframe_char = wireframe_char
        self.buffer = CharBuffer(width, height)

    def _plot(self, x, y, depth):
        self.buffer.set_pixel(x, y, self.wireframe_char, depth)

    def _plot_particle(self, particle, p):
        self.buffer.set_pixel(p.x, p.y, particle.char, p.depth)

    def _fill(self, p0, p1, p2, brightness):
        char = ramp_char(self.shading_ramp, brightness)
        buf = self.buffer
        fill_triangle(lambda x, y, d: buf.set_pixel(x, y, char, d),
                      p0, p1, p2, buf.width, buf.height)


class SolidBrailleRenderer(SolidRenderer):
    """Solid faces as per-sub-pixel brightness, dithered to Braille dots on output."""

    def __init__(self, width: int, height: int, aspect_correction: float = 2.0,
                 light_direction=None, ambient_light: float = 0.1):
        super().__init__(width, height, aspect_correction, light_direction, ambient_light)
        self.buffer = ShadeBuffer(width, height)

    @property
    def pixel_width(self) -> int:
        return self.buffer.pixel_width

    @property
    def pixel_height(self) -> int:
        return self.buffer.pixel_height

    def _plot(self, x, y, depth):
        self.buffer.set_sample(x, y, 1.0, depth)

    def _fill(self, p0, p1, p2, brightness):
        buf = self.buffer
        fill_triangle(lambda x, y, d: buf.set_sample(x, y, brightness, d),
                      p0, p1, p2, buf.pixel_width, buf.pixel_height)


def create_renderer(mode: RenderMode, width: int, height: int, config: RenderConfig = None):
    """Build a fresh renderer for the given mode and target size (in cells)."""
    config = config if config is not None else RenderConfig(render_mode=mode)
    ac = config.aspect_correction
    if mode in (RenderMode.ASCII, RenderMode.ASCII_CULLED):
        return AsciiRenderer(width, height, ac, config.wireframe_char)
    if mode in (RenderMode.BRAILLE, RenderMode.BRAILLE_CULLED):
        return BrailleRenderer(width, height, ac)
    if mode is RenderMode.SOLID_ASCII:
        return SolidAsciiRenderer(width, height, ac, config.light_direction,
                                  config.ambient_light, config.shading_ramp,
                                  config.wireframe_char)
    if mode is RenderMode.SOLID_BRAILLE:
        return SolidBrailleRenderer(width, height, ac, config.light_direction,
                                    config.ambient_light)
    raise ValueError(f"Unknown render mode: {mode!r}")
