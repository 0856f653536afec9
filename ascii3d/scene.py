#
# PROJECT: ascii3d
# MODULE: ascii3d/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .camera import Camera
from .config import RenderConfig
from .math_utils import Mat4
from .renderer import create_renderer

logger = logging.getLogger(__name__)

_IDENTITY = Mat4.identity()


class SceneNode:
    """
    A node in the scene tree.

    Holds an optional shape (shared, never copied), a local transform and
    the child nodes it owns. A child's world transform is
    ``parent_world @ child.transform``.
    """
    __slots__ = ('shape', 'transform', 'children')

    def __init__(self, shape=None, transform: Mat4 = None, children=()):
        self.shape = shape
        self.transform = transform if transform is not None else _IDENTITY
        self.children = list(children)

    def __repr__(self):
        return (f"SceneNode(shape={type(self.shape).__name__ if self.shape else None}, "
                f"children={len(self.children)})")

    @classmethod
    def with_shape(cls, shape, transform: Mat4 = None) -> 'SceneNode':
        return cls(shape=shape, transform=transform)

    @classmethod
    def group(cls, children, transform: Mat4 = None) -> 'SceneNode':
        return cls(transform=transform, children=children)

    @classmethod
    def translated(cls, x, y, z, shape=None, children=()) -> 'SceneNode':
        return cls(shape, Mat4.translation(x, y, z), children)

    @classmethod
    def rotated(cls, rx, ry, rz, shape=None, children=()) -> 'SceneNode':
        """Node rotated by rx, ry, rz radians (X applied first, then Y, then Z)."""
        return cls(shape, Mat4.rotation(rx, ry, rz), children)

    @classmethod
    def scaled(cls, sx, sy, sz, shape=None, children=()) -> 'SceneNode':
        return cls(shape, Mat4.scale(sx, sy, sz), children)

    def copy_with(self, **changes) -> 'SceneNode':
        values = {'shape': self.shape, 'transform': self.transform, 'children': self.children}
        values.update(changes)
        return SceneNode(**values)

    def walk(self, parent_transform: Mat4 = _IDENTITY):
        """Yield (node, world_transform) depth-first, parents before children."""
        world = parent_transform @ self.transform
        yield self, world
        for child in self.children:
            yield from child.walk(world)


class ParticleSceneNode:
    """Attaches a particle system to the scene root under one transform."""
    __slots__ = ('particle_system', 'transform')

    def __init__(self, particle_system, transform: Mat4 = None):
        self.particle_system = particle_system
        self.transform = transform if transform is not None else _IDENTITY


class Scene:
    """
    Declarative scene: camera, node tree, particle attachments and the
    render configuration.

    render(width, height) draws one frame into a freshly allocated buffer:
    the node tree in pre-order, then every particle system in order, and
    returns ``height`` lines of ``width`` glyphs joined by newlines.
    """

    def __init__(self, camera: Camera, nodes=(), particle_nodes=(), config: RenderConfig = None):
        self.camera = camera
        self.nodes = list(nodes)
        self.particle_nodes = list(particle_nodes)
        self.config = config if config is not None else RenderConfig()

    def copy_with(self, **changes) -> 'Scene':
        values = {
            'camera': self.camera,
            'nodes': self.nodes,
            'particle_nodes': self.particle_nodes,
            'config': self.config,
        }
        values.update(changes)
        return Scene(**values)

    def render(self, width: int, height: int) -> str:
        if width <= 0 or height <= 0:
            return ''

        config = self.config
        mode = config.render_mode
        view_projection = self.camera.view_projection_matrix(width / height)
        renderer = create_renderer(mode, width, height, config)

        for root in self.nodes:
            for node, world in root.walk():
                if node.shape is None:
                    continue
                if mode.is_solid:
                    renderer.render_shape(node.shape, world, view_projection, config.shading_style)
                elif mode.is_culled:
                    renderer.render_shape_culled(node.shape, world, view_projection)
                else:
                    renderer.render_shape(node.shape, world, view_projection)

        for particle_node in self.particle_nodes:
            renderer.render_particles(particle_node.particle_system.particles,
                                      view_projection, particle_node.transform)

        logger.debug("Rendered %dx%d frame (%s, %d root nodes, %d particle systems)",
                     width, height, mode.value, len(self.nodes), len(self.particle_nodes))
        return renderer.get_frame()


def render(scene: Scene, width: int, height: int) -> str:
    """Render scene into a width x height block of text."""
    return scene.render(width, height)

