"""Tests for the scene graph and full-frame rendering."""

import pytest

from ascii3d.camera import Camera
from ascii3d.canvas import BRAILLE_EMPTY
from ascii3d.config import RenderConfig, RenderMode, ShadingStyle
from ascii3d.math_utils import Mat4, Vec3
from ascii3d.mesh import Mesh
from ascii3d.particles import ParticleSystem, PointEmitter
from ascii3d.scene import ParticleSceneNode, Scene, SceneNode, render

W, H = 40, 20


def _lit_cells(frame, empty=' '):
    return sum(1 for ch in frame if ch not in (empty, '\n'))


# ---------------------------------------------------------------------------
# SceneNode
# ---------------------------------------------------------------------------


class TestSceneNode:
    def test_defaults(self):
        node = SceneNode()
        assert node.shape is None
        assert node.transform == Mat4.identity()
        assert node.children == []

    def test_factories(self, box):
        assert SceneNode.with_shape(box).shape is box
        assert SceneNode.translated(1, 2, 3).transform == Mat4.translation(1, 2, 3)
        assert SceneNode.scaled(2, 2, 2).transform == Mat4.scale(2, 2, 2)
        assert SceneNode.rotated(0.1, 0.2, 0.3).transform == Mat4.rotation(0.1, 0.2, 0.3)
        assert len(SceneNode.group([SceneNode(), SceneNode()]).children) == 2

    def test_walk_is_pre_order(self):
        leaf_a = SceneNode()
        leaf_b = SceneNode()
        mid = SceneNode(children=[leaf_a])
        root = SceneNode(children=[mid, leaf_b])
        order = [node for node, _ in root.walk()]
        assert order == [root, mid, leaf_a, leaf_b]

    def test_world_transform_composes_parent_first(self, box):
        child = SceneNode.translated(0, 2, 0, shape=box)
        root = SceneNode.translated(1, 0, 0, children=[child])
        worlds = dict((id(node), world) for node, world in root.walk())
        assert worlds[id(child)].transform_point(Vec3.ZERO) == Vec3(1, 2, 0)

    def test_rotation_then_child_translation(self):
        child = SceneNode.translated(1, 0, 0)
        root = SceneNode(transform=Mat4.rotation_z(3.141592653589793 / 2), children=[child])
        world = list(root.walk())[1][1]
        p = world.transform_point(Vec3.ZERO)
        assert p.x == pytest.approx(0, abs=1e-9)
        assert p.y == pytest.approx(1)

    def test_copy_with_shares_shape(self, box):
        node = SceneNode.with_shape(box)
        moved = node.copy_with(transform=Mat4.translation(0, 1, 0))
        assert moved.shape is box
        assert node.transform == Mat4.identity()


# ---------------------------------------------------------------------------
# Scene rendering
# ---------------------------------------------------------------------------


class TestSceneRender:
    @pytest.mark.parametrize("mode,empty", [
        (RenderMode.ASCII, ' '),
        (RenderMode.ASCII_CULLED, ' '),
        (RenderMode.SOLID_ASCII, ' '),
        (RenderMode.BRAILLE, BRAILLE_EMPTY),
        (RenderMode.BRAILLE_CULLED, BRAILLE_EMPTY),
        (RenderMode.SOLID_BRAILLE, BRAILLE_EMPTY),
    ])
    def test_empty_scene(self, front_camera, mode, empty):
        frame = Scene(front_camera, config=RenderConfig(render_mode=mode)).render(W, H)
        assert frame == '\n'.join([empty * W] * H)
        assert frame.count('\n') == H - 1

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 3)])
    def test_degenerate_size_is_empty(self, front_camera, width, height):
        assert Scene(front_camera).render(width, height) == ''

    @pytest.mark.parametrize("mode", list(RenderMode))
    def test_every_mode_draws_box(self, generic_camera, box, mode):
        scene = Scene(generic_camera, [SceneNode.with_shape(box)],
                      config=RenderConfig(render_mode=mode))
        frame = scene.render(W, H)
        lines = frame.split('\n')
        assert len(lines) == H
        assert all(len(line) == W for line in lines)
        assert _lit_cells(frame, mode.empty_char) > 0

    @pytest.mark.parametrize("mode", list(RenderMode))
    def test_overflowing_vertex_is_dropped(self, front_camera, mode):
        mesh = Mesh([(1e308, 0, 0), (0, 1, 0), (0, -1, 0), (-1, 0, 0)], [(0, 1, 2), (1, 3, 2)])
        scene = Scene(front_camera, [SceneNode.with_shape(mesh)],
                      config=RenderConfig(render_mode=mode))
        lines = scene.render(W, H).split('\n')
        assert len(lines) == H
        assert all(len(line) == W for line in lines)

    def test_module_render_matches_method(self, generic_camera, box, ascii_config):
        scene = Scene(generic_camera, [SceneNode.with_shape(box)], config=ascii_config)
        assert render(scene, W, H) == scene.render(W, H)

    def test_shared_shape_drawn_at_each_node(self, front_camera, box, ascii_config):
        one = Scene(front_camera, [SceneNode.translated(-1.5, 0, 0, shape=box)],
                    config=ascii_config).render(W, H)
        two = Scene(front_camera, [SceneNode.translated(-1.5, 0, 0, shape=box),
                                   SceneNode.translated(1.5, 0, 0, shape=box)],
                    config=ascii_config).render(W, H)
        assert _lit_cells(two) > _lit_cells(one)

    def test_group_without_shape_renders_children(self, front_camera, box, ascii_config):
        scene = Scene(front_camera, [SceneNode.group([SceneNode.with_shape(box)])],
                      config=ascii_config)
        assert _lit_cells(scene.render(W, H)) > 0

    def test_copy_with(self, front_camera, ascii_config):
        scene = Scene(front_camera, config=ascii_config)
        other = scene.copy_with(camera=Camera.orbit(distance=8))
        assert other.camera.position == Vec3(0, 0, 8)
        assert other.config is ascii_config
        assert scene.camera is front_camera


class TestDepthOrdering:
    """Two overlapping triangles at different depths, submitted in either order."""

    def _triangles(self):
        far = Mesh([(-1, -1, 0), (1, -1, 0), (0, 1, 0)], [(0, 1, 2)])
        near = Mesh([(0, -1, 2), (2, -1, 2), (1, 1, 2)], [(0, 1, 2)])
        return SceneNode.with_shape(far), SceneNode.with_shape(near)

    def test_output_independent_of_submission_order(self, depth_config):
        camera = Camera(position=Vec3(0, 0, 5), near=1.0, far=10.0)
        far, near = self._triangles()
        a = Scene(camera, [far, near], config=depth_config).render(W, H)
        b = Scene(camera, [near, far], config=depth_config).render(W, H)
        assert a == b
        # Nearer triangle is brighter on the depth ramp
        assert ':' in a and '.' in a

    def test_braille_output_independent_of_submission_order(self):
        config = RenderConfig(render_mode=RenderMode.SOLID_BRAILLE,
                              shading_style=ShadingStyle.DEPTH)
        camera = Camera(position=Vec3(0, 0, 5), near=1.0, far=10.0)
        far, near = self._triangles()
        a = Scene(camera, [far, near], config=config).render(W, H)
        b = Scene(camera, [near, far], config=config).render(W, H)
        assert a == b


class TestSceneParticles:
    def _system(self):
        system = ParticleSystem(PointEmitter(chars=('o',)), emission_rate=30,
                                brownian_strength=0.0, seed=1)
        system.update(0.1)
        return system

    def test_particles_drawn(self, front_camera, ascii_config):
        scene = Scene(front_camera, particle_nodes=[ParticleSceneNode(self._system())],
                      config=ascii_config)
        assert 'o' in scene.render(W, H)

    def test_particle_node_transform(self, front_camera, ascii_config):
        node = ParticleSceneNode(self._system(), Mat4.translation(0, 0, 10))
        scene = Scene(front_camera, particle_nodes=[node], config=ascii_config)
        assert _lit_cells(scene.render(W, H)) == 0

    def test_particles_drawn_in_solid_modes(self, front_camera):
        config = RenderConfig(render_mode=RenderMode.SOLID_ASCII)
        scene = Scene(front_camera, particle_nodes=[ParticleSceneNode(self._system())],
                      config=config)
        assert 'o' in scene.render(W, H)

    def test_render_does_not_advance_simulation(self, front_camera, ascii_config):
        system = self._system()
        before = [p.position for p in system.particles]
        Scene(front_camera, particle_nodes=[ParticleSceneNode(system)],
              config=ascii_config).render(W, H)
        assert [p.position for p in system.particles] == before
