"""Tests for projection and back-face culling."""

import pytest

from ascii3d.camera import Camera
from ascii3d.math_utils import Mat4, Vec3
from ascii3d.mesh import Box, Face, Pyramid
from ascii3d.projection import (ProjectedPoint, front_facing_faces, is_front_facing,
                                normalize_edge, project, project_vertices, signed_area,
                                visible_edges)


# ---------------------------------------------------------------------------
# project()
# ---------------------------------------------------------------------------


class TestProject:
    @pytest.mark.parametrize("width,height", [(2, 2), (3, 7), (80, 24), (41, 41), (120, 9)])
    def test_origin_lands_at_center(self, front_camera, width, height):
        vp = front_camera.view_projection_matrix(1.0)
        p = project(Vec3.ZERO, vp, width, height)
        assert p is not None
        assert abs(p.x - width / 2) <= 1
        assert abs(p.y - height / 2) <= 1

    def test_point_behind_camera_rejected(self, front_camera):
        vp = front_camera.view_projection_matrix(1.0)
        assert project(Vec3(0, 0, 10), vp, 80, 24) is None

    def test_point_in_camera_plane_rejected(self, front_camera):
        vp = front_camera.view_projection_matrix(1.0)
        assert project(Vec3(1, 1, 5), vp, 80, 24) is None

    def test_screen_y_grows_downward(self, front_camera):
        vp = front_camera.view_projection_matrix(1.0)
        up = project(Vec3(0, 1, 0), vp, 80, 80)
        down = project(Vec3(0, -1, 0), vp, 80, 80)
        assert up.y < down.y

    def test_aspect_correction_widens_x(self, front_camera):
        vp = front_camera.view_projection_matrix(1.0)
        narrow = project(Vec3(1, 0, 0), vp, 80, 80, aspect_correction=1.0, snap=False)
        wide = project(Vec3(1, 0, 0), vp, 80, 80, aspect_correction=2.0, snap=False)
        assert wide.x - 40 == pytest.approx(2 * (narrow.x - 40))

    def test_snap_rounds_to_integers(self, front_camera):
        vp = front_camera.view_projection_matrix(1.0)
        p = project(Vec3(0.123, 0.456, 0), vp, 80, 24)
        assert p.x == int(p.x) and p.y == int(p.y)

    def test_nearer_points_have_lower_depth(self, front_camera):
        vp = front_camera.view_projection_matrix(1.0)
        near = project(Vec3(0, 0, 2), vp, 80, 24)
        far = project(Vec3(0, 0, -2), vp, 80, 24)
        assert near.depth < far.depth

    def test_overflowing_point_rejected(self, front_camera):
        vp = front_camera.view_projection_matrix(1.0)
        assert project(Vec3(1e308, 0, 0), vp, 80, 24) is None

    def test_tiny_w_rejected(self):
        tiny_w = Mat4((1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 5e-324))
        assert project(Vec3(1, 0, 0), tiny_w, 80, 24) is None
        assert project(Vec3.ZERO, tiny_w, 80, 24) == ProjectedPoint(40, 12, 0.0)

    def test_coordinates_beyond_limit_rejected(self):
        assert project(Vec3(1, 0, 0), Mat4.scale(1e200, 1, 1), 80, 24) is None
        assert project(Vec3(1, 0, 0), Mat4.scale(1e200, 1, 1), 80, 24, snap=False) is None

    def test_project_vertices_keeps_indices(self, front_camera):
        vp = front_camera.view_projection_matrix(1.0)
        out = project_vertices([Vec3.ZERO, Vec3(0, 0, 10)], vp, 80, 24)
        assert isinstance(out[0], ProjectedPoint)
        assert out[1] is None


# ---------------------------------------------------------------------------
# Culling
# ---------------------------------------------------------------------------


class TestWinding:
    def test_signed_area_sign(self):
        assert signed_area((0, 0), (1, 0), (0, 1)) == 1
        assert signed_area((0, 0), (0, 1), (1, 0)) == -1

    def test_negative_area_is_front_facing(self):
        assert is_front_facing((0, 0), (0, 1), (1, 0))
        assert not is_front_facing((0, 0), (1, 0), (0, 1))

    def test_zero_area_is_back_facing(self):
        assert not is_front_facing((0, 0), (1, 1), (2, 2))

    def test_normalize_edge(self):
        assert normalize_edge(5, 2) == (2, 5)
        assert normalize_edge(2, 5) == (2, 5)


class TestBackFaceCulling:
    def test_face_toward_camera_is_front_facing(self, front_camera):
        vp = front_camera.view_projection_matrix(2.0)
        faces = front_facing_faces(Box(), vp, 80, 40)
        assert faces == [Face(4, 5, 6), Face(4, 6, 7)]

    def test_generic_view_sees_some_but_not_all(self, generic_camera):
        vp = generic_camera.view_projection_matrix(2.0)
        faces = front_facing_faces(Box(), vp, 80, 40)
        assert 3 <= len(faces) <= 6

    @pytest.mark.parametrize("azimuth,elevation", [(0.3, 0.2), (2.0, -0.5), (4.0, 1.0), (-1.2, 0.7)])
    def test_convex_shape_never_all_or_nothing(self, azimuth, elevation):
        cam = Camera.orbit(distance=6, azimuth=azimuth, elevation=elevation)
        vp = cam.view_projection_matrix(2.0)
        faces = front_facing_faces(Box(), vp, 80, 40)
        assert 0 < len(faces) < 12

    def test_model_transform_applied(self, front_camera):
        # Turn the box half way round: the -Z face now looks at the camera
        vp = front_camera.view_projection_matrix(2.0)
        mvp = vp @ Mat4.rotation_y(3.141592653589793)
        faces = front_facing_faces(Box(), mvp, 80, 40)
        assert set(faces) == {Face(0, 2, 1), Face(0, 3, 2)}

    def test_visible_edges_unique_and_ordered(self, front_camera):
        vp = front_camera.view_projection_matrix(2.0)
        edges = visible_edges(Box(), vp, 80, 40)
        assert edges == [(4, 5), (5, 6), (4, 6), (6, 7), (4, 7)]

    def test_shape_without_faces_has_no_visible_edges(self, front_camera):
        vp = front_camera.view_projection_matrix(2.0)
        assert visible_edges(Pyramid(), vp, 80, 40) == []
