"""Tests for the look-at camera."""

import math

import pytest

from ascii3d.camera import Camera
from ascii3d.math_utils import Mat4, Vec3


class TestCameraOrbit:
    def test_zero_angles_sit_on_positive_z(self):
        cam = Camera.orbit(distance=5, azimuth=0, elevation=0, target=Vec3.ZERO)
        assert cam.position == Vec3(0, 0, 5)
        assert cam.target == Vec3.ZERO

    def test_quarter_azimuth_moves_to_positive_x(self):
        cam = Camera.orbit(distance=5, azimuth=math.pi / 2)
        assert cam.position.x == pytest.approx(5)
        assert cam.position.z == pytest.approx(0, abs=1e-9)

    def test_elevation_lifts_camera(self):
        cam = Camera.orbit(distance=2, elevation=math.pi / 2)
        assert cam.position.y == pytest.approx(2)

    def test_offset_relative_to_target(self):
        cam = Camera.orbit(distance=3, target=Vec3(1, 1, 1))
        assert cam.position == Vec3(1, 1, 4)
        assert cam.target == Vec3(1, 1, 1)

    def test_distance_preserved(self):
        cam = Camera.orbit(distance=7, azimuth=1.1, elevation=-0.4)
        assert cam.position.length() == pytest.approx(7)


class TestCameraMatrices:
    def test_defaults(self):
        cam = Camera()
        assert cam.position == Vec3(0, 0, 5)
        assert cam.fov == 1.0
        assert cam.near == 0.1
        assert cam.far == 100.0

    def test_view_projection_composition(self):
        cam = Camera.orbit(distance=4, azimuth=0.3, elevation=0.2)
        expected = cam.projection_matrix(2.0) @ cam.view_matrix
        assert cam.view_projection_matrix(2.0) == expected

    def test_view_matrix_is_look_at(self):
        cam = Camera()
        assert cam.view_matrix == Mat4.look_at(cam.position, cam.target, cam.up)


class TestCameraCopyWith:
    def test_changes_only_named_fields(self):
        cam = Camera()
        moved = cam.copy_with(fov=2.0)
        assert moved.fov == 2.0
        assert moved.position == cam.position
        assert cam.fov == 1.0

    def test_unknown_field_raises(self):
        with pytest.raises(TypeError):
            Camera().copy_with(zoom=3)
