"""
Shared test fixtures for the ascii3d test suite.
"""

import pytest

from ascii3d.camera import Camera
from ascii3d.config import RenderConfig, RenderMode, ShadingStyle
from ascii3d.math_utils import Mat4, Vec3
from ascii3d.mesh import Box


# ---------------------------------------------------------------------------
# Cameras
# ---------------------------------------------------------------------------


@pytest.fixture
def front_camera():
    """Camera on +Z at distance 5 looking at the origin."""
    return Camera(position=Vec3(0, 0, 5), target=Vec3.ZERO)


@pytest.fixture
def generic_camera():
    """Orbit camera not aligned with any box face."""
    return Camera.orbit(distance=5.0, azimuth=0.6, elevation=0.4)


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


@pytest.fixture
def box():
    return Box()


@pytest.fixture
def identity():
    return Mat4.identity()


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------


@pytest.fixture
def ascii_config():
    return RenderConfig(render_mode=RenderMode.ASCII)


@pytest.fixture
def depth_config():
    return RenderConfig(render_mode=RenderMode.SOLID_ASCII, shading_style=ShadingStyle.DEPTH)
