#
# PROJECT: ascii3d
# MODULE: ascii3d/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, Mat4
from .config import RenderConfig, RenderMode, ShadingStyle
from .canvas import CharBuffer, BrailleBuffer, ShadeBuffer, ASCII_RAMP
from .mesh import Shape, Face, Box, Pyramid, Mesh, MeshLoadError
from .text_mesh import Text3D
from .camera import Camera
from .particles import (Particle, Emitter, PointEmitter, BoxEmitter, SphereEmitter,
                        ParticleSystem)
from .projection import ProjectedPoint, project, visible_edges
from .renderer import (AsciiRenderer, BrailleRenderer, SolidAsciiRenderer,
                       SolidBrailleRenderer, create_renderer)
from .scene import SceneNode, ParticleSceneNode, Scene, render
