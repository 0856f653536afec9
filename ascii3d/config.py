#
# PROJECT: ascii3d
# MODULE: ascii3d/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .canvas import ASCII_RAMP, BRAILLE_EMPTY
from .math_utils import Vec3

DEFAULT_LIGHT_DIRECTION = Vec3(0.5, 0.8, 1.0)


class RenderMode(Enum):
    """Which renderer turns the scene into text."""
    ASCII = 'ascii'
    BRAILLE = 'braille'
    ASCII_CULLED = 'ascii-culled'
    BRAILLE_CULLED = 'braille-culled'
    SOLID_ASCII = 'solid-ascii'
    SOLID_BRAILLE = 'solid-braille'

    @property
    def is_braille(self) -> bool:
        return self in (RenderMode.BRAILLE, RenderMode.BRAILLE_CULLED, RenderMode.SOLID_BRAILLE)

    @property
    def is_solid(self) -> bool:
        return self in (RenderMode.SOLID_ASCII, RenderMode.SOLID_BRAILLE)

    @property
    def is_culled(self) -> bool:
        return self in (RenderMode.ASCII_CULLED, RenderMode.BRAILLE_CULLED)

    @property
    def empty_char(self) -> str:
        return BRAILLE_EMPTY if self.is_braille else ' '


class ShadingStyle(Enum):
    """Brightness model used by the solid renderers."""
    WIREFRAME = 'wireframe'
    SOLID = 'solid'
    DEPTH = 'depth'
    LIT = 'lit'


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    render_mode: RenderMode = RenderMode.BRAILLE
    shading_style: ShadingStyle = ShadingStyle.LIT
    wireframe_char: str = '*'
    light_direction: Optional[Vec3] = None
    aspect_correction: float = 2.0
    ambient_light: float = 0.1
    shading_ramp: str = ASCII_RAMP

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ValueError for settings no renderer can honour."""
        if len(self.wireframe_char) != 1:
            raise ValueError(f"wireframe_char must be a single glyph, got {self.wireframe_char!r}")
        if not self.shading_ramp:
            raise ValueError("shading_ramp must not be empty")
        if not 0.0 <= self.ambient_light <= 1.0:
            raise ValueError(f"ambient_light must be within [0, 1], got {self.ambient_light}")
        if self.aspect_correction <= 0:
            raise ValueError(f"aspect_correction must be positive, got {self.aspect_correction}")

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        # Linux console font often lacks braille, so default off there
        use_braille = supports_utf8 and not is_linux_console
        return cls(render_mode=RenderMode.BRAILLE if use_braille else RenderMode.ASCII)
