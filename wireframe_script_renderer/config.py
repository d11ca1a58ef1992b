#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass
from typing import Optional

from .primitives import DEFAULT_CURVE_STEP, DEFAULT_SURFACE_STEP


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    xres: int = 500
    yres: int = 500
    ppm_filename: str = "pic.ppm"
    convert_command: str = "convert"
    # None shows a text preview on the terminal instead of launching a viewer
    viewer_command: Optional[str] = "display"
    curve_step: float = DEFAULT_CURVE_STEP
    circle_step: float = DEFAULT_CURVE_STEP
    surface_step: float = DEFAULT_SURFACE_STEP
    use_braille: bool = True

    def __post_init__(self):
        if self.xres <= 0 or self.yres <= 0:
            raise ValueError(f"resolution must be positive, got {self.xres}x{self.yres}")
        for name in ('curve_step', 'circle_step', 'surface_step'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    @classmethod
    def from_environment(cls) -> 'RenderConfig':
        """
        Build a default config, overridden by WIREFRAME_* environment variables.
        Braille preview support is guessed from TERM and LANG.
        """
        env = os.environ
        term = env.get('TERM', '').lower()
        lang = env.get('LANG', '').lower()

        supports_utf8 = 'utf-8' in lang or 'utf8' in lang
        # Linux console font often lacks braille
        use_braille = supports_utf8 and term not in ('linux', 'dumb')

        kwargs = {'use_braille': use_braille}
        if 'WIREFRAME_XRES' in env:
            kwargs['xres'] = int(env['WIREFRAME_XRES'])
        if 'WIREFRAME_YRES' in env:
            kwargs['yres'] = int(env['WIREFRAME_YRES'])
        if 'WIREFRAME_CONVERT' in env:
            kwargs['convert_command'] = env['WIREFRAME_CONVERT']
        if 'WIREFRAME_VIEWER' in env:
            kwargs['viewer_command'] = env['WIREFRAME_VIEWER'] or None
        return cls(**kwargs)
