#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .errors import UnknownColorName

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)

PALETTE = {
    'black': BLACK,
    'white': WHITE,
    'yellow': YELLOW,
}


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


def named_color(name: str):
    """Look up a palette name, or a '#RRGGBB' literal."""
    if name in PALETTE:
        return PALETTE[name]
    if name.startswith('#'):
        rgb = parse_hex_color(name)
        if rgb is not None:
            return rgb
    raise UnknownColorName(f"unknown color {name!r}")
