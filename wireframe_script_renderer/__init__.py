#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Matrix, multiply, extract_column, dot, bezier_basis, hermite_basis
from .edges import EdgeMatrix
from .config import RenderConfig
from .color import named_color, parse_hex_color
from .canvas import Canvas
from .rasterizer import LineRegime, draw_line, draw_lines
from .session import RenderSession
from .parser import ScriptInterpreter, parse_floats
from .display import Exporter, save_image, write_ppm
from .errors import RenderError, ScriptError
