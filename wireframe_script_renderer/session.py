#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/session.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from typing import Optional

from . import primitives
from .canvas import Canvas
from .color import BLACK, named_color
from .commands import (
    BoxArgs, CircleArgs, CurveArgs, LineArgs, RotateArgs, ScaleArgs,
    SphereArgs, TorusArgs, TranslateArgs,
)
from .config import RenderConfig
from .edges import EdgeMatrix
from .errors import UnknownColorName
from .math_utils import Matrix, curve_basis, multiply
from .rasterizer import draw_lines

logger = logging.getLogger(__name__)


class RenderSession:
    """
    Mutable state of one script run: the running transform, the edge matrix,
    the pixel buffer and the current draw color.

    A session has a single writer (the script interpreter); nothing here is
    locked.  The transform is None until the first transform step or `ident`.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()
        self.transform: Optional[Matrix] = None
        self.edges = EdgeMatrix()
        self.canvas = Canvas(self.config.xres, self.config.yres)
        self.color = BLACK

    # ── Transform ───────────────────────────────────────────────────────
    def reset_transform(self):
        self.transform = Matrix.identity()

    def compose_step(self, step: Matrix) -> Matrix:
        """Fold `step` into the running transform so it applies after earlier steps."""
        if self.transform is None:
            self.transform = step
        else:
            multiply(step, self.transform)
        return self.transform

    def translate(self, args: TranslateArgs) -> Matrix:
        return self.compose_step(Matrix.translation(args.tx, args.ty, args.tz))

    def dilate(self, args: ScaleArgs) -> Matrix:
        return self.compose_step(Matrix.dilation(args.sx, args.sy, args.sz))

    def rotate(self, args: RotateArgs) -> Matrix:
        return self.compose_step(Matrix.rotation(args.axis, args.degrees))

    def apply_transform(self):
        """Multiply the transform into the edge matrix, overwriting the edges."""
        if self.transform is None:
            logger.warning("apply with no transform set; edges left unchanged")
            return self.edges
        multiply(self.transform, self.edges)
        logger.debug("Applied transform to %d points", self.edges.point_count)
        return self.edges

    # ── Edges ───────────────────────────────────────────────────────────
    def clear_edges(self):
        self.edges.clear()

    def add_line(self, args: LineArgs):
        self.edges.add_edge(args.x0, args.y0, args.z0, args.x1, args.y1, args.z1)

    def add_circle(self, args: CircleArgs):
        primitives.add_circle(self.edges, args.cx, args.cy, args.cz, args.r,
                              step=self.config.circle_step)

    def add_curve(self, args: CurveArgs, kind: str):
        # Resolve the basis first so an unknown kind fails before any point is added.
        curve_basis(kind)
        primitives.add_curve(self.edges,
                             args.x0, args.y0, args.x1, args.y1,
                             args.x2, args.y2, args.x3, args.y3,
                             step=self.config.curve_step, kind=kind)

    def add_box(self, args: BoxArgs):
        primitives.add_box(self.edges, args.x, args.y, args.z,
                           args.width, args.height, args.depth)

    def add_sphere(self, args: SphereArgs):
        primitives.add_sphere(self.edges, args.cx, args.cy, args.cz, args.r,
                              step=self.config.surface_step)

    def add_torus(self, args: TorusArgs):
        primitives.add_torus(self.edges, args.cx, args.cy, args.cz, args.r1, args.r2,
                             step=self.config.surface_step)

    # ── Raster ──────────────────────────────────────────────────────────
    def rasterize(self) -> int:
        return draw_lines(self.edges, self.canvas, self.color)

    def set_color(self, name: str):
        """Switch the draw color.  Unknown names leave the color unchanged."""
        try:
            self.color = named_color(name)
        except UnknownColorName as exc:
            logger.debug("Ignoring color change: %s", exc)

    def reset_buffer(self):
        self.canvas.clear()
