#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from enum import Enum

from .canvas import Canvas
from .color import BLACK
from .edges import EdgeMatrix

logger = logging.getLogger(__name__)


class LineRegime(Enum):
    """Slope class of a left-to-right line; each has its own decision recurrence."""
    VERTICAL = 'vertical'
    SHALLOW_POS = 'shallow_pos'   # slope in [0, 1]
    STEEP_POS = 'steep_pos'       # slope in (1, inf)
    SHALLOW_NEG = 'shallow_neg'   # slope in [-1, 0)
    STEEP_NEG = 'steep_neg'       # slope in (-inf, -1)


def _order(x0, y0, x1, y1):
    if x1 < x0:
        return x1, y1, x0, y0
    return x0, y0, x1, y1


def classify_line(x0, y0, x1, y1) -> LineRegime:
    x0, y0, x1, y1 = _order(x0, y0, x1, y1)
    a = y1 - y0
    b = x0 - x1
    if b == 0:
        return LineRegime.VERTICAL
    slope = a / -b
    if 0 <= slope <= 1:
        return LineRegime.SHALLOW_POS
    if slope > 1:
        return LineRegime.STEEP_POS
    if slope >= -1:
        return LineRegime.SHALLOW_NEG
    return LineRegime.STEEP_NEG


# ── Per-regime walks ────────────────────────────────────────────────────
# A = y1 - y0 and B = x0 - x1 (always negative here).  The decision variable
# is doubled so every update is a whole multiple of A or B.

def _walk_vertical(x0, y0, x1, y1, a, b):
    y, y_end = (y0, y1) if y0 <= y1 else (y1, y0)
    while y <= y_end:
        yield x0, y
        y += 1


def _walk_shallow_pos(x0, y0, x1, y1, a, b):
    x, y = x0, y0
    d = 2 * a + b
    while x <= x1 and y <= y1:
        yield x, y
        if d > 0:
            y += 1
            d += 2 * b
        x += 1
        d += 2 * a


def _walk_steep_pos(x0, y0, x1, y1, a, b):
    x, y = x0, y0
    d = a + 2 * b
    while x <= x1 and y <= y1:
        yield x, y
        if d < 0:
            x += 1
            d += 2 * a
        y += 1
        d += 2 * b


def _walk_shallow_neg(x0, y0, x1, y1, a, b):
    x, y = x0, y0
    d = 2 * a - b
    while x <= x1 and y >= y1:
        yield x, y
        if d < 0:
            y -= 1
            d -= 2 * b
        x += 1
        d += 2 * a


def _walk_steep_neg(x0, y0, x1, y1, a, b):
    x, y = x0, y0
    d = a - 2 * b
    while x <= x1 and y >= y1:
        yield x, y
        if d > 0:
            x += 1
            d += 2 * a
        y -= 1
        d -= 2 * b


_WALKS = {
    LineRegime.VERTICAL: _walk_vertical,
    LineRegime.SHALLOW_POS: _walk_shallow_pos,
    LineRegime.STEEP_POS: _walk_steep_pos,
    LineRegime.SHALLOW_NEG: _walk_shallow_neg,
    LineRegime.STEEP_NEG: _walk_steep_neg,
}

_RISING = (LineRegime.VERTICAL, LineRegime.SHALLOW_POS, LineRegime.STEEP_POS)


def trace_line(x0, y0, x1, y1):
    """Yield every (x, y) visited on the way from (x0, y0) to (x1, y1), unrounded."""
    x0, y0, x1, y1 = _order(x0, y0, x1, y1)
    regime = classify_line(x0, y0, x1, y1)
    return _WALKS[regime](x0, y0, x1, y1, y1 - y0, x0 - x1)


# ── Plotting ────────────────────────────────────────────────────────────

def round_half_up(f: float) -> int:
    """Round to nearest, halves going up.  Negative values truncate toward zero."""
    whole = int(f)
    if f - whole < 0.5:
        return whole
    return whole + 1


def plot(canvas: Canvas, x, y, color=BLACK):
    """Write one pixel at logical (x, y); (0, 0) is the bottom-left corner."""
    canvas.set_pixel(round_half_up(x), canvas.h - round_half_up(y) - 1, color)


def draw_line(canvas: Canvas, x0, y0, x1, y1, color=BLACK):
    """Plot the traced line, stopping once the walk has left the canvas for good."""
    rising = classify_line(x0, y0, x1, y1) in _RISING
    for x, y in trace_line(x0, y0, x1, y1):
        # x never decreases; y moves one way only
        if round_half_up(x) >= canvas.w:
            break
        row = round_half_up(y)
        if (rising and row >= canvas.h) or (not rising and row < 0):
            break
        plot(canvas, x, y, color)


def draw_lines(edges: EdgeMatrix, canvas: Canvas, color=BLACK):
    """Draw every edge of the matrix, dropping z."""
    count = 0
    for start, end in edges.edge_pairs():
        draw_line(canvas, start[0], start[1], end[0], end[1], color)
        count += 1
    logger.debug("Rasterized %d edges", count)
    return count
