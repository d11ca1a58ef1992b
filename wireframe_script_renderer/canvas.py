#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .color import BLACK


class Canvas:
    """
    Fixed-size RGB pixel buffer.

    grid[row][col] holds an (r, g, b) tuple.  Row 0 is the top of the image;
    the rasterizer is responsible for flipping logical y before writing.
    """
    __slots__ = ['w', 'h', 'grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.grid = [[BLACK] * w for _ in range(h)]

    def set_pixel(self, x, y, color):
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return
        self.grid[y][x] = color

    def get_pixel(self, x, y):
        return self.grid[y][x]

    def clear(self):
        self.grid = [[BLACK] * self.w for _ in range(self.h)]

    def rows(self):
        """Rows top to bottom, the order image formats scan them."""
        return iter(self.grid)

    def lit_pixels(self, background=BLACK) -> set:
        """Set of (x, y) buffer cells whose color differs from `background`."""
        return {
            (x, y)
            for y, row in enumerate(self.grid)
            for x, rgb in enumerate(row)
            if rgb != background
        }


def cell_mask(canvas: Canvas, cx: int, cy: int, background=BLACK) -> int:
    """
    8-bit mask of lit pixels in the 2x4 block at cell (cx, cy).
    Bit index 0-3 is the left column top to bottom, 4-7 the right column.
    """
    mask = 0
    for dy in range(4):
        y = cy * 4 + dy
        if y >= canvas.h:
            break
        row = canvas.grid[y]
        for dx in range(2):
            x = cx * 2 + dx
            if x < canvas.w and row[x] != background:
                mask |= 1 << (dy + dx * 4)
    return mask


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '

    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)


def preview_lines(canvas: Canvas, use_braille: bool = True, background=BLACK) -> list:
    """Render the buffer as text, one character per 2x4 pixel block."""
    render = render_cell_braille if use_braille else render_cell_ascii
    cols = (canvas.w + 1) // 2
    rows = (canvas.h + 3) // 4
    lines = []
    for cy in range(rows):
        line = ''.join(render(cell_mask(canvas, cx, cy, background)) for cx in range(cols))
        lines.append(line.rstrip())
    return lines
