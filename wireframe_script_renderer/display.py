#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/display.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import subprocess
import sys
from pathlib import Path

from .canvas import Canvas, preview_lines
from .config import RenderConfig
from .errors import ExportError

logger = logging.getLogger(__name__)


def ppm_bytes(canvas: Canvas) -> bytes:
    """Plain (P3) PPM: header, then 'r g b ' per pixel scanned top to bottom."""
    parts = [f"P3 {canvas.w} {canvas.h} 255\n"]
    for row in canvas.rows():
        for r, g, b in row:
            parts.append(f"{r & 0xFF} {g & 0xFF} {b & 0xFF} ")
    return ''.join(parts).encode('ascii')


def write_ppm(canvas: Canvas, path) -> Path:
    path = Path(path)
    try:
        path.write_bytes(ppm_bytes(canvas))
    except OSError as exc:
        raise ExportError(f"could not write {path}: {exc}") from exc
    return path


def _run(cmd):
    logger.debug("Running %s", ' '.join(str(c) for c in cmd))
    try:
        subprocess.run([str(c) for c in cmd], check=True, capture_output=True)
    except FileNotFoundError as exc:
        raise ExportError(f"command not found: {cmd[0]}") from exc
    except subprocess.CalledProcessError as exc:
        stderr = exc.stderr.decode(errors='replace').strip() if exc.stderr else ''
        raise ExportError(
            f"{cmd[0]} exited with status {exc.returncode}"
            + (f": {stderr}" if stderr else '')) from exc


def save_image(canvas: Canvas, filename, config: RenderConfig) -> Path:
    """
    Save the buffer to `filename`.  PPM is written directly; any other
    extension goes through a temporary PPM and the external converter.
    """
    target = Path(filename)
    if target.suffix.lower() == '.ppm':
        logger.info("Saving %s", target)
        return write_ppm(canvas, target)

    ppm = write_ppm(canvas, config.ppm_filename)
    _run([config.convert_command, ppm, target])
    logger.info("Saved %s", target)
    return target


def show(canvas: Canvas, config: RenderConfig, stream=None):
    """Open the buffer in the configured viewer, or print a text preview."""
    if config.viewer_command:
        ppm = write_ppm(canvas, config.ppm_filename)
        _run([config.viewer_command, ppm])
        return

    stream = stream or sys.stdout
    for line in preview_lines(canvas, use_braille=config.use_braille):
        stream.write(line + '\n')
    stream.flush()


class Exporter:
    """Output sink used by the script interpreter for 'save' and 'show'."""

    def __init__(self, config: RenderConfig, stream=None):
        self.config = config
        self.stream = stream

    def save(self, canvas: Canvas, filename):
        return save_image(canvas, filename, self.config)

    def show(self, canvas: Canvas):
        show(canvas, self.config, self.stream)
