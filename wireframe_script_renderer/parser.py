#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/parser.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#
"""
Script interpreter.

A script is read line by line.  Commands that take no arguments sit alone on
their line:

    ident    reset the transform to the identity
    apply    multiply the transform into the edge matrix
    clear    empty the edge matrix
    draw     rasterize the edges onto the buffer
    show     display the buffer
    display  clear the buffer, draw, then show
    quit     stop reading the script
    color N  set the draw color (black, white, yellow or #RRGGBB)

Every other command takes its arguments from the following line:

    line     x0 y0 z0 x1 y1 z1
    circle   cx cy cz r
    bezier   x0 y0 x1 y1 x2 y2 x3 y3
    hermite  x0 y0 x1 y1 rx0 ry0 rx1 ry1
    box      x y z width height depth
    sphere   cx cy cz r
    torus    cx cy cz r1 r2
    move     tx ty tz
    scale    sx sy sz
    rotate   axis degrees
    save     filename

Blank lines and lines starting with '#' are ignored.  The first failing
command aborts the run with a ScriptError naming its line.
"""

import logging
from pathlib import Path
from typing import Optional

from .commands import (
    BoxArgs, CircleArgs, CurveArgs, LineArgs, RotateArgs, SaveArgs, ScaleArgs,
    SphereArgs, TorusArgs, TranslateArgs, parse_float,
)
from .display import Exporter
from .errors import (
    ArgumentCountError, RenderError, ScriptError, UnknownCommand,
)
from .session import RenderSession

logger = logging.getLogger(__name__)

IMMEDIATE_COMMANDS = ('ident', 'apply', 'clear', 'draw', 'show', 'display', 'quit', 'color')

# command -> (argument record, session method)
SHAPE_COMMANDS = {
    'line': (LineArgs, 'add_line'),
    'circle': (CircleArgs, 'add_circle'),
    'box': (BoxArgs, 'add_box'),
    'sphere': (SphereArgs, 'add_sphere'),
    'torus': (TorusArgs, 'add_torus'),
    'move': (TranslateArgs, 'translate'),
    'scale': (ScaleArgs, 'dilate'),
    'rotate': (RotateArgs, 'rotate'),
}
CURVE_COMMANDS = ('bezier', 'hermite')
ARGUMENT_COMMANDS = tuple(SHAPE_COMMANDS) + CURVE_COMMANDS + ('save',)


def parse_floats(text: str) -> list:
    """Split on whitespace and convert every token to a finite float."""
    values = []
    for token in text.split():
        values.append(parse_float(token))
    return values


class ScriptInterpreter:
    def __init__(self, session: RenderSession, exporter: Optional[Exporter] = None):
        self.session = session
        self.exporter = exporter or Exporter(session.config)

    def run_file(self, path) -> bool:
        path = Path(path)
        logger.info("Running script %s", path)
        with open(path, 'r') as f:
            return self.run(f)

    def run(self, lines) -> bool:
        """Execute script lines.  Returns True if the script ended with 'quit'."""
        numbered = enumerate(lines, 1)
        for line_no, raw in numbered:
            line = raw.strip()
            if not line or line.startswith('#'):
                continue

            words = line.split()
            command = words[0]
            try:
                if command in IMMEDIATE_COMMANDS:
                    if self._run_immediate(command, words[1:]):
                        logger.debug("quit at line %d", line_no)
                        return True
                    continue

                if command not in ARGUMENT_COMMANDS:
                    raise UnknownCommand(f"unknown command {command!r}")
                if len(words) > 1:
                    raise ArgumentCountError(
                        f"'{command}' takes its arguments on the following line")
                try:
                    _, arg_line = next(numbered)
                except StopIteration:
                    raise ArgumentCountError(
                        f"'{command}' is missing its argument line") from None
                self.execute(command, arg_line.strip())
            except RenderError as exc:
                raise ScriptError(line_no, command, exc) from exc
        return False

    def _run_immediate(self, command, extra) -> bool:
        session = self.session
        if command == 'color':
            if len(extra) != 1:
                raise ArgumentCountError("'color' takes exactly one color name")
            session.set_color(extra[0])
            return False
        if extra:
            raise ArgumentCountError(f"'{command}' takes no arguments")

        logger.debug("%s", command)
        if command == 'ident':
            session.reset_transform()
        elif command == 'apply':
            session.apply_transform()
        elif command == 'clear':
            session.clear_edges()
        elif command == 'draw':
            session.rasterize()
        elif command == 'show':
            self.exporter.show(session.canvas)
        elif command == 'display':
            session.reset_buffer()
            session.rasterize()
            self.exporter.show(session.canvas)
        elif command == 'quit':
            return True
        return False

    def execute(self, command: str, arg_text: str):
        """Run one argument-taking command with its raw argument line."""
        session = self.session
        logger.debug("%s %s", command, arg_text)

        if command in SHAPE_COMMANDS:
            record, method = SHAPE_COMMANDS[command]
            getattr(session, method)(record.from_values(arg_text.split()))
        elif command in CURVE_COMMANDS:
            session.add_curve(CurveArgs.from_values(arg_text.split()), command)
        elif command == 'save':
            if not arg_text:
                raise ArgumentCountError("'save' needs a file name")
            args = SaveArgs(arg_text)
            self.exporter.save(session.canvas, args.filename)
        else:
            raise UnknownCommand(f"unknown command {command!r}")
