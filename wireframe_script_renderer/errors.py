#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class RenderError(Exception):
    """Base class for every failure raised by the renderer."""


class DimensionMismatch(RenderError, ValueError):
    """Matrix operands have incompatible shapes."""


class IndexOutOfRange(RenderError, IndexError):
    """Column index outside [0, cols)."""


class MalformedNumericInput(RenderError, ValueError):
    """An argument token could not be parsed as a float."""


class ArgumentCountError(RenderError, ValueError):
    """A command received the wrong number of arguments."""


class UnknownAxis(RenderError, ValueError):
    pass


class UnknownCurveType(RenderError, ValueError):
    pass


class UnknownColorName(RenderError, ValueError):
    pass


class UnknownCommand(RenderError):
    pass


class ExportError(RenderError):
    """Writing, converting or viewing the raster image failed."""


class ScriptError(RenderError):
    """
    A script command failed.  Carries the 1-based line number and the
    command word so the user can find the offending line.
    """

    def __init__(self, line_no: int, command: str, cause: Exception):
        self.line_no = line_no
        self.command = command
        self.cause = cause
        super().__init__(f"line {line_no}: '{command}': {cause}")
