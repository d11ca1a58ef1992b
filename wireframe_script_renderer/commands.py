#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/commands.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#
"""
Typed argument records for script commands.

Each record has a fixed arity; `from_values` takes the argument tokens (or
already-parsed floats) and rejects any other count or a non-finite number
before the command touches the session.
"""

import math
from dataclasses import dataclass, fields

from .errors import ArgumentCountError, MalformedNumericInput, UnknownAxis

AXES = ('x', 'y', 'z')


def parse_float(token) -> float:
    """Convert one argument token.  inf and nan are rejected like any other non-number."""
    try:
        value = float(token)
    except ValueError:
        raise MalformedNumericInput(f"not a number: {token!r}") from None
    if not math.isfinite(value):
        raise MalformedNumericInput(f"not a finite number: {token!r}")
    return value


class _FloatArgs:
    """Mixin building a frozen dataclass of floats from a parsed value list."""

    @classmethod
    def arity(cls) -> int:
        return len(fields(cls))

    @classmethod
    def from_values(cls, values):
        values = list(values)
        if len(values) != cls.arity():
            names = ', '.join(f.name for f in fields(cls))
            raise ArgumentCountError(
                f"expected {cls.arity()} arguments ({names}), got {len(values)}")
        return cls(*(parse_float(v) for v in values))


@dataclass(frozen=True)
class LineArgs(_FloatArgs):
    x0: float
    y0: float
    z0: float
    x1: float
    y1: float
    z1: float


@dataclass(frozen=True)
class CircleArgs(_FloatArgs):
    cx: float
    cy: float
    cz: float
    r: float


@dataclass(frozen=True)
class CurveArgs(_FloatArgs):
    """Four (x, y) pairs; for hermite the last two are tangents."""
    x0: float
    y0: float
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float


@dataclass(frozen=True)
class BoxArgs(_FloatArgs):
    x: float
    y: float
    z: float
    width: float
    height: float
    depth: float


@dataclass(frozen=True)
class SphereArgs(_FloatArgs):
    cx: float
    cy: float
    cz: float
    r: float


@dataclass(frozen=True)
class TorusArgs(_FloatArgs):
    cx: float
    cy: float
    cz: float
    r1: float  # tube
    r2: float  # ring


@dataclass(frozen=True)
class TranslateArgs(_FloatArgs):
    tx: float
    ty: float
    tz: float


@dataclass(frozen=True)
class ScaleArgs(_FloatArgs):
    sx: float
    sy: float
    sz: float


@dataclass(frozen=True)
class RotateArgs:
    axis: str
    degrees: float

    @classmethod
    def from_values(cls, values):
        values = list(values)
        if len(values) != 2:
            raise ArgumentCountError(
                f"expected 2 arguments (axis, degrees), got {len(values)}")
        axis, degrees = values
        if axis not in AXES:
            raise UnknownAxis(f"unknown rotation axis {axis!r} (expected x, y or z)")
        return cls(axis, parse_float(degrees))


@dataclass(frozen=True)
class SaveArgs:
    filename: str
