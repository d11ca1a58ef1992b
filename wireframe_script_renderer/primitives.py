#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/primitives.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .edges import EdgeMatrix
from .math_utils import Matrix, curve_basis

DEFAULT_CURVE_STEP = 0.001
DEFAULT_SURFACE_STEP = 0.01


def _frange(stop: float, step: float):
    """
    Yield 0, step, 2*step, ... while <= stop.

    The value is accumulated rather than multiplied, so rounding drift decides
    whether the last sample is included (0.001 over [0, 1] gives 1000 samples).
    """
    t = 0.0
    while t <= stop:
        yield t
        t += step


def add_circle(edges: EdgeMatrix, cx, cy, cz, r, step=DEFAULT_CURVE_STEP):
    """
    Add sample points of a circle in the XY plane.

    Points are appended one at a time, not as edges, so consecutive samples
    pair up as short segments with gaps between them.  cz is accepted but
    every point lies at z = 0.
    """
    for t in _frange(1.0, step):
        x = r * math.cos(2 * math.pi * t) + cx
        y = r * math.sin(2 * math.pi * t) + cy
        edges.add_point(x, y, 0)


def curve_coefficients(p0, p1, p2, p3, kind: str) -> list:
    """Cubic coefficients [a, b, c, d] (highest degree first) for one axis."""
    controls = Matrix([[p0], [p1], [p2], [p3]])
    coefs = curve_basis(kind) @ controls
    return [row[0] for row in coefs.m]


def cubic_eval(t: float, coefs) -> float:
    y = 0.0
    for power in range(3, -1, -1):
        y += coefs[3 - power] * t ** power
    return y


def add_curve(edges: EdgeMatrix, x0, y0, x1, y1, x2, y2, x3, y3,
              step=DEFAULT_CURVE_STEP, kind='bezier'):
    """
    Add sample points of a cubic curve.

    For bezier the four (x, y) pairs are control points.  For hermite they are
    (p0, p1, r0, r1): the two endpoints followed by the two tangents.
    """
    x_coefs = curve_coefficients(x0, x1, x2, x3, kind)
    y_coefs = curve_coefficients(y0, y1, y2, y3, kind)

    for t in _frange(1.0, step):
        edges.add_point(cubic_eval(t, x_coefs), cubic_eval(t, y_coefs), 0)


def add_box(edges: EdgeMatrix, x, y, z, width, height, depth):
    """Add the 12 edges of a box whose near top-left corner is (x, y, z)."""
    x1 = x + width
    y1 = y - height
    z1 = z - depth

    edges.add_edge(x, y, z, x1, y, z)
    edges.add_edge(x, y, z, x, y1, z)
    edges.add_edge(x, y, z, x, y, z1)

    edges.add_edge(x, y1, z, x, y1, z1)
    edges.add_edge(x, y1, z, x1, y1, z)
    edges.add_edge(x, y1, z1, x1, y1, z1)
    edges.add_edge(x1, y1, z, x1, y1, z1)

    edges.add_edge(x, y, z1, x1, y, z1)
    edges.add_edge(x, y, z1, x, y1, z1)

    edges.add_edge(x1, y, z, x1, y1, z)
    edges.add_edge(x1, y, z, x1, y, z1)
    edges.add_edge(x1, y, z1, x1, y1, z1)


def generate_sphere(cx, cy, cz, r, step=DEFAULT_SURFACE_STEP) -> list:
    """Surface points of a sphere: a half circle rotated a full turn about the x axis."""
    points = []
    for i in _frange(1.0, step):
        phi = 2 * math.pi * i
        for j in _frange(0.5, step):
            theta = 2 * math.pi * j
            x = r * math.cos(theta) + cx
            y = r * math.sin(theta) * math.cos(phi) + cy
            z = r * math.sin(theta) * math.sin(phi) + cz
            points.append((x, y, z))
    return points


def generate_torus(cx, cy, cz, r1, r2, step=DEFAULT_SURFACE_STEP) -> list:
    """Surface points of a torus with tube radius r1 swept around a ring of radius r2 (about y)."""
    points = []
    for i in _frange(1.0, step):
        phi = 2 * math.pi * i
        for j in _frange(1.0, step):
            theta = 2 * math.pi * j
            ring = r1 * math.cos(theta) + r2
            x = math.cos(phi) * ring + cx
            y = r1 * math.sin(theta) + cy
            z = -math.sin(phi) * ring + cz
            points.append((x, y, z))
    return points


def _add_dots(edges: EdgeMatrix, points):
    # Each surface point becomes a short edge to p + (1, 1, 1).
    for x, y, z in points:
        edges.add_edge(x, y, z, x + 1, y + 1, z + 1)


def add_sphere(edges: EdgeMatrix, cx, cy, cz, r, step=DEFAULT_SURFACE_STEP):
    _add_dots(edges, generate_sphere(cx, cy, cz, r, step))


def add_torus(edges: EdgeMatrix, cx, cy, cz, r1, r2, step=DEFAULT_SURFACE_STEP):
    _add_dots(edges, generate_torus(cx, cy, cz, r1, r2, step))
