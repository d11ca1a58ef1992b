#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .errors import DimensionMismatch, IndexOutOfRange, UnknownAxis, UnknownCurveType


class Matrix:
    """Dense rows x cols matrix of floats.
    Here utilizing [row][col] storage, so m[1][3] is row 1, column 3.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data is None:
            self.m = [[0.0] * 4 for _ in range(4)]
            return
        rows = [[float(v) for v in row] for row in data]
        if rows and any(len(row) != len(rows[0]) for row in rows):
            raise DimensionMismatch("matrix rows must all have the same length")
        self.m = rows

    @classmethod
    def zeros(cls, rows: int = 4, cols: int = 4) -> 'Matrix':
        res = cls()
        res.m = [[0.0] * cols for _ in range(rows)]
        return res

    @property
    def rows(self) -> int:
        return len(self.m)

    @property
    def cols(self) -> int:
        return len(self.m[0]) if self.m else 0

    def make_identity(self):
        """Overwrite this matrix in place with the identity (square matrices only)."""
        for i, row in enumerate(self.m):
            for j in range(len(row)):
                row[j] = 1.0 if i == j else 0.0
        return self

    @classmethod
    def identity(cls, size: int = 4) -> 'Matrix':
        return cls.zeros(size, size).make_identity()

    @classmethod
    def translation(cls, tx, ty, tz) -> 'Matrix':
        mat = cls.identity()
        mat.m[0][3] = float(tx)
        mat.m[1][3] = float(ty)
        mat.m[2][3] = float(tz)
        return mat

    @classmethod
    def dilation(cls, sx, sy, sz) -> 'Matrix':
        mat = cls.identity()
        mat.m[0][0] = float(sx)
        mat.m[1][1] = float(sy)
        mat.m[2][2] = float(sz)
        return mat

    @classmethod
    def rotation_x(cls, degrees: float) -> 'Matrix':
        mat = cls.identity()
        c, s = _cos_sin(degrees)
        mat.m[1][1] = c
        mat.m[1][2] = -s
        mat.m[2][1] = s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_y(cls, degrees: float) -> 'Matrix':
        mat = cls.identity()
        c, s = _cos_sin(degrees)
        mat.m[0][0] = c
        mat.m[0][2] = s
        mat.m[2][0] = -s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_z(cls, degrees: float) -> 'Matrix':
        mat = cls.identity()
        c, s = _cos_sin(degrees)
        mat.m[0][0] = c
        mat.m[0][1] = -s
        mat.m[1][0] = s
        mat.m[1][1] = c
        return mat

    @classmethod
    def rotation(cls, axis: str, degrees: float) -> 'Matrix':
        builders = {
            'x': cls.rotation_x,
            'y': cls.rotation_y,
            'z': cls.rotation_z,
        }
        if axis not in builders:
            raise UnknownAxis(f"unknown rotation axis {axis!r} (expected x, y or z)")
        return builders[axis](degrees)

    def column(self, index: int) -> list:
        """Return a copy of column `index`."""
        if not 0 <= index < self.cols:
            raise IndexOutOfRange(
                f"column {index} out of range for matrix with {self.cols} columns")
        return [row[index] for row in self.m]

    def copy(self) -> 'Matrix':
        res = type(self)()
        res.m = [row[:] for row in self.m]
        return res

    def replace(self, other: 'Matrix'):
        """Adopt the contents of `other`, keeping this object's identity."""
        self.m = [row[:] for row in other.m]
        return self

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise DimensionMismatch(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}")
        n_cols = other.cols
        res = Matrix.zeros(self.rows, n_cols)
        for r, row in enumerate(self.m):
            out = res.m[r]
            for c in range(n_cols):
                val = 0.0
                for k, a in enumerate(row):
                    val += a * other.m[k][c]
                out[c] = val
        return res

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.m == other.m

    def __repr__(self):
        return f"{type(self).__name__}({self.rows}x{self.cols})"

    def format(self) -> str:
        """Fixed-width text dump, two decimals per cell."""
        lines = []
        for row in self.m:
            lines.append(''.join(f"{v:.2f}".ljust(8) for v in row))
        return '\n'.join(lines)


def _cos_sin(degrees):
    radians = degrees * math.pi / 180
    return math.cos(radians), math.sin(radians)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Compute a x b and store the product in `b`, which is also returned."""
    return b.replace(a @ b)


def extract_column(m: Matrix, index: int) -> list:
    return m.column(index)


def dot(u, v) -> float:
    if len(u) != len(v):
        raise DimensionMismatch(f"dot product of vectors of length {len(u)} and {len(v)}")
    total = 0.0
    for a, b in zip(u, v):
        total += a * b
    return total


# ── Curve basis matrices ────────────────────────────────────────────────

def bezier_basis() -> Matrix:
    return Matrix([
        [-1, 3, -3, 1],
        [3, -6, 3, 0],
        [-3, 3, 0, 0],
        [1, 0, 0, 0],
    ])


def hermite_basis() -> Matrix:
    return Matrix([
        [2, -2, 1, 1],
        [-3, 3, -2, -1],
        [0, 0, 1, 0],
        [1, 0, 0, 0],
    ])


CURVE_BASES = {
    'bezier': bezier_basis,
    'hermite': hermite_basis,
}


def curve_basis(kind: str) -> Matrix:
    if kind not in CURVE_BASES:
        raise UnknownCurveType(f"unknown curve type {kind!r} (expected bezier or hermite)")
    return CURVE_BASES[kind]()
