"""Matrix engine: products, in-place multiply, transform and basis constructors."""

import math

import pytest

from wireframe_script_renderer.errors import (
    DimensionMismatch, IndexOutOfRange, UnknownAxis, UnknownCurveType,
)
from wireframe_script_renderer.math_utils import (
    Matrix, bezier_basis, curve_basis, dot, extract_column, hermite_basis, multiply,
)


def _approx_equal(a: Matrix, b: Matrix, tol=1e-9) -> bool:
    if (a.rows, a.cols) != (b.rows, b.cols):
        return False
    return all(
        abs(x - y) <= tol
        for ra, rb in zip(a.m, b.m)
        for x, y in zip(ra, rb)
    )


A = Matrix([[1, 2, 0, 1], [0, 1, 3, 0], [2, 0, 1, 1], [0, 0, 0, 1]])
B = Matrix([[0.5, 0, 1, 0], [1, 1, 0, 2], [0, 2, 1, 0], [3, 0, 0, 1]])
C = Matrix([[1, 0, 0, 4], [0, -1, 2, 0], [1, 1, 1, 1], [0, 0, 0, 1]])


def test_make_identity_overwrites_in_place():
    m = Matrix([[5, 6], [7, 8]])
    same = m.make_identity()
    assert same is m
    assert m.m == [[1.0, 0.0], [0.0, 1.0]]


def test_identity_is_left_neutral():
    assert Matrix.identity() @ A == A
    edges = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9], [1, 1, 1]])
    assert Matrix.identity() @ edges == edges


def test_product_is_associative():
    left = A @ (B @ C)
    right = (A @ B) @ C
    assert _approx_equal(left, right)


def test_multiply_replaces_second_operand():
    transform = Matrix.translation(1, 2, 3)
    points = Matrix([[0, 1], [0, 1], [0, 1], [1, 1]])
    before_transform = transform.copy()

    result = multiply(transform, points)

    assert result is points
    assert points.m == [[1.0, 2.0], [2.0, 3.0], [3.0, 4.0], [1.0, 1.0]]
    assert transform == before_transform


def test_multiply_rejects_incompatible_shapes():
    with pytest.raises(DimensionMismatch):
        multiply(Matrix.zeros(4, 3), Matrix.zeros(4, 4))


def test_ragged_rows_rejected():
    with pytest.raises(DimensionMismatch):
        Matrix([[1, 2], [3]])


def test_extract_column_returns_copy():
    col = extract_column(A, 2)
    assert col == [0.0, 3.0, 1.0, 0.0]
    col[0] = 99
    assert A.m[0][2] == 0.0


@pytest.mark.parametrize("index", [-1, 4, 10])
def test_extract_column_out_of_range(index):
    with pytest.raises(IndexOutOfRange):
        extract_column(A, index)


def test_dot():
    assert dot([1, 2, 3], [4, 5, 6]) == 32
    with pytest.raises(DimensionMismatch):
        dot([1, 2], [1, 2, 3])


def test_translation_and_dilation_cells():
    t = Matrix.translation(3, -4, 5)
    assert [t.m[0][3], t.m[1][3], t.m[2][3]] == [3.0, -4.0, 5.0]
    s = Matrix.dilation(2, 3, 4)
    assert [s.m[0][0], s.m[1][1], s.m[2][2], s.m[3][3]] == [2.0, 3.0, 4.0, 1.0]


@pytest.mark.parametrize("builder", [Matrix.rotation_x, Matrix.rotation_y, Matrix.rotation_z])
def test_zero_rotation_is_identity(builder):
    assert builder(0) == Matrix.identity()


def _rotate_point(mat, point):
    column = Matrix([[v] for v in point])
    return [row[0] for row in (mat @ column).m]


def test_rotation_z_quarter_turn():
    x, y, z, w = _rotate_point(Matrix.rotation_z(90), (1, 0, 0, 1))
    assert x == pytest.approx(0, abs=1e-9)
    assert y == pytest.approx(1, abs=1e-9)
    assert z == pytest.approx(0, abs=1e-9)
    assert w == 1


def test_rotation_x_quarter_turn_takes_y_to_z():
    x, y, z, _ = _rotate_point(Matrix.rotation_x(90), (0, 1, 0, 1))
    assert (x, y, z) == pytest.approx((0, 0, 1), abs=1e-9)


def test_rotation_y_quarter_turn_takes_z_to_x():
    x, y, z, _ = _rotate_point(Matrix.rotation_y(90), (0, 0, 1, 1))
    assert (x, y, z) == pytest.approx((1, 0, 0), abs=1e-9)


def test_rotation_sign_layout():
    s = math.sin(math.radians(30))
    rx = Matrix.rotation_x(30)
    assert rx.m[1][2] == pytest.approx(-s)
    assert rx.m[2][1] == pytest.approx(s)
    ry = Matrix.rotation_y(30)
    assert ry.m[0][2] == pytest.approx(s)
    assert ry.m[2][0] == pytest.approx(-s)
    rz = Matrix.rotation_z(30)
    assert rz.m[0][1] == pytest.approx(-s)
    assert rz.m[1][0] == pytest.approx(s)


def test_rotation_dispatch():
    assert Matrix.rotation('y', 45) == Matrix.rotation_y(45)
    with pytest.raises(UnknownAxis):
        Matrix.rotation('w', 45)


def test_bezier_basis_constants():
    assert bezier_basis().m == [
        [-1.0, 3.0, -3.0, 1.0],
        [3.0, -6.0, 3.0, 0.0],
        [-3.0, 3.0, 0.0, 0.0],
        [1.0, 0.0, 0.0, 0.0],
    ]


def test_hermite_basis_constants():
    assert hermite_basis().m == [
        [2.0, -2.0, 1.0, 1.0],
        [-3.0, 3.0, -2.0, -1.0],
        [0.0, 0.0, 1.0, 0.0],
        [1.0, 0.0, 0.0, 0.0],
    ]


def test_curve_basis_lookup():
    assert curve_basis('hermite') == hermite_basis()
    with pytest.raises(UnknownCurveType):
        curve_basis('catmull-rom')


def test_format_pads_two_decimals():
    text = Matrix.identity(2).format()
    assert text.splitlines() == ["1.00    0.00    ", "0.00    1.00    "]
