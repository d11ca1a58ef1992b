"""Render session: transform composition, apply, color state and buffer reset."""

import pytest

from wireframe_script_renderer.color import BLACK, WHITE, YELLOW
from wireframe_script_renderer.commands import (
    BoxArgs, CircleArgs, CurveArgs, LineArgs, RotateArgs, ScaleArgs, TranslateArgs,
)
from wireframe_script_renderer.config import RenderConfig
from wireframe_script_renderer.errors import (
    ArgumentCountError, MalformedNumericInput, UnknownAxis, UnknownCurveType,
)
from wireframe_script_renderer.math_utils import Matrix
from wireframe_script_renderer.session import RenderSession


@pytest.fixture
def session():
    return RenderSession(RenderConfig(xres=50, yres=50))


def test_new_session_state(session):
    assert session.transform is None
    assert session.edges.point_count == 0
    assert session.color == BLACK
    assert (session.canvas.w, session.canvas.h) == (50, 50)


def test_first_step_is_adopted(session):
    step = Matrix.translation(1, 2, 3)
    assert session.compose_step(step) is step


def test_later_steps_apply_after_earlier_ones(session):
    session.dilate(ScaleArgs(2, 2, 2))
    session.translate(TranslateArgs(10, 0, 0))
    session.add_line(LineArgs(1, 1, 1, 2, 2, 2))
    session.apply_transform()
    # scale first, then move
    assert session.edges.column(0) == pytest.approx([12, 2, 2, 1])
    assert session.edges.column(1) == pytest.approx([14, 4, 4, 1])


def test_apply_overwrites_edges_not_transform(session):
    session.translate(TranslateArgs(5, 5, 5))
    transform_before = session.transform.copy()
    edges = session.edges
    session.add_line(LineArgs(0, 0, 0, 1, 1, 1))

    session.apply_transform()

    assert session.edges is edges
    assert session.transform == transform_before
    assert edges.column(0) == pytest.approx([5, 5, 5, 1])


def test_apply_without_transform_leaves_edges(session):
    session.add_line(LineArgs(0, 0, 0, 1, 1, 1))
    session.apply_transform()
    assert session.edges.column(1) == [1.0, 1.0, 1.0, 1.0]


def test_reset_transform_is_identity(session):
    session.rotate(RotateArgs('z', 30))
    session.reset_transform()
    assert session.transform == Matrix.identity()


def test_rotate_quarter_turn(session):
    session.rotate(RotateArgs('z', 90))
    session.add_line(LineArgs(1, 0, 0, 0, 1, 0))
    session.apply_transform()
    assert session.edges.column(0) == pytest.approx([0, 1, 0, 1], abs=1e-9)
    assert session.edges.column(1) == pytest.approx([-1, 0, 0, 1], abs=1e-9)


def test_clear_edges(session):
    session.add_box(BoxArgs(0, 0, 0, 5, 5, 5))
    session.clear_edges()
    assert session.edges.point_count == 0


def test_circle_uses_configured_step():
    session = RenderSession(RenderConfig(xres=10, yres=10, circle_step=0.25))
    session.add_circle(CircleArgs(0, 0, 0, 1))
    assert session.edges.point_count == 5


def test_unknown_curve_kind_adds_nothing(session):
    with pytest.raises(UnknownCurveType):
        session.add_curve(CurveArgs(0, 0, 1, 1, 2, 2, 3, 3), 'nurbs')
    assert session.edges.point_count == 0


def test_set_color(session):
    session.set_color('yellow')
    assert session.color == YELLOW
    session.set_color('mauve')
    assert session.color == YELLOW
    session.set_color('#102030')
    assert session.color == (16, 32, 48)
    session.set_color('black')
    assert session.color == BLACK


def test_rasterize_and_reset_buffer(session):
    session.set_color('white')
    session.add_line(LineArgs(0, 0, 0, 9, 0, 0))
    assert session.rasterize() == 1
    assert len(session.canvas.lit_pixels()) == 10
    assert session.canvas.get_pixel(0, 49) == WHITE

    session.reset_buffer()
    assert session.canvas.lit_pixels() == set()


def test_rotate_args_from_tokens():
    assert RotateArgs.from_values(['z', '90']) == RotateArgs('z', 90.0)


@pytest.mark.parametrize("values, error", [
    (['z'], ArgumentCountError),
    (['z', '90', '1'], ArgumentCountError),
    (['w', '90'], UnknownAxis),
    (['x', 'inf'], MalformedNumericInput),
])
def test_rotate_args_rejects(values, error):
    with pytest.raises(error):
        RotateArgs.from_values(values)


def test_float_args_reject_non_finite():
    with pytest.raises(MalformedNumericInput):
        LineArgs.from_values(['0', '0', '0', 'nan', '0', '0'])
