import pytest

from plot_lang import defaults
from plot_lang.lexer import lex
from plot_lang.parser import parse
from plot_lang.interpreter import interpret, Layout
from plot_lang.rasterizer import rasterize, pixel_on_curve, frame_coordinate
from plot_lang.ast import Variable, Div, Number
from plot_lang.errors import DivisionByZeroError, InvalidVariableError


def render(text, **kwargs):
    return rasterize(interpret(parse(lex("test", text))), **kwargs)


def on_pixels(raster):
    return {(i, j) for i in range(raster.width) for j in range(raster.height) if raster.is_on_curve(i, j)}


def test_identity_line_marks_the_diagonal():
    raster = render("#frame(0, 0, 2, 2)\n#resolution(2, 2)\ny = x")
    # Column 0 spans x in [0, 1]; row 1 is the bottom row, y in [0, 1]
    assert raster.is_on_curve(0, 1)
    assert not raster.is_on_curve(0, 0)
    assert on_pixels(raster) == {(0, 1), (1, 0)}


def test_resolution_defaults_to_frame_size():
    raster = render("#frame(0, 0, 3, 5)\nx")
    assert (raster.width, raster.height) == (3, 5)
    assert len(raster.columns) == 3
    assert all(len(column) == 5 for column in raster.columns)


def test_horizontal_line_inside_one_row():
    raster = render("#frame(0, 0, 4, 4)\ny = 2.5")
    # y in [2, 3] is row 1 from the top
    assert on_pixels(raster) == {(i, 1) for i in range(4)}


def test_sideways_parabola_draws_lower_half_only_when_implicit():
    frame = "#frame(4, -7, 5, 14)\n#resolution(1, 4)\n"
    implicit = render(frame + "pow(y, 2) = x")
    explicit = render(frame + "root(2, x)")
    # The only column covers x in [4, 9]; row 1 is y in [0, 3.5], row 2 is y in [-3.5, 0]
    assert implicit.is_on_curve(0, 1) and implicit.is_on_curve(0, 2)
    assert explicit.is_on_curve(0, 1)
    assert not explicit.is_on_curve(0, 2)


def test_no_equations_gives_blank_image():
    raster = render("#frame(0, 0, 2, 3)")
    assert on_pixels(raster) == set()
    assert raster.to_rgba_bytes() == bytes(defaults.BACKGROUND) * 6


def test_rgba_bytes_are_row_major():
    raster = render("#frame(0, 0, 2, 2)\n#resolution(2, 2)\ny = x")
    data = raster.to_rgba_bytes()
    fg, bg = bytes(defaults.FOREGROUND), bytes(defaults.BACKGROUND)
    assert data == bg + fg + fg + bg


def test_evaluation_failure_aborts_rendering():
    with pytest.raises(DivisionByZeroError):
        render("#frame(-1, -1, 2, 2)\ny = 1 / x")
    with pytest.raises(InvalidVariableError):
        render("y = z")


def test_layout_is_not_modified():
    layout = Layout()
    layout.size = (2, 2)
    layout.equations = [Div(Number(1), Variable('x'))]
    layout.position = (1, 1)
    rasterize(layout)
    assert layout.resolution == (0, 0)
    assert layout.equations == [Div(Number(1), Variable('x'))]


def test_pixel_on_curve_brackets_from_either_side():
    assert pixel_on_curve([0.0], [1.0], 0.0, 1.0)
    assert pixel_on_curve([1.0], [0.0], 0.0, 1.0)
    assert pixel_on_curve([0.5], [0.5], 0.0, 1.0)
    assert not pixel_on_curve([0.0], [1.0], 1.0, 2.0)
    assert not pixel_on_curve([], [1.0], 0.0, 1.0)
    assert pixel_on_curve([5.0, 0.0], [9.0, 1.0], 0.0, 1.0)


def test_frame_coordinate():
    assert frame_coordinate(-2, 4, 1, 4) == -1.0
    assert frame_coordinate(0, 10, 5, 5) == 10.0
