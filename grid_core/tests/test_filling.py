import pytest

from grid_core.filling import Direction, GridOptions, Spaces, Text


def test_spaces_width():
    assert Spaces(3).width == 3
    assert Spaces(0).width == 0


def test_spaces_negative_raises():
    with pytest.raises(ValueError):
        Spaces(-1)


def test_text_width_is_display_width():
    assert Text(" | ").width == 3
    assert Text("").width == 0
    assert Text("｜").width == 2


def test_text_equality_uses_separator():
    assert Text("|") == Text("|")
    assert Text("|") != Text(" |")


def test_grid_options_defaults():
    options = GridOptions()
    assert options.filling == Spaces(2)
    assert options.direction is Direction.ROW_MAJOR
