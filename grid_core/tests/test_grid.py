import pytest

from grid_core.cell import Cell
from grid_core.filling import Direction, GridOptions, Spaces, Text
from grid_core.grid import Dimensions, Grid

NUMBER_WORDS = [
    "one", "two", "three", "four", "five", "six",
    "seven", "eight", "nine", "ten", "eleven", "twelve",
]


def make_grid(words, filling=Spaces(2), direction=Direction.ROW_MAJOR):
    grid = Grid(GridOptions(filling=filling, direction=direction))
    for word in words:
        grid.add(Cell.from_text(word))
    return grid


def test_dimensions_total_width():
    assert Dimensions(num_lines=2, widths=(3, 4, 5)).total_width(2) == 16
    assert Dimensions(num_lines=1, widths=(7,)).total_width(3) == 7
    assert Dimensions(num_lines=0, widths=()).total_width(5) == 0


def test_add_updates_aggregates():
    grid = make_grid(["a", "abcd", "ab"])
    assert grid.cell_count == 3
    assert grid.widest_cell_width == 4
    assert grid.total_cell_width == 7
    assert [cell.text for cell in grid.cells] == ["a", "abcd", "ab"]


def test_reserve_has_no_effect():
    grid = make_grid(["a"])
    grid.reserve(100)
    assert grid.cell_count == 1


def test_reserve_negative_raises():
    with pytest.raises(ValueError):
        Grid().reserve(-1)


def test_fit_negative_width_raises():
    with pytest.raises(ValueError):
        Grid().fit_into_width(-1)


@pytest.mark.parametrize("max_width", [0, 1, 80])
def test_fit_empty_grid(max_width):
    display = Grid().fit_into_width(max_width)
    assert display is not None
    assert display.row_count() == 0
    assert display.dimensions.widths == ()
    assert display.width() == 0
    assert display.is_complete()
    assert display.render() == ""


def test_fit_single_cell():
    display = make_grid(["hello"]).fit_into_width(10)
    assert display.row_count() == 1
    assert display.dimensions.widths == (5,)
    assert display.width() == 5


def test_fit_single_cell_exact_width():
    display = make_grid(["hello"]).fit_into_width(5)
    assert display is not None
    assert display.dimensions.widths == (5,)


def test_fit_single_cell_too_wide():
    assert make_grid(["hello"]).fit_into_width(4) is None


def test_fit_fails_when_any_cell_too_wide():
    grid = make_grid(["a", "b", "abcdefghij", "c"])
    assert grid.fit_into_width(9) is None


def test_fit_single_row_when_everything_fits():
    display = make_grid(["one", "two", "three"]).fit_into_width(15)
    assert display.row_count() == 1
    assert display.dimensions.widths == (3, 3, 5)
    assert display.width() == 15


def test_fit_multiple_rows_row_major():
    display = make_grid(NUMBER_WORDS, filling=Text("|")).fit_into_width(24)
    assert display.row_count() == 3
    assert display.dimensions.widths == (4, 3, 6, 6)
    assert display.width() == 22


def test_fit_multiple_rows_column_major():
    grid = make_grid(NUMBER_WORDS, filling=Text("|"), direction=Direction.COLUMN_MAJOR)
    display = grid.fit_into_width(24)
    assert display.row_count() == 3
    assert display.dimensions.widths == (5, 4, 5, 6)
    assert display.width() == 23


def test_fit_search_requires_strictly_less_than_budget():
    grid = make_grid(NUMBER_WORDS, filling=Text("|"))
    # Three rows need exactly 22 columns; the search only accepts a strictly smaller sum.
    assert grid.fit_into_width(22) is None
    display = grid.fit_into_width(23)
    assert display is not None
    assert display.width() == 22


def test_fit_stops_at_first_infeasible_row_count():
    grid = make_grid(NUMBER_WORDS, filling=Text("|"))
    # The bound at width 30 is three rows; the scan starts at two, which
    # does not fit, so no layout is returned.
    assert grid.fit_into_width(30) is None


@pytest.mark.parametrize("max_width", range(15, 40))
def test_fit_stays_single_row_as_width_grows(max_width):
    display = make_grid(["one", "two", "three"]).fit_into_width(max_width)
    assert display is not None
    assert display.row_count() == 1


@pytest.mark.parametrize("direction", [Direction.ROW_MAJOR, Direction.COLUMN_MAJOR])
@pytest.mark.parametrize("max_width", range(6, 90, 3))
def test_fit_row_and_column_accounting(direction, max_width):
    grid = make_grid(NUMBER_WORDS, filling=Spaces(1), direction=direction)
    display = grid.fit_into_width(max_width)
    if display is None:
        return

    num_lines = display.row_count()
    num_columns = display.dimensions.num_columns
    assert num_columns * num_lines >= grid.cell_count > (num_columns - 1) * num_lines
    assert display.width() <= max_width
    assert display.is_complete()


def test_fit_into_columns_row_major():
    display = make_grid(["1", "22", "333", "4444"], filling=Spaces(1)).fit_into_columns(2)
    assert display.row_count() == 2
    assert display.dimensions.widths == (3, 4)
    assert display.width() == 8


def test_fit_into_columns_column_major_can_leave_empty_columns():
    grid = make_grid(["a", "b", "c", "d"], filling=Spaces(1), direction=Direction.COLUMN_MAJOR)
    display = grid.fit_into_columns(3)
    assert display.row_count() == 2
    assert display.dimensions.widths == (1, 1, 0)
    assert not display.is_complete()


def test_fit_into_columns_ignores_width():
    display = make_grid(NUMBER_WORDS).fit_into_columns(12)
    assert display.row_count() == 1
    assert display.width() == sum(len(word) for word in NUMBER_WORDS) + 2 * 11


def test_fit_into_columns_zero_raises():
    with pytest.raises(ValueError):
        make_grid(["a"]).fit_into_columns(0)


def test_fit_skips_row_counts_whose_separators_exceed_width():
    # Bound is two rows; one row would need 3 gaps of 2 spaces in width 5.
    grid = make_grid(["", "", "", ""], filling=Spaces(2))
    assert grid.fit_into_width(5) is None


def test_fit_returns_best_when_scan_runs_out():
    # Two rows fit; the one-row candidate is skipped (5 gaps of 2 > 9), ending the scan.
    grid = make_grid(["aa", "bb", "cc", "dd", "", ""], filling=Spaces(2), direction=Direction.COLUMN_MAJOR)
    display = grid.fit_into_width(9)
    assert display is not None
    assert display.row_count() == 2
    assert display.dimensions.widths == (2, 2, 0)
    assert display.width() == 8
    assert display.render() == "aa  cc  \nbb  dd  \n"
