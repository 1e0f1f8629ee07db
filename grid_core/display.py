"""Rendering of a fitted grid into aligned text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from .cell import Alignment, Cell
from .filling import Direction, Spaces

if TYPE_CHECKING:
    from .grid import Dimensions, Grid


class StaleLayoutError(RuntimeError):
    """Raised when a layout is used after its grid has had cells added."""


def _pad(cell: Cell, extra_spaces: int) -> str:
    if cell.alignment is Alignment.LEFT:
        return cell.text + " " * extra_spaces
    return " " * extra_spaces + cell.text


class LaidOutGrid:
    """
    A grid paired with the dimensions chosen for it.

    The view reads the grid without copying it, so it is only valid while the
    grid stays unchanged. Adding a cell afterwards makes the view stale and
    rendering it raises StaleLayoutError; fit the grid again instead.
    """

    def __init__(self, grid: Grid, dimensions: Dimensions) -> None:
        self._grid = grid
        self._revision = grid.revision
        self.dimensions = dimensions

    def width(self) -> int:
        """Total rendered width, separators included."""
        return self.dimensions.total_width(self._grid.options.filling.width)

    def row_count(self) -> int:
        return self.dimensions.num_lines

    def is_complete(self) -> bool:
        """True when no column is left empty."""
        return all(width > 0 for width in self.dimensions.widths)

    def lines(self) -> Iterator[str]:
        """Return an iterator over rendered rows, without trailing newlines."""
        if self._grid.revision != self._revision:
            raise StaleLayoutError(
                "Grid was modified after this layout was computed; fit it again."
            )
        return self._iter_lines(self._grid.cells)

    def _iter_lines(self, cells: tuple[Cell, ...]) -> Iterator[str]:
        filling = self._grid.options.filling
        direction = self._grid.options.direction
        widths = self.dimensions.widths
        num_lines = self.dimensions.num_lines
        num_columns = len(widths)
        last_column = num_columns - 1

        for y in range(num_lines):
            parts = []
            for x in range(num_columns):
                if direction is Direction.ROW_MAJOR:
                    index = y * num_columns + x
                else:
                    index = y + num_lines * x

                # Short final row (or column): nothing to place here.
                if index >= len(cells):
                    continue

                cell = cells[index]
                extra_spaces = widths[x] - cell.width

                if x == last_column:
                    if cell.alignment is Alignment.LEFT:
                        parts.append(cell.text)
                    else:
                        parts.append(_pad(cell, extra_spaces))
                elif isinstance(filling, Spaces):
                    if cell.alignment is Alignment.LEFT:
                        parts.append(_pad(cell, extra_spaces + filling.count))
                    else:
                        parts.append(_pad(cell, extra_spaces) + " " * filling.count)
                else:
                    parts.append(_pad(cell, extra_spaces) + filling.separator)

            yield "".join(parts)

    def render(self) -> str:
        """Render every row, each terminated by a newline."""
        return "".join(f"{line}\n" for line in self.lines())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"LaidOutGrid(num_lines={self.dimensions.num_lines}, widths={list(self.dimensions.widths)})"
