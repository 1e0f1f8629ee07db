"""Grid layout engine: fits cells into rows and columns under a width budget."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .cell import Cell
from .display import LaidOutGrid
from .filling import Direction, GridOptions

logger = logging.getLogger("termgrid")


@dataclass(frozen=True)
class Dimensions:
    """
    Row count and per-column widths of a candidate or final layout.

    Attributes:
        num_lines: Number of rows.
        widths: Width of each column, left to right.
    """

    num_lines: int
    widths: tuple[int, ...]

    @property
    def num_columns(self) -> int:
        return len(self.widths)

    def total_width(self, separator_width: int) -> int:
        """Rendered width of a row including separators, or 0 with no columns."""
        if not self.widths:
            return 0
        return sum(self.widths) + separator_width * (len(self.widths) - 1)


class Grid:
    """
    Append-only collection of cells plus the options used to lay them out.

    Aggregates over the cells (widest width, total width, count) are kept
    up to date on every append so that fitting never has to rescan for them.
    """

    def __init__(self, options: GridOptions | None = None) -> None:
        self.options = options if options is not None else GridOptions()
        self._cells: list[Cell] = []
        self.widest_cell_width = 0
        self.total_cell_width = 0
        self.cell_count = 0
        self.revision = 0

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def reserve(self, additional: int) -> None:
        """Capacity hint for ``additional`` more cells. Has no effect on layout."""
        if additional < 0:
            raise ValueError(f"Cannot reserve a negative number of cells: {additional}")
        logger.debug(f"Grid reserve hint for {additional} cell(s) ignored")

    def add(self, cell: Cell) -> None:
        """Append a cell and update the running aggregates."""
        self._cells.append(cell)
        self.widest_cell_width = max(self.widest_cell_width, cell.width)
        self.total_cell_width += cell.width
        self.cell_count += 1
        self.revision += 1

    def fit_into_width(self, maximum_width: int) -> LaidOutGrid | None:
        """
        Find the fewest rows that let every cell fit within ``maximum_width``.

        Args:
            maximum_width: Available display width in terminal columns.

        Returns:
            LaidOutGrid | None: A renderable layout, or None when no layout fits.
        """
        if maximum_width < 0:
            raise ValueError(f"maximum_width must be >= 0, got {maximum_width}")

        dimensions = self._width_dimensions(maximum_width)
        if dimensions is None:
            logger.debug(
                f"{self.cell_count} cell(s) do not fit into width {maximum_width}"
            )
            return None

        logger.debug(
            f"Fitted {self.cell_count} cell(s) into {dimensions.num_lines} line(s) "
            f"x {dimensions.num_columns} column(s) for width {maximum_width}"
        )
        return LaidOutGrid(self, dimensions)

    def fit_into_columns(self, num_columns: int) -> LaidOutGrid:
        """
        Lay the cells out in exactly ``num_columns`` columns, ignoring width.

        With column-major traversal some trailing columns may be left empty;
        ``LaidOutGrid.is_complete`` reports that case.
        """
        if num_columns < 1:
            raise ValueError(f"num_columns must be >= 1, got {num_columns}")

        num_lines = math.ceil(self.cell_count / num_columns)
        dimensions = self._column_widths(num_lines, num_columns)
        return LaidOutGrid(self, dimensions)

    def _column_widths(self, num_lines: int, num_columns: int) -> Dimensions:
        widths = [0] * num_columns
        for index, cell in enumerate(self._cells):
            if self.options.direction is Direction.ROW_MAJOR:
                column = index % num_columns
            else:
                column = index // num_lines
            widths[column] = max(widths[column], cell.width)
        return Dimensions(num_lines=num_lines, widths=tuple(widths))

    def _theoretical_max_num_lines(self, maximum_width: int) -> int:
        """
        Upper bound on the rows worth trying.

        Packs the widest cells side by side until the budget runs out; the
        number that fit is the most columns any layout could have, so no
        layout needs more rows than ``ceil(cell_count / that)``.
        """
        fill_width = self.options.filling.width
        min_num_columns = 0
        width_so_far = 0

        for width in sorted((cell.width for cell in self._cells), reverse=True):
            if width + width_so_far <= maximum_width:
                min_num_columns += 1
                width_so_far += width
            else:
                return math.ceil(self.cell_count / min_num_columns)
            width_so_far += fill_width

        # Every cell fits side by side.
        return 1

    def _width_dimensions(self, maximum_width: int) -> Dimensions | None:
        if self.widest_cell_width > maximum_width:
            return None

        if self.cell_count == 0:
            return Dimensions(num_lines=0, widths=())

        if self.cell_count == 1:
            return Dimensions(num_lines=1, widths=(self._cells[0].width,))

        max_num_lines = self._theoretical_max_num_lines(maximum_width)
        if max_num_lines == 1:
            return Dimensions(num_lines=1, widths=tuple(cell.width for cell in self._cells))

        fill_width = self.options.filling.width
        best: Dimensions | None = None

        for num_lines in range(max_num_lines - 1, 0, -1):
            num_columns = math.ceil(self.cell_count / num_lines)
            total_separator_width = (num_columns - 1) * fill_width
            if total_separator_width > maximum_width:
                continue

            adjusted_width = maximum_width - total_separator_width
            candidate = self._column_widths(num_lines, num_columns)
            # Strictly less than: the multi-row search never fills the budget exactly.
            if sum(candidate.widths) < adjusted_width:
                best = candidate
            else:
                return best

        return best
