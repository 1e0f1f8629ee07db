"""Cells: the unit of content placed in a grid."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from .width import display_width


class Alignment(Enum):
    """Horizontal alignment of a cell within its column."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Cell:
    """
    A piece of text with a cached display width and an alignment.

    The width is measured once when the cell is built, since the layout
    search reads it many times. Build cells with ``from_text`` so that the
    width matches the text; constructing one directly trusts the caller's
    width, which must be the display width of ``text``.

    Attributes:
        text: Contents of the cell.
        width: Display width of ``text`` in terminal columns.
        alignment: Side of the column the text is pushed against.
    """

    text: str
    width: int
    alignment: Alignment = Alignment.LEFT

    def __post_init__(self):
        if self.width < 0:
            raise ValueError(f"Cell width must be >= 0, got {self.width}")

    @classmethod
    def from_text(
        cls,
        text: str,
        alignment: Alignment = Alignment.LEFT,
        measure: Callable[[str], int] = display_width,
    ) -> Cell:
        """Build a cell from raw text, measuring it with ``measure``."""
        return cls(text=text, width=measure(text), alignment=alignment)

    def with_alignment(self, alignment: Alignment) -> Cell:
        """Return a copy of this cell using a different alignment."""
        return replace(self, alignment=alignment)
