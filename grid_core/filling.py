"""Grid options: what goes between columns and how cells are traversed."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .width import display_width


@dataclass(frozen=True)
class Spaces:
    """A fixed gap of ``count`` spaces between adjacent columns."""

    count: int

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"Spaces count must be >= 0, got {self.count}")

    @property
    def width(self) -> int:
        return self.count


@dataclass(frozen=True)
class Text:
    """
    A literal separator string between adjacent columns.

    The separator's display width is measured once on construction.
    """

    separator: str
    width: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'width', display_width(self.separator))


FillPolicy = Union[Spaces, Text]


class Direction(Enum):
    """Order in which cells are assigned to grid positions."""

    ROW_MAJOR = "row_major"
    COLUMN_MAJOR = "column_major"


@dataclass(frozen=True)
class GridOptions:
    """Fill policy and direction for a whole grid."""

    filling: FillPolicy = field(default_factory=lambda: Spaces(2))
    direction: Direction = Direction.ROW_MAJOR
