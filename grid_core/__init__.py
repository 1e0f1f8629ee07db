"""Core grid layout: cells, fill policies, fitting and rendering."""

from .cell import Alignment, Cell
from .config import GridConfigService, grid_options_from_settings, load_grid_settings
from .display import LaidOutGrid, StaleLayoutError
from .filling import Direction, FillPolicy, GridOptions, Spaces, Text
from .grid import Dimensions, Grid
from .width import display_width

__all__ = [
    "Alignment",
    "Cell",
    "Dimensions",
    "Direction",
    "display_width",
    "FillPolicy",
    "Grid",
    "GridConfigService",
    "grid_options_from_settings",
    "GridOptions",
    "LaidOutGrid",
    "load_grid_settings",
    "Spaces",
    "StaleLayoutError",
    "Text",
]
