"""Configuration helpers for grid layout settings."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .constants import (
    DEFAULT_GRID_SETTINGS,
    VALID_ALIGNMENTS,
    VALID_DIRECTIONS,
)
from .filling import Direction, GridOptions, Spaces, Text

logger = logging.getLogger("termgrid")


class GridConfigService:
    """Stateful access wrapper for grid config helpers."""

    def __init__(self, config_file: Path = Path("config.yaml")) -> None:
        self.config_file = config_file

    def load_grid_settings(self) -> dict[str, object]:
        return load_grid_settings(self.config_file)


def load_grid_settings(config_file: Path = Path("config.yaml")) -> dict[str, object]:
    """
    Load and validate the ``grid`` section of a config file.

    Missing keys fall back to DEFAULT_GRID_SETTINGS.

    Args:
        config_file: Path to the configuration YAML file.

    Returns:
        dict: Settings with keys spaces, separator, direction, alignment, max_width.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If a grid setting is invalid.
    """
    with open(config_file, 'r') as f:
        config = yaml.safe_load(f) or {}

    grid_config = config.get('grid', {})
    if grid_config is None:
        grid_config = {}
    if not isinstance(grid_config, dict):
        raise ValueError(f"Invalid grid section in {config_file}; expected mapping.")

    settings = DEFAULT_GRID_SETTINGS.copy()
    settings.update(grid_config)

    spaces = settings['spaces']
    if isinstance(spaces, bool) or not isinstance(spaces, int) or spaces < 0:
        raise ValueError("grid.spaces must be a non-negative integer")

    separator = settings['separator']
    if separator is not None and not isinstance(separator, str):
        raise ValueError("grid.separator must be a string or null")

    direction = str(settings['direction']).strip().lower().replace('-', '_')
    if direction not in VALID_DIRECTIONS:
        allowed = ', '.join(VALID_DIRECTIONS)
        raise ValueError(f"grid.direction must be one of: {allowed}")
    settings['direction'] = direction

    alignment = str(settings['alignment']).strip().lower()
    if alignment not in VALID_ALIGNMENTS:
        allowed = ', '.join(VALID_ALIGNMENTS)
        raise ValueError(f"grid.alignment must be one of: {allowed}")
    settings['alignment'] = alignment

    max_width = settings['max_width']
    if max_width is not None:
        if isinstance(max_width, bool) or not isinstance(max_width, int) or max_width <= 0:
            raise ValueError("grid.max_width must be a positive integer or null")

    unknown_keys = set(grid_config) - set(DEFAULT_GRID_SETTINGS)
    if unknown_keys:
        logger.warning(f"Ignoring unknown grid settings in {config_file}: {', '.join(sorted(unknown_keys))}")

    return settings


def grid_options_from_settings(settings: dict[str, object]) -> GridOptions:
    """Build GridOptions from validated grid settings; a separator wins over spaces."""
    if settings.get('separator') is not None:
        filling = Text(settings['separator'])
    else:
        filling = Spaces(settings['spaces'])
    return GridOptions(filling=filling, direction=Direction(settings['direction']))
