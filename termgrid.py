"""
termgrid: print items in compact, aligned columns.

Main entry point. Reads items, fits them into a grid no wider than the
requested (or terminal) width and prints the result, falling back to one
item per line when no grid fits.
"""

import logging
import shutil
import sys

import yaml

from cli import CLIError, load_settings, parse_args, read_items, resolve_config_path
from grid_core.cell import Alignment, Cell
from grid_core.config import grid_options_from_settings
from grid_core.constants import FALLBACK_TERMINAL_WIDTH
from grid_core.filling import GridOptions
from grid_core.grid import Grid
from logging_config import get_logger, setup_logging


def _configure_console_logging(args, logger) -> None:
    """Apply console verbosity rules based on CLI flags."""
    termgrid_logger = logging.getLogger("termgrid")
    if args.verbose:
        for handler in termgrid_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled (console output at DEBUG level)")
    elif args.quiet:
        for handler in termgrid_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(logging.ERROR)


def _resolve_options(args, settings) -> GridOptions:
    """Merge config grid settings with CLI overrides."""
    settings = dict(settings)
    if args.separator is not None:
        settings['separator'] = args.separator
    elif args.spaces is not None:
        settings['separator'] = None
        settings['spaces'] = args.spaces
    if args.direction is not None:
        settings['direction'] = args.direction.value
    return grid_options_from_settings(settings)


def _resolve_width(args, settings) -> int:
    """CLI width, then config max_width, then the terminal width."""
    if args.width is not None:
        return args.width
    if settings['max_width'] is not None:
        return settings['max_width']
    return shutil.get_terminal_size((FALLBACK_TERMINAL_WIDTH, 24)).columns


def build_grid(items: list[str], options: GridOptions, alignment: Alignment) -> Grid:
    """Create a grid holding one cell per item."""
    grid = Grid(options)
    grid.reserve(len(items))
    for item in items:
        grid.add(Cell.from_text(item, alignment))
    return grid


def render_items(items: list[str], options: GridOptions, alignment: Alignment,
                 width: int, columns: int | None = None) -> str:
    """
    Render items as a grid, or one per line when they cannot fit.

    Args:
        items: Text items in display order.
        options: Fill policy and direction.
        alignment: Alignment applied to every item.
        width: Maximum output width (ignored when columns is given).
        columns: Fixed number of columns, or None to fit to width.

    Returns:
        str: Rendered text, each line terminated by a newline.
    """
    logger = get_logger("termgrid")
    grid = build_grid(items, options, alignment)

    if columns is not None:
        display = grid.fit_into_columns(columns)
        if not display.is_complete():
            logger.info(f"{columns} columns requested but some are empty for {len(items)} item(s)")
        return display.render()

    display = grid.fit_into_width(width)
    if display is None:
        logger.info(f"Items do not fit into width {width}; printing one per line")
        return "".join(f"{item}\n" for item in items)

    logger.debug(f"Grid is {display.width()} column(s) wide over {display.row_count()} row(s)")
    return display.render()


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for termgrid.

    Parses command-line arguments, loads grid settings, reads the items and
    prints them as a grid.
    """
    try:
        args = parse_args(argv)
        config_path = resolve_config_path(args.config)
    except CLIError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    # Initialize logging
    try:
        setup_logging(config_path)
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"ERROR: Invalid logging config in {config_path}: {e}", file=sys.stderr)
        return 2
    logger = get_logger("termgrid")  # Use explicit name, not __name__

    # Handle verbose/quiet flags for console output
    _configure_console_logging(args, logger)

    try:
        settings = load_settings(config_path)
        options = _resolve_options(args, settings)
        items = read_items(args)
    except CLIError as e:
        logger.error(str(e))
        return 2

    alignment = Alignment.RIGHT if args.right_align else Alignment(settings['alignment'])
    width = _resolve_width(args, settings)
    logger.debug(f"Laying out {len(items)} item(s) with {options} into width {width}")

    sys.stdout.write(render_items(items, options, alignment, width, args.columns))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
