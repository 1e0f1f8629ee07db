"""
CLI utilities for termgrid.

Handles command-line argument parsing and validation of layout options.
"""

from __future__ import annotations

import argparse
import difflib
import logging
import sys
from pathlib import Path

import yaml

from grid_core.config import GridConfigService
from grid_core.constants import DEFAULT_GRID_SETTINGS
from grid_core.filling import Direction

logger = logging.getLogger("termgrid")

__version__ = "1.0.0"
DEFAULT_CONFIG_PATH = Path("config.yaml")
DIRECTION_ALIASES = {
    "row-major": Direction.ROW_MAJOR,
    "row_major": Direction.ROW_MAJOR,
    "across": Direction.ROW_MAJOR,
    "column-major": Direction.COLUMN_MAJOR,
    "column_major": Direction.COLUMN_MAJOR,
    "down": Direction.COLUMN_MAJOR,
}


class CLIError(ValueError):
    """User-facing CLI validation error with optional hint text."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class FriendlyArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises CLIError instead of exiting immediately."""

    def error(self, message: str) -> None:
        hint = None
        if "not allowed with argument" in message:
            hint = "Use either --spaces N or --separator TEXT, not both."
        elif "unrecognized arguments" in message and "--align" in message:
            hint = "Use --right-align (or -r) to right-align items."
        usage = self.format_usage().strip()
        raise CLIError(f"Argument error: {message}\n{usage}", hint=hint)


def _suggest_values(value: str, options: list[str], max_suggestions: int = 3) -> str | None:
    """Return a short suggestion string from close matches."""
    matches = difflib.get_close_matches(value, options, n=max_suggestions, cutoff=0.5)
    if not matches:
        return None
    return ", ".join(matches)


def parse_direction(direction: str | None) -> Direction | None:
    """
    Parse a direction name or alias.

    Args:
        direction: 'row-major', 'column-major', 'across', 'down' (or None).

    Returns:
        Direction | None: Parsed direction, or None if direction is None.

    Raises:
        CLIError: If the direction is not recognised.
    """
    if direction is None:
        return None

    key = direction.strip().lower()
    if key in DIRECTION_ALIASES:
        return DIRECTION_ALIASES[key]

    options = list(DIRECTION_ALIASES.keys())
    suggestion = _suggest_values(key, options)
    hint = f"Did you mean: {suggestion}?" if suggestion else f"Allowed values: {', '.join(options)}."
    raise CLIError(f"Unknown direction '{direction}'.", hint)


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'")
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {parsed}")
    return parsed


def _positive_int(value: str) -> int:
    parsed = _non_negative_int(value)
    if parsed == 0:
        raise argparse.ArgumentTypeError("expected a positive integer, got 0")
    return parsed


def build_parser() -> FriendlyArgumentParser:
    """Build the argument parser for termgrid."""
    parser = FriendlyArgumentParser(
        prog="termgrid",
        description="Print items in aligned columns that fit the terminal width.",
        epilog="""
Examples:
  ls | %(prog)s                          # Read items from stdin
  %(prog)s one two three four -w 20      # Items as arguments, 20 columns wide
  %(prog)s -f names.txt -d down          # Fill columns top to bottom
  %(prog)s -t ' | ' -r *.py              # Pipe separator, right-aligned
  %(prog)s -c 3 a b c d e f g            # Exactly three columns
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Input
    input_group = parser.add_argument_group("input")
    input_group.add_argument(
        "items",
        nargs="*",
        help="Items to lay out. If omitted, items are read one per line from --file or stdin"
    )
    input_group.add_argument(
        "-f", "--file",
        type=Path,
        default=None,
        help="Read items from this file, one per line"
    )

    # Layout
    layout_group = parser.add_argument_group("layout options")
    layout_group.add_argument(
        "-w", "--width",
        type=_positive_int,
        default=None,
        help="Maximum output width in columns (default: grid.max_width from config, else terminal width)"
    )
    layout_group.add_argument(
        "-c", "--columns",
        type=_positive_int,
        default=None,
        help="Use exactly this many columns instead of fitting to a width"
    )
    filling_exclusive = layout_group.add_mutually_exclusive_group()
    filling_exclusive.add_argument(
        "-s", "--spaces",
        type=_non_negative_int,
        default=None,
        help=f"Number of spaces between columns (default: {DEFAULT_GRID_SETTINGS['spaces']})"
    )
    filling_exclusive.add_argument(
        "-t", "--separator",
        type=str,
        default=None,
        help="Literal separator text between columns (for example ' | ')"
    )
    layout_group.add_argument(
        "-d", "--direction",
        type=str,
        default=None,
        help="Fill order: 'row-major' (alias 'across', default) or 'column-major' (alias 'down')"
    )
    layout_group.add_argument(
        "-r", "--right-align",
        action="store_true",
        help="Right-align items within their columns"
    )

    # Advanced options
    advanced_group = parser.add_argument_group("advanced options")
    advanced_group.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to config YAML file (default: {DEFAULT_CONFIG_PATH})"
    )
    advanced_group.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress console log output except errors"
    )
    advanced_group.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose console log output (DEBUG level)"
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for termgrid.

    Returns:
        argparse.Namespace: Parsed command-line arguments.

    Raises:
        CLIError: If arguments are invalid.
    """
    args = build_parser().parse_args(argv)
    args.direction = parse_direction(args.direction)
    if args.quiet and args.verbose:
        raise CLIError("--quiet and --verbose cannot be used together.")
    return args


def resolve_config_path(config_path: Path) -> Path | None:
    """
    Decide which config file to read.

    The default config.yaml is optional; an explicitly requested file must exist.

    Returns:
        Path | None: The config path, or None to use built-in defaults.
    """
    if config_path.exists():
        return config_path
    if config_path == DEFAULT_CONFIG_PATH:
        return None
    raise CLIError(
        f"Config file not found: {config_path}",
        "Provide a valid --config path, or omit it to use built-in defaults.",
    )


def load_settings(config_path: Path | None) -> dict[str, object]:
    """Load grid settings from config, or defaults when there is no config file."""
    if config_path is None:
        return DEFAULT_GRID_SETTINGS.copy()
    try:
        return GridConfigService(config_path).load_grid_settings()
    except (ValueError, OSError, yaml.YAMLError) as exc:
        raise CLIError(
            f"Invalid config in {config_path}: {exc}",
            "Fix the grid section of the config file.",
        ) from exc


def read_items(args: argparse.Namespace, stdin=None) -> list[str]:
    """
    Collect the items to lay out.

    Positional items win; otherwise lines come from --file or stdin, with
    trailing newlines stripped and blank lines skipped.
    """
    if args.items:
        return list(args.items)

    if args.file is not None:
        if not args.file.exists():
            raise CLIError(f"Input file not found: {args.file}")
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise CLIError(
                f"Cannot read items from {args.file}: {exc}",
                "Pass a UTF-8 text file with one item per line.",
            ) from exc
    else:
        stream = stdin if stdin is not None else sys.stdin
        lines = stream.read().splitlines()

    return [line for line in lines if line.strip()]
