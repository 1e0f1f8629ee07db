"""Core constants shared across configuration helpers."""

VALID_DIRECTIONS = ("row_major", "column_major")
VALID_ALIGNMENTS = ("left", "right")
DEFAULT_GRID_SETTINGS = {
    'spaces': 2,
    'separator': None,
    'direction': VALID_DIRECTIONS[0],
    'alignment': VALID_ALIGNMENTS[0],
    'max_width': None,
}
FALLBACK_TERMINAL_WIDTH = 80
