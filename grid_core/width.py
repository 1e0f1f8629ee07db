"""Display width measurement for terminal text."""

from __future__ import annotations

import wcwidth


def display_width(text: str) -> int:
    """
    Return the number of terminal columns a string occupies.

    Wide (CJK) glyphs count as two columns and combining or zero-width
    characters as none. Non-printable characters, which wcwidth reports
    as -1, are counted as zero so the result is never negative.

    Args:
        text: The string to measure.

    Returns:
        int: Display width in terminal columns.
    """
    width = 0
    for char in text:
        char_width = wcwidth.wcwidth(char)
        if char_width > 0:
            width += char_width
    return width
