import logging
import math
from collections.abc import Sequence

log = logging.getLogger(__name__)

# Stands in for a glyph whose index falls outside the charset
FALLBACK_CHAR = " "


def grayscale_index(luminance: float, length: int) -> int:
    """Charset index for a luminance, rounding halves up. Not clamped."""
    return math.floor(luminance * (length - 1) + 0.5)


def select_grayscale_char(luminance: float, chars: Sequence[str]) -> str:
    """Pick the glyph for a luminance, darkest first.

    An index outside the charset is reported as a warning and replaced with
    FALLBACK_CHAR so the cell still occupies its slot.
    """
    index = grayscale_index(luminance, len(chars))
    if 0 <= index < len(chars):
        return chars[index]
    log.warning(
        "Invalid character index %d for charset of length %d (luminance %r)",
        index,
        len(chars),
        luminance,
        extra={"char_index": index, "charset_length": len(chars), "luminance": luminance},
    )
    return FALLBACK_CHAR


def colored_markup_index(counter: int, length: int) -> int:
    """Charset index for the `counter`-th cell emitted into colored markup."""
    return counter % length


def colored_glyph_index(row: int, col: int, row_width: int, length: int) -> int:
    """Charset index for the cell at (row, col) of a colored glyph image."""
    return (row * row_width + col) % length
