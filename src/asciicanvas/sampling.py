import logging
import numbers

import numpy as np
from PIL import Image

from asciicanvas.errors import InvalidSizeError
from asciicanvas.model import SampledGrid

log = logging.getLogger(__name__)

# W3C relative luminance weights for sRGB channels
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def luminance(r: int, g: int, b: int) -> float:
    """Relative luminance (0-1) of an 8-bit RGB colour."""
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * (r / 255) + wg * (g / 255) + wb * (b / 255)


def luminance_grid(rgb: np.ndarray) -> np.ndarray:
    """Per-cell luminance of a (..., 3) array of 8-bit RGB values."""
    normalized = rgb.astype(np.float64) / 255
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * normalized[..., 0] + wg * normalized[..., 1] + wb * normalized[..., 2]


def sampling_unit(width: int, height: int, size: int) -> int:
    """Side length in pixels of the blocks that fit `size` cells along the longer edge."""
    if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 1:
        raise InvalidSizeError(f"Grid size must be a positive integer, got {size!r}")
    unit = max(width, height) // int(size)
    if unit < 1:
        raise InvalidSizeError(f"Grid size {size} is larger than the longest side of a {width}x{height} surface")
    return unit


def sample(image: Image.Image, size: int = 100) -> SampledGrid:
    """Average an image into a grid of at most `size` cells along its longer edge.

    Blocks that would cross the right or bottom edge are dropped, so every
    cell covers exactly unit x unit pixels. Channel averages are truncated to
    integers before luminance is computed.
    """
    width, height = image.size
    unit = sampling_unit(width, height, size)
    rows = height // unit
    cols = width // unit
    if rows == 0 or cols == 0:
        raise InvalidSizeError(f"A {width}x{height} surface yields an empty grid at {unit}px per cell (size {size})")

    arr = np.asarray(image.convert("RGBA"))

    # Trim to exact grid and reshape into (rows, unit, cols, unit, 4)
    trimmed = arr[: rows * unit, : cols * unit]
    blocks = trimmed.reshape(rows, unit, cols, unit, 4)
    rgba = (blocks.sum(axis=(1, 3), dtype=np.uint64) // (unit * unit)).astype(np.uint8)

    log.debug("Sampled %dx%d surface into %dx%d cells (%dpx unit)", width, height, cols, rows, unit)
    return SampledGrid(rgba=rgba, luminance=luminance_grid(rgba[..., :3]), unit=unit)
