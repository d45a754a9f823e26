import numpy as np
import pytest
from PIL import Image

from asciicanvas.glyphs import find_monospace_font

FONT_PATH = find_monospace_font()
needs_font = pytest.mark.skipif(FONT_PATH is None, reason="No monospace font found on system")


def image_from_cells(colours, unit):
    """Build an RGBA image where colours[row][col] fills a unit x unit block."""
    arr = np.asarray(colours, dtype=np.uint8)
    if arr.shape[-1] == 3:
        alpha = np.full(arr.shape[:-1] + (1,), 255, dtype=np.uint8)
        arr = np.concatenate([arr, alpha], axis=-1)
    arr = arr.repeat(unit, axis=0).repeat(unit, axis=1)
    return Image.fromarray(arr)


@pytest.fixture
def red_image():
    return Image.new("RGBA", (100, 100), (255, 0, 0, 255))


@pytest.fixture
def checker_image():
    """2x2 cells of 10px: black, white / white, black."""
    return image_from_cells(
        [
            [(0, 0, 0), (255, 255, 255)],
            [(255, 255, 255), (0, 0, 0)],
        ],
        unit=10,
    )
