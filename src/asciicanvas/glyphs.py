import functools
import logging
import os
import shutil
import subprocess
from collections.abc import Sequence

from PIL import Image, ImageDraw, ImageFont

from asciicanvas.mapping import colored_glyph_index, select_grayscale_char
from asciicanvas.model import SampledGrid

log = logging.getLogger(__name__)

MONOSPACE_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
    "/System/Library/Fonts/Menlo.ttc",
    "C:\\Windows\\Fonts\\consola.ttf",
]

GLYPH_BLACK = (0, 0, 0, 255)
TRANSPARENT = (0, 0, 0, 0)


def _fontconfig_match(pattern: str) -> str | None:
    """File that fontconfig resolves a font pattern to, if fontconfig is installed."""
    if shutil.which("fc-match") is None:
        return None
    result = subprocess.run(["fc-match", "-f", "%{file}", pattern], capture_output=True, text=True)
    path = result.stdout.strip()
    return path if result.returncode == 0 and path else None


@functools.lru_cache(maxsize=1)
def find_monospace_font() -> str | None:
    installed = (path for path in MONOSPACE_FONT_CANDIDATES if os.path.isfile(path))
    return next(installed, None) or _fontconfig_match("monospace")


def load_font(font_size: int, font_path: str | None = None) -> ImageFont.FreeTypeFont:
    """Load a fixed-width face at `font_size` pixels.

    Falls back to Pillow's bundled font when the system has no monospace font.
    """
    path = font_path or find_monospace_font()
    if path is None:
        log.debug("No monospace font found, using Pillow's default font at %dpx", font_size)
        return ImageFont.load_default(size=font_size)
    log.debug("Using font %s at %dpx", path, font_size)
    return ImageFont.truetype(path, font_size)


def glyph_image_size(grid: SampledGrid, font_size: int, gap: int) -> tuple[int, int]:
    pitch = font_size + gap
    return (grid.cols * pitch, grid.rows * pitch)


def _render(grid: SampledGrid, font_size: int, gap: int, font: ImageFont.FreeTypeFont, glyph_for) -> Image.Image:
    """Draw one glyph per cell, baseline at the bottom of a font_size square."""
    image = Image.new("RGBA", glyph_image_size(grid, font_size, gap), TRANSPARENT)
    draw = ImageDraw.Draw(image)
    pitch = font_size + gap
    for row in range(grid.rows):
        for col in range(grid.cols):
            char, fill = glyph_for(row, col)
            if char == " ":
                continue
            draw.text((col * pitch, row * pitch + font_size), char, fill=fill, font=font, anchor="ls")
    return image


def grayscale_image(
    grid: SampledGrid,
    chars: Sequence[str],
    font_size: int = 10,
    gap: int = 0,
    font_path: str | None = None,
) -> Image.Image:
    """Redraw the grid as black glyphs chosen by luminance on a transparent image."""
    font = load_font(font_size, font_path)

    def glyph_for(row, col):
        return select_grayscale_char(float(grid.luminance[row, col]), chars), GLYPH_BLACK

    return _render(grid, font_size, gap, font, glyph_for)


def colored_image(
    grid: SampledGrid,
    chars: Sequence[str],
    font_size: int = 10,
    gap: int = 0,
    font_path: str | None = None,
) -> Image.Image:
    """Redraw the grid as glyphs filled with each cell's averaged RGBA.

    Glyphs cycle through `chars` by cell position regardless of colour.
    """
    font = load_font(font_size, font_path)

    def glyph_for(row, col):
        char = chars[colored_glyph_index(row, col, grid.cols, len(chars))]
        return char, tuple(int(v) for v in grid.rgba[row, col])

    return _render(grid, font_size, gap, font, glyph_for)
