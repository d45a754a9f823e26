from __future__ import annotations

import numbers
from collections.abc import MutableSequence
from pathlib import Path

from PIL import Image, ImageDraw

from asciicanvas import glyphs, markup
from asciicanvas.errors import InvalidSizeError, InvalidSurfaceError
from asciicanvas.model import SampledGrid
from asciicanvas.options import ColoredHTMLOptions, ColoredImageOptions, GrayscaleHTMLOptions, GrayscaleImageOptions
from asciicanvas.sampling import luminance, sample

DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 150


def _blank(width: int, height: int) -> Image.Image:
    return Image.new("RGBA", (width, height), (0, 0, 0, 0))


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise InvalidSizeError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


class AsciiArtCanvas:
    """A drawable RGBA surface that renders itself as ASCII art.

    The canvas owns its image. Changing the width or height allocates a new,
    blank image, so references to the old `image` go stale.
    """

    def __init__(self, image: Image.Image | None = None):
        if image is None:
            image = _blank(DEFAULT_WIDTH, DEFAULT_HEIGHT)
        if not isinstance(image, Image.Image):
            raise InvalidSurfaceError(f"Expected a PIL image, got {type(image).__name__}")
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self.image = image
        self._ctx: ImageDraw.ImageDraw | None = None
        self._parent = None
        self._mounted: Image.Image | None = None

    @classmethod
    def open(cls, path: str | Path) -> AsciiArtCanvas:
        with Image.open(path) as image:
            return cls(image.convert("RGBA"))

    @property
    def ctx(self) -> ImageDraw.ImageDraw:
        """Drawing context for the current image, created on first use."""
        if self._ctx is None:
            self._ctx = ImageDraw.Draw(self.image)
        return self._ctx

    @property
    def width(self) -> int:
        return self.image.width

    @width.setter
    def width(self, value: int) -> None:
        self._reallocate(_check_dimension("width", value), self.height)

    @property
    def height(self) -> int:
        return self.image.height

    @height.setter
    def height(self, value: int) -> None:
        self._reallocate(self.width, _check_dimension("height", value))

    def _reallocate(self, width: int, height: int) -> None:
        previous = self._mounted
        self.image = _blank(width, height)
        self._ctx = None
        self._replace_in_parent(previous)

    def _replace_in_parent(self, previous: Image.Image) -> None:
        parent = self._parent
        if parent is None:
            return
        if isinstance(parent, MutableSequence):
            for i, child in enumerate(parent):
                if child is previous:
                    parent[i] = self.image
                    break
        else:
            if callable(getattr(parent, "remove", None)):
                parent.remove(previous)
            parent.append(self.image)
        self._mounted = self.image

    def resize(self, width: int, height: int | None = None) -> AsciiArtCanvas:
        """Set the surface size; height defaults to width. Clears the content."""
        width = width or self.width
        height = height or width
        self._reallocate(_check_dimension("width", width), _check_dimension("height", height))
        return self

    def mount(self, container) -> AsciiArtCanvas:
        """Append the image to `container` if it accepts children."""
        append = getattr(container, "append", None)
        if callable(append):
            append(self.image)
            self._parent = container
            self._mounted = self.image
        return self

    def clear(self) -> AsciiArtCanvas:
        self.ctx.rectangle((0, 0, self.width, self.height), fill=(0, 0, 0, 0))
        return self

    def destroy(self) -> AsciiArtCanvas:
        """Detach the image from the container it was mounted in."""
        parent, self._parent = self._parent, None
        mounted, self._mounted = self._mounted, None
        if isinstance(parent, MutableSequence):
            for i, child in enumerate(parent):
                if child is mounted:
                    del parent[i]
                    break
        elif parent is not None and callable(getattr(parent, "remove", None)):
            parent.remove(mounted)
        return self

    def draw_image(
        self,
        source: Image.Image | AsciiArtCanvas,
        dest: tuple[int, int] = (0, 0),
        size: tuple[int, int] | None = None,
    ) -> AsciiArtCanvas:
        """Composite `source` over the surface with its top-left corner at `dest`."""
        if isinstance(source, AsciiArtCanvas):
            source = source.image
        if not isinstance(source, Image.Image):
            raise InvalidSurfaceError(f"Cannot draw {type(source).__name__} onto a canvas")
        source = source.convert("RGBA")
        if size is not None:
            source = source.resize(size, Image.LANCZOS)
        self.image.alpha_composite(source, dest=dest)
        return self

    def save(self, path: str | Path, format: str | None = None) -> None:
        self.image.save(path, format=format)

    def calculate_luminance(self, r: int, g: int, b: int) -> float:
        return luminance(r, g, b)

    def get_sampled_map(self, size: int = 100) -> SampledGrid:
        return sample(self.image, size)

    def to_colored_html(self, options: ColoredHTMLOptions | None = None) -> str:
        options = options or ColoredHTMLOptions()
        grid = self.get_sampled_map(options.size)
        return markup.colored_html(grid, options.chars, container=options.container)

    def to_grayscale_html(self, options: GrayscaleHTMLOptions | None = None) -> str:
        options = options or GrayscaleHTMLOptions()
        grid = self.get_sampled_map(options.size)
        return markup.grayscale_html(grid, options.chars, container=options.container)

    def to_colored_image(self, options: ColoredImageOptions | None = None) -> AsciiArtCanvas:
        options = options or ColoredImageOptions()
        grid = self.get_sampled_map(options.size)
        return AsciiArtCanvas(
            glyphs.colored_image(grid, options.chars, options.font_size, options.gap, options.font_path)
        )

    def to_grayscale_image(self, options: GrayscaleImageOptions | None = None) -> AsciiArtCanvas:
        options = options or GrayscaleImageOptions()
        grid = self.get_sampled_map(options.size)
        return AsciiArtCanvas(
            glyphs.grayscale_image(grid, options.chars, options.font_size, options.gap, options.font_path)
        )
