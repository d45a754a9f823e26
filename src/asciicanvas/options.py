import numbers
from collections.abc import Sequence
from dataclasses import dataclass

from asciicanvas.charsets import DEFAULT_COLORED_CHARS, DEFAULT_MONOCHROME_CHARS, as_charset
from asciicanvas.errors import InvalidSizeError


def _check_int(name: str, value, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < minimum:
        raise InvalidSizeError(f"{name} must be an integer >= {minimum}, got {value!r}")


@dataclass(frozen=True)
class _RenderOptions:
    size: int = 100  # cells along the longer edge
    chars: str | Sequence[str] = DEFAULT_MONOCHROME_CHARS

    def __post_init__(self):
        _check_int("size", self.size, 1)
        object.__setattr__(self, "chars", as_charset(self.chars))


@dataclass(frozen=True)
class _HTMLOptions(_RenderOptions):
    container: bool = False  # wrap the cells in a CSS grid <div>


@dataclass(frozen=True)
class _ImageOptions(_RenderOptions):
    font_size: int = 10
    gap: int = 0  # extra pixels between glyph cells
    font_path: str | None = None  # monospace system font when None

    def __post_init__(self):
        super().__post_init__()
        _check_int("font_size", self.font_size, 1)
        _check_int("gap", self.gap, 0)


@dataclass(frozen=True)
class ColoredHTMLOptions(_HTMLOptions):
    chars: str | Sequence[str] = DEFAULT_COLORED_CHARS


@dataclass(frozen=True)
class GrayscaleHTMLOptions(_HTMLOptions):
    chars: str | Sequence[str] = DEFAULT_MONOCHROME_CHARS


@dataclass(frozen=True)
class ColoredImageOptions(_ImageOptions):
    chars: str | Sequence[str] = DEFAULT_COLORED_CHARS


@dataclass(frozen=True)
class GrayscaleImageOptions(_ImageOptions):
    chars: str | Sequence[str] = DEFAULT_MONOCHROME_CHARS
