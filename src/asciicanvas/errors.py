class AsciiCanvasError(ValueError):
    """Base class for all errors raised by asciicanvas."""


class InvalidSurfaceError(AsciiCanvasError):
    """The object handed to a canvas is not a drawable image."""


class InvalidSizeError(AsciiCanvasError):
    """A grid size, sampling unit or pixel dimension is unusable."""


class InvalidCharsetError(AsciiCanvasError):
    """A character set is empty or holds something other than single characters."""
