from collections.abc import Sequence

from asciicanvas.errors import InvalidCharsetError

# Darkest first, lightest (a space) last
DEFAULT_MONOCHROME_CHARS = tuple("@80GCLft1i;:,. ")

DEFAULT_COLORED_CHARS = tuple("@")

STANDARD = tuple("@%#*+=-:. ")

# Full block down to a space
BLOCKS = tuple("█▓▒░ ")

# ASCII characters useful for texture and edges, densest first
TEXTURE_ASCII = tuple(reversed(" .,:;!'-/\\xX*+=#@"))

CHARSETS = {
    "monochrome": DEFAULT_MONOCHROME_CHARS,
    "colored": DEFAULT_COLORED_CHARS,
    "standard": STANDARD,
    "blocks": BLOCKS,
    "texture": TEXTURE_ASCII,
}


def as_charset(chars: str | Sequence[str]) -> tuple[str, ...]:
    """Normalise a string or sequence of glyphs into a charset tuple.

    Every entry must be a one-character string and the set must not be empty.
    """
    if chars is None:
        raise InvalidCharsetError("Character set is required")
    charset = tuple(chars)
    if not charset:
        raise InvalidCharsetError("Character set must not be empty")
    for i, char in enumerate(charset):
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidCharsetError(f"Character set entry {i} is not a single character: {char!r}")
    return charset


def get_charset(name: str) -> tuple[str, ...]:
    try:
        return CHARSETS[name]
    except KeyError:
        raise InvalidCharsetError(f"Unknown character set: {name!r} (choose from {', '.join(sorted(CHARSETS))})") from None
