import html
from collections.abc import Sequence

from asciicanvas.mapping import colored_markup_index, select_grayscale_char
from asciicanvas.model import SampledGrid


def css_rgba(r: int, g: int, b: int, a: int) -> str:
    return f"rgba({r}, {g}, {b}, {a / 255:.2f})"


def html_container(content: str, cols: int, rows: int) -> str:
    """Wrap cell markup in a CSS grid sized cols x rows."""
    style = f"display: grid; grid-template-columns: repeat({cols}, 1fr); --char-width: {cols}; --char-height: {rows};"
    return f'<div class="ascii-art-container" style="{style}">{content}</div>'


def colored_html(grid: SampledGrid, chars: Sequence[str], container: bool = False) -> str:
    """Render every cell as a span coloured with its averaged RGBA.

    Glyphs cycle through `chars` in scan order regardless of colour.
    """
    counter = 0
    lines = []
    for row in grid:
        parts = []
        for cell in row:
            char = chars[colored_markup_index(counter, len(chars))]
            counter += 1
            parts.append(f'<span style="color: {css_rgba(*cell.rgba)};">{html.escape(char)}</span>')
        lines.append("".join(parts))

    if container:
        return html_container("".join(lines), grid.cols, grid.rows)
    return "\n".join(lines)


def grayscale_html(grid: SampledGrid, chars: Sequence[str], container: bool = False) -> str:
    """Render every cell as the glyph matching its luminance, without colour."""
    lines = []
    for row in grid:
        glyphs = [html.escape(select_grayscale_char(cell.luminance, chars)) for cell in row]
        if container:
            lines.append("".join(f"<span>{glyph}</span>" for glyph in glyphs))
        else:
            lines.append("".join(glyphs))

    if container:
        return html_container("".join(lines), grid.cols, grid.rows)
    return "\n".join(lines)
