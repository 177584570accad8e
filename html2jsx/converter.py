"""Conversion entry points from HTML markup to JSX."""

from __future__ import annotations

from pathlib import Path

from .component import render_component
from .io_utils import read_markup, write_text
from .jsx_writer import nodes_to_jsx
from .parser import parse_document


def convert(markup: str) -> str:
    """Return the JSX equivalent of an HTML document.

    Attribute names ``class`` and ``for`` become ``className`` and
    ``htmlFor``, text and attribute values are escaped, whitespace-only text
    disappears and empty void elements self-close. Sibling roots are
    concatenated without a wrapper.
    """
    return nodes_to_jsx(parse_document(markup))


def render_output(markup: str, component: str | None = None) -> str:
    """Render file output: plain JSX, or a component module when named."""
    if component is not None:
        return render_component(component, parse_document(markup))
    return convert(markup) + "\n"


def convert_file(input_path: Path, output_path: Path, *, component: str | None = None) -> Path:
    markup = read_markup(input_path)
    return write_text(output_path, render_output(markup, component=component))


__all__ = ["convert", "convert_file", "render_output"]
