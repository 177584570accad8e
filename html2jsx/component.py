"""Render converted markup as a JSX component module."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .dom_model import Node
from .jsx_writer import node_to_jsx


TEMPLATES_DIR = Path(__file__).parent / "templates"
COMPONENT_TEMPLATE = "component.jsx.jinja"
COMPONENT_NAME_PATTERN = r"^[A-Z][A-Za-z0-9_]*$"
COMPONENT_NAME_RE = re.compile(COMPONENT_NAME_PATTERN)
FALLBACK_COMPONENT_PREFIX = "Page"

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


def jinja_env() -> Environment:
    """Create a Jinja environment over the bundled component templates."""

    # Only .html templates are escaped; JSX bodies are already escaped.
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def component_name_from_path(path: Path) -> str:
    """PascalCase a file stem into a component name (``about-us.html`` -> ``AboutUs``)."""
    words = _WORD_RE.findall(Path(path).stem)
    name = "".join(word[:1].upper() + word[1:] for word in words)
    if not name or not name[0].isalpha():
        name = FALLBACK_COMPONENT_PREFIX + name
    return name


def _component_body(nodes: Sequence[Node]) -> str:
    roots: List[str] = [jsx for jsx in map(node_to_jsx, nodes) if jsx]
    if len(roots) > 1:
        return "<>" + "".join(roots) + "</>"
    return "".join(roots)


def render_component(name: str, nodes: Sequence[Node]) -> str:
    if not COMPONENT_NAME_RE.match(name):
        raise ValueError(
            f"Invalid component name '{name}': expected an identifier starting with an uppercase letter."
        )
    template = jinja_env().get_template(COMPONENT_TEMPLATE)
    return template.render(name=name, body=_component_body(nodes))


__all__ = [
    "COMPONENT_NAME_PATTERN",
    "component_name_from_path",
    "jinja_env",
    "render_component",
]
