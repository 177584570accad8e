"""Serialize parsed markup nodes as JSX."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from .dom_model import Node, Text


ATTRIBUTE_RENAMES: Dict[str, str] = {"class": "className", "for": "htmlFor"}
VOID_ELEMENTS = frozenset({"br", "img", "input", "hr", "meta", "link"})

# Ampersand first so later replacements are not re-escaped.
_JSX_ESCAPES = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"), ('"', "&quot;"))


def escape_jsx(text: str) -> str:
    """Escape the characters that are unsafe in JSX text and attribute values."""
    for char, entity in _JSX_ESCAPES:
        text = text.replace(char, entity)
    return text


def format_attribute(key: str, value: Optional[str]) -> str | None:
    """Render one attribute pair, or None when the value is absent."""
    if value is None:
        return None
    name = ATTRIBUTE_RENAMES.get(key, key)
    return f'{name}="{escape_jsx(value)}"'


def render_attributes(attrs: Mapping[str, Optional[str]]) -> str:
    parts = [
        rendered
        for rendered in (format_attribute(key, value) for key, value in attrs.items())
        if rendered is not None
    ]
    if not parts:
        return ""
    return " " + " ".join(parts)


def _render_children(children: Sequence[Node]) -> str:
    jsx_parts: List[str] = []
    for child in children:
        rendered = node_to_jsx(child)
        if rendered:
            jsx_parts.append(rendered)
    return "".join(jsx_parts)


def node_to_jsx(node: Node) -> str:
    if isinstance(node, Text):
        return escape_jsx(node.content.strip())

    attrs = render_attributes(node.attrs)
    if not node.children and node.name in VOID_ELEMENTS:
        return f"<{node.name}{attrs} />"
    return f"<{node.name}{attrs}>{_render_children(node.children)}</{node.name}>"


def nodes_to_jsx(nodes: Sequence[Node]) -> str:
    """Serialize a document's root nodes in order, without a wrapping element."""
    return _render_children(nodes)


__all__ = [
    "ATTRIBUTE_RENAMES",
    "VOID_ELEMENTS",
    "escape_jsx",
    "format_attribute",
    "node_to_jsx",
    "nodes_to_jsx",
    "render_attributes",
]
