"""Parse HTML into the html2jsx node model.

BeautifulSoup's html.parser builder does the recovery work: end tags pop back
to the matching element, elements left open are closed at end of input, and
void elements never take children. The standard library tokenizer lowercases
attribute names, so the start-tag handler below restores the casing written in
the source before the tree is built.
"""

from __future__ import annotations

import re
import warnings
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag, XMLParsedAsHTMLWarning
from bs4.builder import HTMLParserTreeBuilder
from bs4.builder._htmlparser import BeautifulSoupHTMLParser
from bs4.element import PageElement, PreformattedString
from bs4.exceptions import ParserRejectedMarkup

from .dom_model import Document, Element, Node, Text


TAG_OPEN_RE = re.compile(r"<[a-zA-Z][^\t\n\r\f />\x00]*")
ATTR_RE = re.compile(
    r"""(?<=['"\s/])([^\s/>][^\s/=>]*)(?:\s*=+\s*('[^']*'|"[^"]*"|(?!['"])[^>\s]*))?"""
)


def _declared_attr_names(starttag_text: str | None) -> List[str]:
    if not starttag_text:
        return []
    match = TAG_OPEN_RE.match(starttag_text)
    if not match:
        return []
    return [attr.group(1) for attr in ATTR_RE.finditer(starttag_text, match.end())]


class CasePreservingHTMLParser(BeautifulSoupHTMLParser):
    """html.parser event handler that keeps attribute names as written."""

    def handle_starttag(
        self,
        tag: str,
        attrs: List[Tuple[str, Optional[str]]],
        handle_empty_element: bool = True,
    ) -> None:
        declared = _declared_attr_names(self.get_starttag_text())
        # Only trust the raw scan when it lines up with what the tokenizer saw.
        if len(declared) == len(attrs):
            attrs = [
                (name if name.lower() == key else key, value)
                for name, (key, value) in zip(declared, attrs)
            ]
        super().handle_starttag(tag, attrs, handle_empty_element=handle_empty_element)


class CasePreservingTreeBuilder(HTMLParserTreeBuilder):
    NAME = "html.parser.case-preserving"
    features = [NAME]

    def feed(self, markup) -> None:
        args, kwargs = self.parser_args
        parser = CasePreservingHTMLParser(self.soup, *args, **kwargs)
        try:
            parser.feed(markup)
            parser.close()
        except AssertionError as exc:
            raise ParserRejectedMarkup(exc) from exc
        parser.already_closed_empty_element = []


def parse_html(markup: str) -> BeautifulSoup:
    """Build a soup whose attribute names and values are left as declared."""
    builder = CasePreservingTreeBuilder(multi_valued_attributes=None)
    # An XML declaration is dropped like any other declaration.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
        return BeautifulSoup(markup, builder=builder)


def _to_node(element: PageElement) -> Node | None:
    if isinstance(element, Tag):
        children = [child for child in map(_to_node, element.contents) if child is not None]
        return Element(name=element.name, attrs=dict(element.attrs), children=children)
    # Comments, doctypes, CDATA and processing instructions are dropped.
    if isinstance(element, PreformattedString):
        return None
    if isinstance(element, NavigableString):
        return Text(content=str(element))
    return None


def soup_to_document(soup: BeautifulSoup) -> Document:
    nodes: Document = []
    for element in soup.contents:
        node = _to_node(element)
        if node is not None:
            nodes.append(node)
    return nodes


def parse_document(markup: str) -> Document:
    return soup_to_document(parse_html(markup))


__all__ = [
    "CasePreservingHTMLParser",
    "CasePreservingTreeBuilder",
    "parse_document",
    "parse_html",
    "soup_to_document",
]
