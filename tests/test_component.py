from pathlib import Path

import pytest
from jinja2 import UndefinedError

from html2jsx.component import component_name_from_path, jinja_env, render_component
from html2jsx.converter import render_output
from html2jsx.parser import parse_document


def test_render_component_single_root():
    module = render_component("Hello", parse_document("<p>Hi</p>"))
    assert module == (
        "export default function Hello() {\n"
        "  return (\n"
        "    <p>Hi</p>\n"
        "  );\n"
        "}\n"
    )


def test_render_component_wraps_sibling_roots_in_fragment():
    module = render_component("Pair", parse_document("<p>One</p>\n<p>Two</p>"))
    assert "    <><p>One</p><p>Two</p></>\n" in module


def test_render_component_empty_document_returns_null():
    module = render_component("Empty", parse_document("  <!-- nothing -->  "))
    assert module == "export default function Empty() {\n  return null;\n}\n"


def test_render_component_body_is_not_html_escaped():
    module = render_component("Label", parse_document('<label for="x">A & B</label>'))
    assert '<label htmlFor="x">A &amp; B</label>' in module


def test_render_component_rejects_invalid_names():
    with pytest.raises(ValueError):
        render_component("lowercase", [])
    with pytest.raises(ValueError):
        render_component("Has-Dash", [])


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("about-us.html", "AboutUs"),
        ("pages/index.html", "Index"),
        ("contact_form.htm", "ContactForm"),
        ("404.html", "Page404"),
        ("-", "Page"),
    ],
)
def test_component_name_from_path(path: str, expected: str):
    assert component_name_from_path(Path(path)) == expected


def test_render_output_plain_and_component():
    assert render_output("<br>") == "<br />\n"
    assert render_output("<br>", component="Break").startswith("export default function Break() {")


def test_jinja_env_is_strict():
    env = jinja_env()
    template = env.from_string("{{ missing_value }}")
    with pytest.raises(UndefinedError):
        template.render()
