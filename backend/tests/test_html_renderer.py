"""Tests for HTML serialization of render trees."""

from __future__ import annotations

from article_renderer.block_dispatcher import ContentRenderer
from article_renderer.document_models import Markup
from article_renderer.html_renderer import node_to_html, render_html
from article_renderer.render_tree import element


def test_markup_is_verbatim_and_text_is_escaped() -> None:
    trusted = element("p", "my-4", html=Markup("<b>bold</b> &amp; more"))
    plain = element("p", text="<script>alert(1)</script> & co")

    assert node_to_html(trusted) == '<p class="my-4"><b>bold</b> &amp; more</p>'
    assert node_to_html(plain) == "<p>&lt;script&gt;alert(1)&lt;/script&gt; &amp; co</p>"


def test_attributes_are_escaped_and_void_tags_unclosed() -> None:
    node = element("img", props={"src": 'a.png" onerror="x', "alt": "Cat"})

    assert node_to_html(node) == '<img src="a.png&quot; onerror=&quot;x" alt="Cat">'


def test_fragment_and_icon() -> None:
    fragment = element("fragment", "", element("span", text="a"), element("icon", "h-5 w-5", props={"name": "check"}))

    html = node_to_html(fragment)

    assert html.startswith("<span>a</span><svg class=\"h-5 w-5\" ")
    assert 'd="M5 13l4 4L19 7"' in html
    assert "fragment" not in html


def test_boolean_and_missing_attributes() -> None:
    node = element("input", props={"checked": True, "disabled": False, "value": None})

    assert node_to_html(node) == "<input checked></input>"


def test_document_to_html() -> None:
    nodes = ContentRenderer().render_document(
        [
            {"type": "header", "data": {"text": "Hi", "level": 2}},
            {"type": "image", "data": {"file": {"url": "a.png"}, "caption": "A <cat>"}},
            {"type": "code", "data": {"code": "a < b", "language": "python"}},
            {"type": "table", "data": {"content": "h\nv"}},
        ]
    )

    html = render_html(nodes)
    lines = html.split("\n")

    assert lines[0] == '<h2 class="text-4xl font-bold my-5">Hi</h2>'
    assert 'alt="A &lt;cat&gt;"' in lines[1]
    assert "<p class=\"w-full text-center my-3 md:mb-12 text-base text-gray-600 dark:text-gray-400\">A &lt;cat&gt;</p>" in lines[1]
    assert '<code class="language-python" data-language="python">a &lt; b</code>' in lines[2]
    assert "<thead" in lines[3] and "<th " in lines[3] and "<td " in lines[3]
    assert render_html(nodes[0]) == lines[0]
