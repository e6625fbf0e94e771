"""Markup tools - Markdown to HTML and HTML to plain text."""
from typing import Any
import re

from ...tool_decorator import Tool
from . import CATEGORY

# Applied in order; each rule sees the output of the previous one
_MARKDOWN_RULES = (
    (re.compile(r"^### (.+)$", re.M), r"<h3>\1</h3>"),
    (re.compile(r"^## (.+)$", re.M), r"<h2>\1</h2>"),
    (re.compile(r"^# (.+)$", re.M), r"<h1>\1</h1>"),
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"`(.+?)`"), r"<code>\1</code>"),
    (re.compile(r"\[(.+?)\]\((.+?)\)"), r'<a href="\2">\1</a>'),
    (re.compile(r"^- (.+)$", re.M), r"<li>\1</li>"),
    (re.compile(r"(<li>.*</li>\n?)+"), r"<ul>\g<0></ul>"),
    (re.compile(r"\n\n"), "</p><p>"),
    (re.compile(r"^(?!<[a-z])(.+)$", re.M), r"<p>\1</p>"),
)

_HTML_RULES = (
    (re.compile(r"<script[\s\S]*?</script>", re.I), ""),
    (re.compile(r"<style[\s\S]*?</style>", re.I), ""),
    (re.compile(r"<br\s*/?>", re.I), "\n"),
    (re.compile(r"</p>", re.I), "\n\n"),
    (re.compile(r"</h[1-6]>", re.I), "\n\n"),
    (re.compile(r"<[^>]+>"), ""),
    (re.compile(r"&nbsp;"), " "),
    (re.compile(r"&amp;"), "&"),
    (re.compile(r"&lt;"), "<"),
    (re.compile(r"&gt;"), ">"),
    (re.compile(r"&quot;"), '"'),
    (re.compile(r"\n{3,}"), "\n\n"),
)


@Tool(
    "markdown_to_html",
    CATEGORY,
    "Convert Markdown text to HTML",
    {"type": "object", "properties": {"markdown": {"type": "string"}}, "required": ["markdown"]},
)
def markdown_to_html(markdown: str) -> dict[str, Any]:
    """Line-oriented conversion of headings, emphasis, code, links and lists."""
    html = markdown
    for pattern, replacement in _MARKDOWN_RULES:
        html = pattern.sub(replacement, html)
    return {"html": html, "char_count": len(html)}


@Tool(
    "html_to_text",
    CATEGORY,
    "Strip HTML tags and convert to plain text",
    {"type": "object", "properties": {"html": {"type": "string"}}, "required": ["html"]},
)
def html_to_text(html: str) -> dict[str, Any]:
    text = html
    for pattern, replacement in _HTML_RULES:
        text = pattern.sub(replacement, text)
    text = text.strip()
    return {"text": text, "original_length": len(html), "text_length": len(text)}
