"""queryhl render — HTML highlighting of tokenized queries."""

from queryhl.render.escape import escape_html
from queryhl.render.highlighter import HtmlRenderer, highlight, render
from queryhl.render.styles import DEFAULT_STYLES, stylesheet

__all__ = [
    "escape_html",
    "HtmlRenderer",
    "highlight",
    "render",
    "DEFAULT_STYLES",
    "stylesheet",
]
