"""Highlight renderer: source text plus tokens to HTML markup.

Every token becomes an element whose class names its type, e.g.
``<span class="token-key">status</span>``. Text between tokens is copied
through untagged. Both are escaped with `escape_html`, so removing the
tags and unescaping the result gives back the original input exactly.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from queryhl.lexer.lexer import tokenize
from queryhl.lexer.tokens import Token
from queryhl.render.escape import escape_html
from queryhl.render.styles import PREVIEW_CLASS, stylesheet

logger = logging.getLogger(__name__)

_TAG_NAME = re.compile(r"[A-Za-z][A-Za-z0-9-]*")
_CLASS_PREFIX = re.compile(r"[A-Za-z0-9_-]*")


@dataclass(frozen=True)
class HtmlRenderer:
    """Renders tokens as tagged, escaped HTML.

    Fields:
        tag: Element name wrapped around each token.
        class_prefix: Prepended to the token type to form the class name.
    """

    tag: str = "span"
    class_prefix: str = "token-"

    def __post_init__(self) -> None:
        if not _TAG_NAME.fullmatch(self.tag):
            raise ValueError(f"invalid element name: {self.tag!r}")
        if not _CLASS_PREFIX.fullmatch(self.class_prefix):
            raise ValueError(f"invalid class prefix: {self.class_prefix!r}")

    def render(self, text: str, tokens: Sequence[Token]) -> str:
        """Render *text* with *tokens* wrapped.

        Tokens must be sorted and non-overlapping, as `tokenize` returns
        them; this is not re-checked.
        """
        parts: list[str] = []
        last_pos = 0

        for token in tokens:
            if token.start > last_pos:
                parts.append(escape_html(text[last_pos:token.start]))
            parts.append(self._wrap(token))
            last_pos = token.end

        if last_pos < len(text):
            parts.append(escape_html(text[last_pos:]))

        logger.debug("rendered %d tokens", len(tokens))
        return "".join(parts)

    def highlight(self, text: str) -> str:
        """Tokenize and render *text* in one call."""
        return self.render(text, tokenize(text))

    def page(self, text: str, title: str = "Query preview") -> str:
        """Return a standalone HTML document previewing *text*."""
        return (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{escape_html(title)}</title>\n"
            f"<style>\n{stylesheet(self.class_prefix)}\n</style>\n"
            "</head>\n"
            "<body>\n"
            f'<div class="{PREVIEW_CLASS}">{self.highlight(text)}</div>\n'
            "</body>\n"
            "</html>\n"
        )

    def _wrap(self, token: Token) -> str:
        css_class = f"{self.class_prefix}{token.type.value}"
        return f'<{self.tag} class="{css_class}">{escape_html(token.content)}</{self.tag}>'


_DEFAULT_RENDERER = HtmlRenderer()


def render(text: str, tokens: Sequence[Token]) -> str:
    """Render *text* and its *tokens* with the default renderer."""
    return _DEFAULT_RENDERER.render(text, tokens)


def highlight(text: str) -> str:
    """Tokenize *text* and render it with the default renderer."""
    return _DEFAULT_RENDERER.highlight(text)
