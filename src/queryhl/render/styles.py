"""Default colour scheme for highlighted queries."""

from __future__ import annotations

from queryhl.lexer.tokens import TokenType

PREVIEW_CLASS = "highlight-preview"

DEFAULT_STYLES: dict[TokenType, str] = {
    TokenType.LOGICAL_OPERATOR: "color: #d73a49; font-weight: bold;",
    TokenType.KEY: "color: #005cc5;",
    TokenType.VALUE: "color: #22863a;",
    TokenType.QUOTE: "color: #032f62;",
    TokenType.PARENTHESIS: "color: #6f42c1; font-weight: bold;",
    TokenType.EQUALS: "color: #e36209;",
    TokenType.TEXT: "color: #24292e;",
}

_PREVIEW_RULE = (
    f".{PREVIEW_CLASS} {{ white-space: pre-wrap; word-break: break-word; "
    "font-family: monospace; }"
)


def stylesheet(
    class_prefix: str = "token-",
    styles: dict[TokenType, str] | None = None,
) -> str:
    """Build CSS rules for every token type plus the preview container.

    Types missing from *styles* fall back to `DEFAULT_STYLES`.
    """
    merged = dict(DEFAULT_STYLES)
    if styles:
        merged.update(styles)

    rules = [_PREVIEW_RULE]
    for token_type in TokenType:
        rules.append(f".{class_prefix}{token_type.value} {{ {merged[token_type]} }}")
    return "\n".join(rules)
