"""HTML escaping for text written into highlight markup."""

from __future__ import annotations

# Ampersand must come first so later entities are not escaped twice
_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: str) -> str:
    """Escape the five markup-significant characters in *text*."""
    for raw, entity in _REPLACEMENTS:
        text = text.replace(raw, entity)
    return text
