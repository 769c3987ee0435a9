"""Token types and Token dataclass for the queryhl lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Every distinct token class the lexer knows about.

    The value of each member is the name the renderer writes into markup,
    so a stylesheet can target ``token-<value>``.
    """

    LOGICAL_OPERATOR = "logical-operator"   # AND, OR, NOT
    KEY = "key"                             # text before an equals sign
    VALUE = "value"                         # reserved, never produced
    QUOTE = "quote"                         # quoted literal, quotes included
    PARENTHESIS = "parenthesis"
    EQUALS = "equals"
    TEXT = "text"


# Tried in this order at every candidate position
LOGICAL_OPERATORS: tuple[str, ...] = ("AND", "OR", "NOT")

# ASCII double, ASCII single, right double quotation mark
QUOTE_CHARS: tuple[str, ...] = ('"', "'", "”")

PARENTHESES: tuple[str, ...] = ("(", ")")
EQUALS_SIGN = "="
ESCAPE_CHAR = "\\"

# Characters that end a bare text run
TEXT_DELIMITERS = frozenset(PARENTHESES + QUOTE_CHARS + (EQUALS_SIGN,))


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of the input.

    ``content`` is exactly ``source[start:end]``; offsets are half-open
    character indices into the text that was tokenized.
    """

    type: TokenType
    content: str
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.content!r}, {self.start}:{self.end})"
