"""queryhl lexer — hand-written single-pass tokenizer.

Design decisions:
- Total: any string produces a token list, nothing is ever rejected.
- Whitespace and unrecognized characters are never tokens; the renderer
  copies them through as filler.
- Rules are tried in a fixed priority order at each cursor position and the
  first one that matches wins.
- An unterminated quote runs to the end of the input.
- A backslash escapes a quote by looking back one character only, so a
  literal backslash right before a closing quote still escapes it.
- Key lookahead is greedy: everything up to the next ``=`` anywhere ahead
  becomes the key, including parentheses, quotes or operators in between.
  In ``(status = x) = y`` the second key is ``x)``, swallowing the closing
  parenthesis.
"""

from __future__ import annotations

import logging

from queryhl.lexer.tokens import (
    EQUALS_SIGN,
    ESCAPE_CHAR,
    LOGICAL_OPERATORS,
    PARENTHESES,
    QUOTE_CHARS,
    TEXT_DELIMITERS,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)


class Lexer:
    """Tokenizes a query string into a list of `Token` objects.

    Usage::

        tokens = Lexer('status = "on hold" AND NOT archived').tokenize()
    """

    def __init__(self, source: str) -> None:
        if not isinstance(source, str):
            raise TypeError(f"Lexer source must be str, got {type(source).__name__}")
        self.source = source
        self.pos = 0
        self.tokens: list[Token] = []
        self.next_equals: int | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source and return the token list."""
        self.tokens = []
        self.pos = 0
        self.next_equals = None

        while not self._at_end():
            self._scan_token()

        logger.debug("tokenized %d chars into %d tokens", len(self.source), len(self.tokens))
        return self.tokens

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Apply the first matching rule at the current position."""
        ch = self._peek()

        if ch.isspace():
            self.pos += 1
            return

        if ch in PARENTHESES:
            self._emit(TokenType.PARENTHESIS, self.pos, self.pos + 1)
            return

        if ch == EQUALS_SIGN:
            self._emit(TokenType.EQUALS, self.pos, self.pos + 1)
            return

        if ch in QUOTE_CHARS:
            self._scan_quote()
            return

        if self._scan_operator():
            return

        if self._scan_key():
            return

        self._scan_text()

    def _scan_quote(self) -> None:
        """Scan a quoted literal, closing quote included when present."""
        quote = self._peek()
        start = self.pos
        end = start + 1

        while end < len(self.source) and (
            self.source[end] != quote or self.source[end - 1] == ESCAPE_CHAR
        ):
            end += 1

        if end < len(self.source):
            self._emit(TokenType.QUOTE, start, end + 1)
        else:
            logger.debug("unterminated %r quote at %d", quote, start)
            self._emit(TokenType.QUOTE, start, len(self.source))

    def _scan_operator(self) -> bool:
        """Emit a logical operator if one stands here as a whole word."""
        for op in LOGICAL_OPERATORS:
            end = self.pos + len(op)
            if self.source[self.pos:end].upper() != op:
                continue
            if self._is_space_at(self.pos - 1, default=True) and self._is_space_at(end, default=True):
                self._emit(TokenType.LOGICAL_OPERATOR, self.pos, end)
                return True
        return False

    def _scan_key(self) -> bool:
        """Emit everything up to the next equals sign as a key."""
        equals_pos = self._find_equals()
        if equals_pos == -1:
            return False

        key_end = equals_pos
        while key_end > self.pos and self.source[key_end - 1].isspace():
            key_end -= 1

        if key_end == self.pos:
            return False
        self._emit(TokenType.KEY, self.pos, key_end)
        return True

    def _scan_text(self) -> None:
        """Scan a run of ordinary characters."""
        end = self.pos
        while end < len(self.source) and not self._is_text_delimiter(self.source[end]):
            end += 1

        if end > self.pos:
            self._emit(TokenType.TEXT, self.pos, end)
        else:
            # Leave the character as filler
            self.pos += 1

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character without consuming it."""
        return self.source[self.pos]

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _find_equals(self) -> int:
        """Position of the next equals sign at or after pos, -1 if none.

        Cached so each call to tokenize searches the source once.
        """
        if self.next_equals is None or 0 <= self.next_equals < self.pos:
            self.next_equals = self.source.find(EQUALS_SIGN, self.pos)
        return self.next_equals

    def _is_space_at(self, index: int, default: bool) -> bool:
        """Whitespace test at *index*; *default* outside the source."""
        if index < 0 or index >= len(self.source):
            return default
        return self.source[index].isspace()

    @staticmethod
    def _is_text_delimiter(ch: str) -> bool:
        return ch.isspace() or ch in TEXT_DELIMITERS

    def _emit(self, token_type: TokenType, start: int, end: int) -> None:
        """Append a token for source[start:end] and move past it."""
        self.tokens.append(Token(token_type, self.source[start:end], start, end))
        self.pos = end


def tokenize(text: str) -> list[Token]:
    """Tokenize *text* into an ordered list of tokens."""
    return Lexer(text).tokenize()
