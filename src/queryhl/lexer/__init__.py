"""queryhl lexer — single-pass tokenizer for the query mini-language."""

from queryhl.lexer.tokens import Token, TokenType
from queryhl.lexer.lexer import Lexer, tokenize

__all__ = ["Token", "TokenType", "Lexer", "tokenize"]
