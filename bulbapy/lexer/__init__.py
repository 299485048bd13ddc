"""Lexer."""

from bulbapy.lexer.lexer import Lexer, dump_tokens, tokenize
from bulbapy.lexer.tokens import (
    BOOL_LITERALS,
    HEADER_LITERAL,
    SECTION_DELIMITERS,
    Token,
    TokenKind,
)

__all__ = [
    "BOOL_LITERALS",
    "HEADER_LITERAL",
    "SECTION_DELIMITERS",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "tokenize",
]
