"""Parser for Bulba Script Object Notation (`.bson`) documents."""

from bulbapy.diagnostics import (
    BulbaError,
    HeaderError,
    HierarchyError,
    InsufficientDepthError,
    LexError,
    LexErrorKind,
    ParseError,
    ParseSyntaxError,
    ParseTypeError,
    ReservedKeyError,
)
from bulbapy.document import Document, ObjectValue, Value, to_python
from bulbapy.format import print_document, render_document
from bulbapy.lexer import Token, TokenKind, tokenize
from bulbapy.parser import ParserOptions, parse, parse_file, parse_tokens

__all__ = [
    "BulbaError",
    "Document",
    "HeaderError",
    "HierarchyError",
    "InsufficientDepthError",
    "LexError",
    "LexErrorKind",
    "ObjectValue",
    "ParseError",
    "ParseSyntaxError",
    "ParseTypeError",
    "ParserOptions",
    "ReservedKeyError",
    "Token",
    "TokenKind",
    "Value",
    "parse",
    "parse_file",
    "parse_tokens",
    "print_document",
    "render_document",
    "to_python",
    "tokenize",
]
