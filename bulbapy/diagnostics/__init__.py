"""Diagnostics."""

from bulbapy.diagnostics.codes import (
    LEXER_BAD_INDENT,
    LEXER_INVALID_HEADER,
    LEXER_INVALID_LINE,
    LEXER_INVALID_VALUE,
    LEXER_TAB_INDENT,
    PARSER_INSUFFICIENT_DEPTH,
    PARSER_INVALID_HIERARCHY,
    PARSER_INVALID_VALUE,
    PARSER_RESERVED_KEY,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from bulbapy.diagnostics.diagnostic import Diagnostic, Severity
from bulbapy.diagnostics.errors import (
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
from bulbapy.diagnostics.report import format_diagnostic, has_errors

__all__ = [
    "LEXER_BAD_INDENT",
    "LEXER_INVALID_HEADER",
    "LEXER_INVALID_LINE",
    "LEXER_INVALID_VALUE",
    "LEXER_TAB_INDENT",
    "PARSER_INSUFFICIENT_DEPTH",
    "PARSER_INVALID_HIERARCHY",
    "PARSER_INVALID_VALUE",
    "PARSER_RESERVED_KEY",
    "PARSER_UNEXPECTED_TOKEN",
    "BulbaError",
    "Diagnostic",
    "DiagnosticSpec",
    "HeaderError",
    "HierarchyError",
    "InsufficientDepthError",
    "LexError",
    "LexErrorKind",
    "ParseError",
    "ParseSyntaxError",
    "ParseTypeError",
    "ReservedKeyError",
    "Severity",
    "format_diagnostic",
    "has_errors",
]
