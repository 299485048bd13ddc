"""Exceptions raised by the lexer and parser.

Every failure is fatal: the first error aborts the whole parse and no
partial document is returned. Each exception wraps the `DiagnosticSpec`
describing it plus the source line it originated from, so callers can
either match on the exception type or convert it into a `Diagnostic`.
"""

from __future__ import annotations

from enum import StrEnum

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
from bulbapy.diagnostics.diagnostic import Diagnostic


class BulbaError(Exception):
    """Base class for every document error."""

    def __init__(self, spec: DiagnosticSpec, line: int | None = None, detail: str | None = None) -> None:
        self.spec = spec
        self.line = line
        self.detail = detail
        super().__init__(self._format_message())

    @property
    def code(self) -> str:
        return self.spec.code

    @property
    def message(self) -> str:
        return self.spec.message

    def _format_message(self) -> str:
        text = self.spec.message
        if self.detail:
            text = f"{text} ({self.detail})"
        if self.line is not None:
            return f"Line {self.line}: {text}"
        return text

    def to_diagnostic(self) -> Diagnostic:
        message = self.spec.message if not self.detail else f"{self.spec.message} ({self.detail})"
        return Diagnostic(
            code=self.spec.code,
            message=message,
            line=self.line,
            severity=self.spec.severity,
            hint=self.spec.hint,
            category=self.spec.category,
        )


class HeaderError(BulbaError):
    """First line is not the magic header."""

    def __init__(self, line: int = 1, detail: str | None = None) -> None:
        super().__init__(LEXER_INVALID_HEADER, line, detail)


class LexErrorKind(StrEnum):
    TAB = "tab"
    BAD_INDENT = "bad_indent"
    SYNTAX = "syntax"
    TYPE = "type"


_LEX_ERROR_SPECS: dict[LexErrorKind, DiagnosticSpec] = {
    LexErrorKind.TAB: LEXER_TAB_INDENT,
    LexErrorKind.BAD_INDENT: LEXER_BAD_INDENT,
    LexErrorKind.SYNTAX: LEXER_INVALID_LINE,
    LexErrorKind.TYPE: LEXER_INVALID_VALUE,
}


class LexError(BulbaError):
    """Line-level failure raised while tokenizing."""

    def __init__(self, kind: LexErrorKind, line: int, detail: str | None = None) -> None:
        self.kind = kind
        super().__init__(_LEX_ERROR_SPECS[kind], line, detail)


class ParseError(BulbaError):
    """Base class for failures raised while interpreting tokens."""

    spec_for_class: DiagnosticSpec = PARSER_UNEXPECTED_TOKEN

    def __init__(self, line: int | None = None, detail: str | None = None) -> None:
        super().__init__(self.spec_for_class, line, detail)


class HierarchyError(ParseError):
    """Section opened at the wrong tier, or a key indented past its section."""

    spec_for_class = PARSER_INVALID_HIERARCHY


class InsufficientDepthError(ParseError):
    """Tier-N section opened without its N-1 ancestors."""

    spec_for_class = PARSER_INSUFFICIENT_DEPTH


class ParseSyntaxError(ParseError):
    spec_for_class = PARSER_UNEXPECTED_TOKEN


class ParseTypeError(ParseError):
    spec_for_class = PARSER_INVALID_VALUE


class ReservedKeyError(ParseError):
    spec_for_class = PARSER_RESERVED_KEY


__all__ = [
    "BulbaError",
    "HeaderError",
    "HierarchyError",
    "InsufficientDepthError",
    "LexError",
    "LexErrorKind",
    "ParseError",
    "ParseSyntaxError",
    "ParseTypeError",
    "ReservedKeyError",
]
