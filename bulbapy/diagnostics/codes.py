"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_INVALID_HEADER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_HEADER",
    message="Status: Fainted",
    hint="The first line must be exactly `BULBA!`.",
    severity="error",
    category="lexer",
)

LEXER_TAB_INDENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_TAB_INDENT",
    message="Poison Type: Tab character detected",
    hint="Indent with spaces only.",
    severity="error",
    category="lexer",
)

LEXER_BAD_INDENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_BAD_INDENT",
    message="The attack missed!",
    hint="Indentation must be a multiple of 4 spaces.",
    severity="error",
    category="lexer",
)

LEXER_INVALID_LINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_LINE",
    message="It hurt itself in its confusion!",
    hint="Expected a section header like `(o) key (o)` or an assignment like `key ~~> value`.",
    severity="error",
    category="lexer",
)

LEXER_INVALID_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_VALUE",
    message="Target is immune!",
    hint='Use a quoted string, a number, a literal like `SuperEffective`/`MissingNo` or an array `<| ... |>`.',
    severity="error",
    category="lexer",
)

PARSER_INVALID_HIERARCHY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_HIERARCHY",
    message="The attack missed!",
    hint="Open `(o)` at indent 0, `(O)` at indent 4 and `(@)` at indent 8; keys cannot indent past their section.",
    severity="error",
    category="parser",
)

PARSER_INSUFFICIENT_DEPTH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INSUFFICIENT_DEPTH",
    message="Not enough badges!",
    hint="Open every parent section before a nested one.",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="It hurt itself in its confusion!",
    severity="error",
    category="parser",
)

PARSER_INVALID_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_VALUE",
    message="Target is immune!",
    severity="error",
    category="parser",
)

PARSER_RESERVED_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_RESERVED_KEY",
    message="It burns the bulb",
    hint="Rename the key; it is on the reserved list.",
    severity="error",
    category="parser",
)
