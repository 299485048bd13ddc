"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from bulbapy.diagnostics import Diagnostic
from bulbapy.pipeline.result import BulbaParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Rendered text from a shared parse result."""

    parse: BulbaParseResult
    formatted_text: str


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Outcome of validating a document without raising.

    `parse` is None when the document failed to lex or parse.
    """

    parse: BulbaParseResult | None
    diagnostics: list[Diagnostic]
    has_errors: bool
