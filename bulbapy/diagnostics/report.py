"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from bulbapy.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """One-line rendering used by scripts and debug output."""
    location = f"line {diagnostic.line}" if diagnostic.line is not None else "input"
    text = f"{diagnostic.severity.upper()} {diagnostic.code} {location}: {diagnostic.message}"
    if diagnostic.hint:
        text += f" (hint: {diagnostic.hint})"
    return text
