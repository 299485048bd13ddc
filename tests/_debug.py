"""Shared debug printers for lexer/parser/format tests."""

from __future__ import annotations

import os

from bulbapy.diagnostics import Diagnostic, format_diagnostic
from bulbapy.document import Document
from bulbapy.format import render_document
from bulbapy.lexer import Token

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DOCUMENT = os.getenv("PRINT_DOCUMENT", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        print(f"{index:03d} {tok.kind.name:<14} line={tok.line:<4} level={tok.level} text={tok.text!r}")


def debug_dump_document(test_name: str, document: Document) -> None:
    if not PRINT_DOCUMENT:
        return
    print(f"\n===== {test_name} DOCUMENT =====")
    print(render_document(document), end="")


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic]) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(format_diagnostic(diagnostic))
