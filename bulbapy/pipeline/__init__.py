"""Shared parse carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bulbapy.pipeline.result import BulbaParseResult
from bulbapy.pipeline.results import CheckRunResult, FormatRunResult

if TYPE_CHECKING:
    from bulbapy.parser import ParserOptions


def run_check(text: str, options: ParserOptions | None = None) -> CheckRunResult:
    from bulbapy.pipeline.entrypoints import run_check as _run_check

    return _run_check(text, options=options)


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    parse: BulbaParseResult | None = None,
) -> FormatRunResult:
    from bulbapy.pipeline.entrypoints import run_format as _run_format

    return _run_format(text, options=options, parse=parse)


__all__ = [
    "BulbaParseResult",
    "CheckRunResult",
    "FormatRunResult",
    "run_check",
    "run_format",
]
