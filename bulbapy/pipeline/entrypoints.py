"""Unified entrypoints that orchestrate parse/check/format with one parse lifecycle."""

from __future__ import annotations

import logging

from bulbapy.diagnostics import BulbaError, has_errors
from bulbapy.format import run_format as _run_format
from bulbapy.parser import ParserOptions, parse_result
from bulbapy.pipeline.result import BulbaParseResult
from bulbapy.pipeline.results import CheckRunResult, FormatRunResult

logger = logging.getLogger(__name__)


def run_check(text: str, options: ParserOptions | None = None) -> CheckRunResult:
    """Parse `text` and report the outcome as diagnostics instead of raising."""
    try:
        parsed = parse_result(text, options=options)
    except BulbaError as error:
        logger.debug("Check failed: %s", error)
        diagnostics = [error.to_diagnostic()]
        return CheckRunResult(parse=None, diagnostics=diagnostics, has_errors=has_errors(diagnostics))

    return CheckRunResult(parse=parsed, diagnostics=[], has_errors=False)


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    parse: BulbaParseResult | None = None,
) -> FormatRunResult:
    """Render `text` through the printer; document errors propagate."""
    return _run_format(text, options=options, parse=parse)
