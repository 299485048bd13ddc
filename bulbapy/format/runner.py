"""Format runner over a shared Bulba parse result."""

from __future__ import annotations

from bulbapy.parser import ParserOptions, parse_result
from bulbapy.pipeline.result import BulbaParseResult
from bulbapy.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    parse: BulbaParseResult | None = None,
) -> FormatRunResult:
    """Render the document from a single parse lifecycle."""
    resolved_parse = _resolve_parse(text, options=options, parse=parse)
    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=resolved_parse.rendered(),
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    parse: BulbaParseResult | None,
) -> BulbaParseResult:
    if parse is not None:
        if options is not None:
            raise ValueError("Pass either parse or options, not both")
        if parse.source_text != text:
            raise ValueError("Provided parse result was built from different source text")
        return parse
    return parse_result(text, options=options)
