"""High-level parse entrypoints for Bulba source text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from bulbapy.document import Document
from bulbapy.lexer import Lexer
from bulbapy.parser.options import ParserOptions
from bulbapy.parser.parser import Parser

if TYPE_CHECKING:
    from bulbapy.pipeline import BulbaParseResult

logger = logging.getLogger(__name__)


def parse(text: str, options: ParserOptions | None = None) -> Document:
    """Lex and parse `text`, raising a `BulbaError` on the first problem."""
    return parse_result(text, options=options).document


def parse_result(text: str, options: ParserOptions | None = None) -> BulbaParseResult:
    from bulbapy.pipeline import BulbaParseResult

    resolved_options = options or ParserOptions()
    tokens = Lexer(text).lex()
    document = Parser(resolved_options).parse(tokens)
    logger.debug("Parsed %d tokens into %d top-level keys", len(tokens), len(document))
    return BulbaParseResult(
        source_text=text,
        tokens=tuple(tokens),
        document=document,
        options=resolved_options,
    )


def read_source(path: str | Path) -> str:
    """Read a document from disk as UTF-8, dropping a leading BOM."""
    decoded = Path(path).read_bytes().decode("utf-8")
    return decoded.removeprefix("\ufeff")


def parse_file(path: str | Path, options: ParserOptions | None = None) -> Document:
    return parse(read_source(path), options=options)
