"""Lexer."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re

from bulbapy.diagnostics.errors import HeaderError, LexError, LexErrorKind
from bulbapy.document.scalar import is_number_literal
from bulbapy.lexer.tokens import (
    ARRAY_CLOSE,
    ARRAY_OPEN,
    ARRAY_SEPARATOR,
    BOOL_LITERALS,
    COMMENT_MARKER,
    HEADER_LITERAL,
    INDENT_WIDTH,
    NULL_LITERAL,
    SECTION_DELIMITERS,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

_KEY_VALUE_RE = re.compile(r"([A-Za-z0-9_]+)\s*(~+>)\s*(.*)")


@dataclass(frozen=True, slots=True)
class _LineInfo:
    number: int
    text: str


class Lexer:
    """Line-oriented lexer.

    Every structural line becomes an INDENT token followed by either a section
    header triple or `IDENTIFIER ASSIGN <value tokens>`. The first malformed
    line raises; no partial token list is ever returned.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    def lex(self) -> list[Token]:
        self._tokens = []
        lines = _split_lines(self._source)

        if not lines or lines[0].text != HEADER_LITERAL:
            raise HeaderError(line=1)
        self._emit(TokenKind.HEADER, HEADER_LITERAL, line=1)

        for line in lines[1:]:
            self._lex_line(line)

        self._emit(TokenKind.EOF, line=lines[-1].number)
        logger.debug("Lexed %d tokens from %d lines", len(self._tokens), len(lines))
        return self._tokens

    def _lex_line(self, line: _LineInfo) -> None:
        text = line.text
        comment_start = text.find(COMMENT_MARKER)
        if comment_start != -1:
            text = text[:comment_start]
        text = text.rstrip()
        if not text:
            return

        indent = _measure_indent(text, line.number)
        self._emit(TokenKind.INDENT, line=line.number, level=indent // INDENT_WIDTH)
        self._lex_statement(text[indent:], line.number)

    def _lex_statement(self, text: str, line: int) -> None:
        if self._lex_section_header(text, line):
            return

        match = _KEY_VALUE_RE.fullmatch(text)
        if match is None:
            raise LexError(LexErrorKind.SYNTAX, line)

        key, _arrow, value_text = match.groups()
        self._emit(TokenKind.IDENTIFIER, key, line=line)
        self._emit(TokenKind.ASSIGN, line=line)
        self._lex_value(value_text, line)

    def _lex_section_header(self, text: str, line: int) -> bool:
        for delimiter, tier in SECTION_DELIMITERS:
            opening = f"{delimiter} "
            closing = f" {delimiter}"
            # Opening and closing delimiters must not share characters.
            if len(text) < len(opening) + len(closing):
                continue
            if not (text.startswith(opening) and text.endswith(closing)):
                continue

            key = text[len(opening) : -len(closing)]
            self._emit(TokenKind.SECTION_OPEN, line=line, level=tier)
            self._emit(TokenKind.IDENTIFIER, key, line=line)
            self._emit(TokenKind.SECTION_CLOSE, line=line, level=tier)
            return True
        return False

    def _lex_value(self, text: str, line: int) -> None:
        value = text.strip()

        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            self._emit(TokenKind.STRING, value[1:-1], line=line)
            return

        if value in BOOL_LITERALS:
            self._emit(TokenKind.BOOL, value, line=line)
            return

        if value == NULL_LITERAL:
            self._emit(TokenKind.NULL, line=line)
            return

        if (
            len(value) >= len(ARRAY_OPEN) + len(ARRAY_CLOSE)
            and value.startswith(ARRAY_OPEN)
            and value.endswith(ARRAY_CLOSE)
        ):
            self._lex_array(value[len(ARRAY_OPEN) : -len(ARRAY_CLOSE)], line)
            return

        if is_number_literal(value):
            self._emit(TokenKind.NUMBER, value, line=line)
            return

        detail = f"unrecognized value `{value}`" if value else "missing value"
        raise LexError(LexErrorKind.TYPE, line, detail=detail)

    def _lex_array(self, inner: str, line: int) -> None:
        self._emit(TokenKind.ARRAY_START, line=line)
        inner = inner.strip()
        if inner:
            for index, element in enumerate(_split_array_elements(inner)):
                if index > 0:
                    self._emit(TokenKind.COMMA, line=line)
                self._lex_value(element, line)
        self._emit(TokenKind.ARRAY_END, line=line)

    def _emit(self, kind: TokenKind, text: str = "", *, line: int, level: int = 0) -> None:
        self._tokens.append(Token(kind=kind, text=text, line=line, level=level))


def tokenize(source: str) -> list[Token]:
    """Lex `source` into a flat token list ending with EOF."""
    return Lexer(source).lex()


def _split_lines(source: str) -> list[_LineInfo]:
    raw_lines = source.split("\n")
    if source.endswith("\n"):
        raw_lines.pop()
    return [
        _LineInfo(number=number, text=raw.removesuffix("\r"))
        for number, raw in enumerate(raw_lines, start=1)
    ]


def _measure_indent(text: str, line: int) -> int:
    count = 0
    for ch in text:
        if ch == " ":
            count += 1
            continue
        if ch == "\t":
            raise LexError(LexErrorKind.TAB, line)
        break

    if count % INDENT_WIDTH != 0:
        raise LexError(LexErrorKind.BAD_INDENT, line, detail=f"{count} leading spaces")
    return count


def _split_array_elements(inner: str) -> list[str]:
    """Split on commas outside nested arrays.

    Quotes are not tracked: a comma inside a quoted string still splits.
    """
    elements: list[str] = []
    depth = 0
    start = 0
    index = 0
    while index < len(inner):
        if inner.startswith(ARRAY_OPEN, index):
            depth += 1
            index += len(ARRAY_OPEN)
            continue
        if depth > 0 and inner.startswith(ARRAY_CLOSE, index):
            depth -= 1
            index += len(ARRAY_CLOSE)
            continue
        if depth == 0 and inner.startswith(ARRAY_SEPARATOR, index):
            elements.append(inner[start:index])
            start = index + len(ARRAY_SEPARATOR)
        index += 1
    elements.append(inner[start:])
    return elements


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, line, level and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<14} line={tok.line:<4} level={tok.level} text={tok.text!r}")
