"""Context-stack parser over the lexer's token stream."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from bulbapy.diagnostics.errors import (
    HierarchyError,
    InsufficientDepthError,
    ParseSyntaxError,
    ParseTypeError,
    ReservedKeyError,
)
from bulbapy.document.model import (
    ArrayValue,
    BoolValue,
    Document,
    FloatValue,
    IntValue,
    NullValue,
    ObjectValue,
    StringValue,
    Value,
)
from bulbapy.document.scalar import parse_number
from bulbapy.lexer.tokens import BOOL_LITERALS, Token, TokenKind
from bulbapy.parser.options import ParserOptions

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParseContext:
    """One open mapping on the context stack; level 0 is the root."""

    target: ObjectValue
    level: int


class Parser:
    """Builds a document from tokens using a stack of open mappings.

    A section header of tier N truncates the stack to N entries and pushes a
    fresh child mapping. A key-value line shallower than the current level
    truncates the stack to `level + 1` entries. Insertions always go to the
    mapping on top of the stack. State is reset on every `parse` call, so one
    instance can be reused but must not be shared between threads.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options or ParserOptions()
        self._tokens: Sequence[Token] = ()
        self._position = 0
        self._stack: list[ParseContext] = []
        self._current_level = 0

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def current_level(self) -> int:
        return self._current_level

    @property
    def depth(self) -> int:
        return len(self._stack)

    def parse(self, tokens: Sequence[Token]) -> Document:
        root = ObjectValue()
        self._tokens = tokens
        self._position = 0
        self._stack = [ParseContext(target=root, level=0)]
        self._current_level = 0

        while not self._at_end():
            token = self._current()
            if token.kind == TokenKind.EOF:
                break
            self._bump()
            if token.kind == TokenKind.INDENT:
                self._parse_line(token)
            # HEADER and anything outside a line are skipped.

        return root

    # -------------------------
    # Lines
    # -------------------------

    def _parse_line(self, indent: Token) -> None:
        if self._at_end():
            return

        token = self._current()
        if token.kind == TokenKind.SECTION_OPEN:
            self._parse_section(indent, token)
        elif token.kind == TokenKind.IDENTIFIER:
            self._parse_key_value(indent, token)
        else:
            raise ParseSyntaxError(token.line, detail=f"unexpected {token.kind.name} at start of line")

    def _parse_section(self, indent: Token, open_token: Token) -> None:
        tier = open_token.level
        if indent.level != tier - 1:
            raise HierarchyError(
                open_token.line,
                detail=f"tier {tier} section at indent level {indent.level}",
            )
        if len(self._stack) < tier:
            raise InsufficientDepthError(
                open_token.line,
                detail=f"tier {tier} section needs {tier - 1} open parent sections, found {len(self._stack) - 1}",
            )

        self._bump()
        key_token = self._expect(TokenKind.IDENTIFIER)
        self._validate_key(key_token)
        close_token = self._expect(TokenKind.SECTION_CLOSE)
        if close_token.level != tier:
            raise ParseSyntaxError(close_token.line, detail="mismatched section delimiters")

        del self._stack[tier:]
        section = ObjectValue()
        self._stack[-1].target.assign(key_token.text, section)
        self._stack.append(ParseContext(target=section, level=tier))
        self._current_level = tier
        logger.debug("Opened tier %d section %r on line %d", tier, key_token.text, key_token.line)

    def _parse_key_value(self, indent: Token, key_token: Token) -> None:
        level = indent.level
        if level != self._current_level:
            if level > self._current_level:
                raise HierarchyError(
                    key_token.line,
                    detail=f"key at indent level {level} inside level {self._current_level}",
                )
            del self._stack[level + 1 :]
            self._current_level = level

        self._bump()
        self._validate_key(key_token)
        self._expect(TokenKind.ASSIGN)
        value = self._parse_value()
        self._stack[-1].target.assign(key_token.text, value)

    def _validate_key(self, key_token: Token) -> None:
        if self._options.is_reserved(key_token.text):
            raise ReservedKeyError(key_token.line, detail=f"`{key_token.text}` is reserved")

    # -------------------------
    # Values
    # -------------------------

    def _parse_value(self) -> Value:
        if self._at_end():
            raise ParseSyntaxError(self._last_line(), detail="expected a value")

        token = self._current()
        match token.kind:
            case TokenKind.STRING:
                self._bump()
                return StringValue(token.text)
            case TokenKind.BOOL:
                flag = BOOL_LITERALS.get(token.text)
                if flag is None:
                    raise ParseTypeError(token.line, detail=f"`{token.text}` is not a boolean literal")
                self._bump()
                return BoolValue(flag)
            case TokenKind.NULL:
                self._bump()
                return NullValue()
            case TokenKind.NUMBER:
                number = parse_number(token.text)
                if number is None:
                    raise ParseTypeError(token.line, detail=f"`{token.text}` is not a number")
                self._bump()
                if isinstance(number, int):
                    return IntValue(number)
                return FloatValue(number)
            case TokenKind.ARRAY_START:
                return self._parse_array(token)
            case _:
                raise ParseTypeError(token.line, detail=f"{token.kind.name} in value position")

    def _parse_array(self, start: Token) -> ArrayValue:
        self._bump()
        items: list[Value] = []
        while not self._at_end():
            token = self._current()
            if token.kind == TokenKind.ARRAY_END:
                self._bump()
                return ArrayValue(tuple(items))
            if token.kind == TokenKind.COMMA:
                self._bump()
                continue
            if token.kind == TokenKind.EOF:
                break
            items.append(self._parse_value())

        raise ParseSyntaxError(start.line, detail="unterminated array")

    # -------------------------
    # Cursor
    # -------------------------

    def _at_end(self) -> bool:
        return self._position >= len(self._tokens)

    def _current(self) -> Token:
        return self._tokens[self._position]

    def _bump(self) -> None:
        self._position += 1

    def _expect(self, kind: TokenKind) -> Token:
        if self._at_end():
            raise ParseSyntaxError(self._last_line(), detail=f"expected {kind.name}")
        token = self._current()
        if token.kind != kind:
            raise ParseSyntaxError(token.line, detail=f"expected {kind.name}, found {token.kind.name}")
        self._bump()
        return token

    def _last_line(self) -> int | None:
        if not self._tokens:
            return None
        return self._tokens[-1].line


def parse_tokens(tokens: Sequence[Token], options: ParserOptions | None = None) -> Document:
    """Interpret a token sequence produced by the lexer."""
    return Parser(options).parse(tokens)
