"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    HEADER = 1  # BULBA!
    EOF = 2

    # -------------------------
    # Structure
    # -------------------------
    INDENT = 10  # level = leading spaces / 4
    SECTION_OPEN = 11  # (o) (O) (@), level = tier
    SECTION_CLOSE = 12

    # -------------------------
    # Keys / operators
    # -------------------------
    IDENTIFIER = 20
    ASSIGN = 21  # ~~~>

    # -------------------------
    # Scalars
    # -------------------------
    STRING = 30
    NUMBER = 31  # raw text, int/float decided by the parser
    BOOL = 32
    NULL = 33

    # -------------------------
    # Arrays
    # -------------------------
    ARRAY_START = 40  # <|
    ARRAY_END = 41  # |>
    COMMA = 42

    @property
    def is_scalar(self) -> bool:
        return self in (
            TokenKind.STRING,
            TokenKind.NUMBER,
            TokenKind.BOOL,
            TokenKind.NULL,
        )


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `level` only matters for INDENT and SECTION_OPEN/SECTION_CLOSE; `text` is
    empty for punctuation.
    """

    kind: TokenKind
    text: str = ""
    line: int = 0
    level: int = 0


HEADER_LITERAL: Final[str] = "BULBA!"
COMMENT_MARKER: Final[str] = "zZz"
INDENT_WIDTH: Final[int] = 4

ARRAY_OPEN: Final[str] = "<|"
ARRAY_CLOSE: Final[str] = "|>"
ARRAY_SEPARATOR: Final[str] = ","

TRUE_LITERAL: Final[str] = "SuperEffective"
FALSE_LITERAL: Final[str] = "NotVeryEffective"
NULL_LITERAL: Final[str] = "MissingNo"

BOOL_LITERALS: Final[dict[str, bool]] = {
    TRUE_LITERAL: True,
    FALSE_LITERAL: False,
}

# Delimiter -> tier, checked in order.
SECTION_DELIMITERS: Final[tuple[tuple[str, int], ...]] = (
    ("(o)", 1),
    ("(O)", 2),
    ("(@)", 3),
)
