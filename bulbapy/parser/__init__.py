"""Parser (context stack over the lexer's token stream)."""

from bulbapy.parser.bulba import parse, parse_file, parse_result, read_source
from bulbapy.parser.options import DEFAULT_RESERVED_KEYS, ParserOptions
from bulbapy.parser.parser import ParseContext, Parser, parse_tokens

__all__ = [
    "DEFAULT_RESERVED_KEYS",
    "ParseContext",
    "Parser",
    "ParserOptions",
    "parse",
    "parse_file",
    "parse_result",
    "parse_tokens",
    "read_source",
]
