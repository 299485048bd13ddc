#!/usr/bin/env python
"""Print the token stream of a .bson document."""

from __future__ import annotations

import argparse
from pathlib import Path

from bulbapy.lexer import dump_tokens, tokenize
from bulbapy.parser import read_source

DEFAULT_INPUT = Path(__file__).resolve().parent.parent / "tests" / "test_data" / "valid.bson"


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump lexer tokens for a .bson file")
    parser.add_argument("path", type=Path, nargs="?", default=DEFAULT_INPUT, help="Document to tokenize")
    args = parser.parse_args()

    tokens = tokenize(read_source(args.path))
    dump_tokens(tokens)
    print(f"\n{len(tokens)} tokens from {args.path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
