#!/usr/bin/env python
"""Sample-document harness.

Parses the built-in valid document, then checks that every built-in broken
document fails with an error message containing the expected text. With a
path argument, parses that file instead and prints the rendered document.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
from pathlib import Path
import sys

from bulbapy import BulbaError, parse, parse_file, print_document

VALID_SAMPLE = """BULBA!
zZz Basic Configuration
app_name ~~~~~~> "Pokedex_API"
version  ~~~~~~> 1.5
is_production ~> NotVeryEffective
missing_data ~> MissingNo

zZz Database Connection (Level 1)
(o) database (o)
    host ~~~~> "127.0.0.1"

    zZz Connection Pool Settings (Level 2)
    (O) pool (O)
        max_connections ~~~~> 100

        zZz Critical Kernel flags (Level 3)
        (@) KERNEL_FLAGS (@)
            panic_on_fail ~~~~> SuperEffective

zZz Allowed Users List
whitelist ~~~~> <| "Prof_Oak", "Mom" |>
"""


@dataclass(frozen=True, slots=True)
class ErrorSample:
    name: str
    source: str
    expected: str


ERROR_SAMPLES: tuple[ErrorSample, ...] = (
    ErrorSample("Invalid Header", 'NOT_BULBA!\nkey ~> "val"', "Status: Fainted"),
    ErrorSample("Tab Character", 'BULBA!\n\tkey ~> "val"', "Poison Type"),
    ErrorSample("Bad Indentation", 'BULBA!\n key ~> "val"', "The attack missed!"),
    ErrorSample("Charizard Key", 'BULBA!\nCharizard ~> "Fire"', "It burns the bulb"),
    ErrorSample(
        "Deep Nesting Violation",
        'BULBA!\n(o) level1 (o)\n        (@) level3 (@)\n            key ~> "val"',
        "Not enough badges!",
    ),
    ErrorSample("Invalid Type", "BULBA!\nkey ~> UnknownType", "Target is immune!"),
)


def _check_valid() -> bool:
    try:
        parse(VALID_SAMPLE)
    except BulbaError as error:
        print(f"Test Valid: FAIL - {error}")
        return False
    print("Test Valid: PASS")
    return True


def _check_error(sample: ErrorSample) -> bool:
    try:
        parse(sample.source)
    except BulbaError as error:
        if sample.expected in str(error):
            print(f"Test {sample.name}: PASS")
            return True
        print(f"Test {sample.name}: FAIL - Expected error {sample.expected} but got {error}")
        return False
    print(f"Test {sample.name}: FAIL - Expected error {sample.expected} but got none")
    return False


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the built-in sample documents or parse one file")
    parser.add_argument("path", type=Path, nargs="?", help="Parse and print this document instead")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.path is not None:
        try:
            document = parse_file(args.path)
        except BulbaError as error:
            print(f"{args.path}: {error}", file=sys.stderr)
            return 1
        print_document(document)
        return 0

    results = [_check_valid(), *(_check_error(sample) for sample in ERROR_SAMPLES)]
    return 0 if all(results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
