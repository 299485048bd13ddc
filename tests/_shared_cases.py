"""Centralized Bulba source cases used across lexer/parser/format tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap

from bulbapy.diagnostics import (
    BulbaError,
    HeaderError,
    HierarchyError,
    InsufficientDepthError,
    LexError,
    ReservedKeyError,
)
from bulbapy.document import PythonValue


@dataclass(frozen=True, slots=True)
class BulbaCase:
    name: str
    source: str
    expected: dict[str, PythonValue]


@dataclass(frozen=True, slots=True)
class BulbaErrorCase:
    name: str
    source: str
    error: type[BulbaError]
    message: str
    line: int


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


REFERENCE_SOURCE = _dedent(
    """
    BULBA!
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
)

REFERENCE_EXPECTED: dict[str, PythonValue] = {
    "app_name": "Pokedex_API",
    "version": 1.5,
    "is_production": False,
    "missing_data": None,
    "database": {
        "host": "127.0.0.1",
        "pool": {
            "max_connections": 100,
            "KERNEL_FLAGS": {
                "panic_on_fail": True,
            },
        },
    },
    "whitelist": ["Prof_Oak", "Mom"],
}


VALID_CASES: tuple[BulbaCase, ...] = (
    BulbaCase(
        name="end_to_end_minimal",
        source='BULBA!\napp_name ~~~~~~> "X"\nversion ~~~> 1.5\n',
        expected={"app_name": "X", "version": 1.5},
    ),
    BulbaCase(name="reference_configuration", source=REFERENCE_SOURCE, expected=REFERENCE_EXPECTED),
    BulbaCase(name="header_only", source="BULBA!\n", expected={}),
    BulbaCase(name="header_without_trailing_newline", source="BULBA!", expected={}),
    BulbaCase(
        name="comments_and_blank_lines",
        source=_dedent(
            """
            BULBA!
            zZz leading comment

                zZz indented comment only
            name ~> "Bulby" zZz trailing comment
            """
        ),
        expected={"name": "Bulby"},
    ),
    BulbaCase(
        name="crlf_line_endings",
        source='BULBA!\r\nname ~> "Bulby"\r\nlevel ~> 5\r\n',
        expected={"name": "Bulby", "level": 5},
    ),
    BulbaCase(
        name="scalar_typing",
        source=_dedent(
            """
            BULBA!
            ratio ~> 1.5
            count ~> 100
            negative ~> -7
            signed ~> +3
            exponent ~> 2e3
            leading_dot ~> .5
            yes ~> SuperEffective
            no ~> NotVeryEffective
            nothing ~> MissingNo
            text ~> "x"
            empty_text ~> ""
            """
        ),
        expected={
            "ratio": 1.5,
            "count": 100,
            "negative": -7,
            "signed": 3,
            "exponent": 2000.0,
            "leading_dot": 0.5,
            "yes": True,
            "no": False,
            "nothing": None,
            "text": "x",
            "empty_text": "",
        },
    ),
    BulbaCase(
        name="arrays",
        source=_dedent(
            """
            BULBA!
            nested ~> <| "a", 1, <| 2, 3 |> |>
            empty ~> <| |>
            tight ~> <||>
            deep ~> <| <| <| MissingNo |> |> |>
            mixed ~> <| SuperEffective, 2.5, "two words" |>
            """
        ),
        expected={
            "nested": ["a", 1, [2, 3]],
            "empty": [],
            "tight": [],
            "deep": [[[None]]],
            "mixed": [True, 2.5, "two words"],
        },
    ),
    BulbaCase(
        name="integer_beyond_int64",
        source="BULBA!\nbig ~> 99999999999999999999\nwide ~> " + "1" * 300 + "\n",
        expected={"big": 1e20, "wide": float("1" * 300)},
    ),
    BulbaCase(
        name="last_write_wins",
        source="BULBA!\na ~> 1\nb ~> 2\na ~> 3\n",
        expected={"a": 3, "b": 2},
    ),
    BulbaCase(
        name="section_replaces_earlier_value",
        source="BULBA!\na ~> 1\n(o) a (o)\n    b ~> 2\n",
        expected={"a": {"b": 2}},
    ),
    BulbaCase(
        name="reopened_section_starts_empty",
        source="BULBA!\n(o) a (o)\n    x ~> 1\n(o) a (o)\n    y ~> 2\n",
        expected={"a": {"y": 2}},
    ),
    BulbaCase(
        name="dedent_back_to_tier_one",
        source=_dedent(
            """
            BULBA!
            (o) database (o)
                (O) pool (O)
                    size ~> 5
                host ~> "h"
            top ~> 1
            """
        ),
        expected={"database": {"host": "h", "pool": {"size": 5}}, "top": 1},
    ),
    BulbaCase(
        name="dedent_to_root_from_tier_three",
        source=_dedent(
            """
            BULBA!
            (o) a (o)
                (O) b (O)
                    (@) c (@)
                        deep ~> 3
            shallow ~> 0
            """
        ),
        expected={"a": {"b": {"c": {"deep": 3}}}, "shallow": 0},
    ),
    BulbaCase(
        name="sibling_sections",
        source=_dedent(
            """
            BULBA!
            (o) servers (o)
                (O) alpha (O)
                    ip ~> "10.0.0.1"
                (O) beta (O)
                    ip ~> "10.0.0.2"
            (o) clients (o)
                count ~> 2
            """
        ),
        expected={
            "servers": {"alpha": {"ip": "10.0.0.1"}, "beta": {"ip": "10.0.0.2"}},
            "clients": {"count": 2},
        },
    ),
    BulbaCase(
        name="empty_section_and_spaced_key",
        source="BULBA!\n(o) empty (o)\n(o) my section (o)\n    x ~> 1\n",
        expected={"empty": {}, "my section": {"x": 1}},
    ),
    BulbaCase(
        name="arrow_lengths",
        source="BULBA!\nshort ~> 1\nlong ~~~~~~~~~~> 2\ntight~>3\n",
        expected={"short": 1, "long": 2, "tight": 3},
    ),
)


ERROR_CASES: tuple[BulbaErrorCase, ...] = (
    BulbaErrorCase("invalid_header", 'NOT_BULBA!\nkey ~> "value"', HeaderError, "Status: Fainted", 1),
    BulbaErrorCase("empty_input", "", HeaderError, "Status: Fainted", 1),
    BulbaErrorCase("header_with_trailing_space", "BULBA! \n", HeaderError, "Status: Fainted", 1),
    BulbaErrorCase("header_not_on_first_line", "\nBULBA!\n", HeaderError, "Status: Fainted", 1),
    BulbaErrorCase("tab_character", 'BULBA!\n\tkey ~> "value"', LexError, "Poison Type", 2),
    BulbaErrorCase("tab_after_spaces", "BULBA!\n    \tkey ~> 1", LexError, "Poison Type", 2),
    BulbaErrorCase("bad_indentation", 'BULBA!\n key ~> "value"', LexError, "The attack missed!", 2),
    BulbaErrorCase("invalid_line", "BULBA!\nthis is not valid", LexError, "It hurt itself in its confusion!", 2),
    BulbaErrorCase("equals_operator", "BULBA!\nkey = 1", LexError, "It hurt itself in its confusion!", 2),
    BulbaErrorCase("invalid_type", "BULBA!\nkey ~> UnknownType", LexError, "Target is immune!", 2),
    BulbaErrorCase("missing_value", "BULBA!\nkey ~>", LexError, "Target is immune!", 2),
    BulbaErrorCase("double_overflow", "BULBA!\nkey ~> 1e400", LexError, "Target is immune!", 2),
    BulbaErrorCase("huge_integer_literal", "BULBA!\nkey ~> " + "1" * 5000, LexError, "Target is immune!", 2),
    BulbaErrorCase("trailing_array_comma", "BULBA!\nkey ~> <| 1, |>", LexError, "Target is immune!", 2),
    BulbaErrorCase("quoted_comma_splits_array", 'BULBA!\nkey ~> <| "a,b" |>', LexError, "Target is immune!", 2),
    BulbaErrorCase("charizard_key", 'BULBA!\nCharizard ~> "Fire"', ReservedKeyError, "It burns the bulb", 2),
    BulbaErrorCase("charizard_section", "BULBA!\n(o) Charizard (o)", ReservedKeyError, "It burns the bulb", 2),
    BulbaErrorCase(
        "charizard_at_tier_three",
        "BULBA!\n(o) a (o)\n    (O) b (O)\n        (@) c (@)\n            Charizard ~> 1",
        ReservedKeyError,
        "It burns the bulb",
        5,
    ),
    BulbaErrorCase(
        "deep_nesting_violation",
        'BULBA!\n(o) level1 (o)\n        (@) level3 (@)\n            key ~> "val"',
        InsufficientDepthError,
        "Not enough badges!",
        3,
    ),
    BulbaErrorCase(
        "tier_two_after_dedent",
        "BULBA!\n(o) a (o)\nx ~> 1\n    (O) b (O)",
        InsufficientDepthError,
        "Not enough badges!",
        4,
    ),
    BulbaErrorCase("tier_two_at_root", "BULBA!\n(O) pool (O)", HierarchyError, "The attack missed!", 2),
    BulbaErrorCase(
        "tier_one_indented",
        "BULBA!\n(o) a (o)\n    (o) b (o)",
        HierarchyError,
        "The attack missed!",
        3,
    ),
    BulbaErrorCase(
        "tier_three_at_tier_two_indent",
        "BULBA!\n(o) a (o)\n    (@) c (@)",
        HierarchyError,
        "The attack missed!",
        3,
    ),
    BulbaErrorCase(
        "key_indented_past_section",
        "BULBA!\n(o) a (o)\n        x ~> 1",
        HierarchyError,
        "The attack missed!",
        3,
    ),
    BulbaErrorCase("key_indented_at_root", "BULBA!\n    x ~> 1", HierarchyError, "The attack missed!", 2),
)


def case_id(case: BulbaCase | BulbaErrorCase) -> str:
    return case.name
