"""Indented text rendering of parsed documents."""

from __future__ import annotations

import sys
from typing import TextIO

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
    is_container,
)

INDENT: str = "  "


def render_document(document: Document) -> str:
    """Render `document` as `key: value` lines, two spaces per nesting level.

    Mapping keys come out in lexicographic order. Containers put their
    children on the following lines; array elements are prefixed with `- `.
    """
    lines: list[str] = []
    _render_object(document, 0, lines)
    return "".join(f"{line}\n" for line in lines)


def print_document(document: Document, file: TextIO | None = None) -> None:
    (file or sys.stdout).write(render_document(document))


def render_scalar(value: Value) -> str:
    match value:
        case StringValue(value=text):
            return text
        case BoolValue(value=flag):
            return "true" if flag else "false"
        case NullValue():
            return "null"
        case IntValue(value=number):
            return str(number)
        case FloatValue(value=number):
            return repr(number)
        case _:
            raise TypeError(f"Not a scalar value: {value!r}")


def _render_object(value: ObjectValue, depth: int, lines: list[str]) -> None:
    indentation = INDENT * depth
    for key, child in value.items():
        if is_container(child):
            lines.append(f"{indentation}{key}:")
            _render_container(child, depth + 1, lines)
        else:
            lines.append(f"{indentation}{key}: {render_scalar(child)}")


def _render_array(value: ArrayValue, depth: int, lines: list[str]) -> None:
    indentation = INDENT * depth
    for item in value.items:
        if is_container(item):
            lines.append(f"{indentation}-")
            _render_container(item, depth + 1, lines)
        else:
            lines.append(f"{indentation}- {render_scalar(item)}")


def _render_container(value: Value, depth: int, lines: list[str]) -> None:
    if isinstance(value, ObjectValue):
        _render_object(value, depth, lines)
    elif isinstance(value, ArrayValue):
        _render_array(value, depth, lines)
