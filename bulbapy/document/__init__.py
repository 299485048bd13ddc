"""Typed document values produced by the parser."""

from bulbapy.document.model import (
    ArrayValue,
    BoolValue,
    Document,
    FloatValue,
    IntValue,
    NullValue,
    ObjectValue,
    PythonValue,
    ScalarValue,
    StringValue,
    Value,
    is_container,
    to_python,
)
from bulbapy.document.scalar import (
    is_number_literal,
    parse_float,
    parse_int,
    parse_number,
)

__all__ = [
    "ArrayValue",
    "BoolValue",
    "Document",
    "FloatValue",
    "IntValue",
    "NullValue",
    "ObjectValue",
    "PythonValue",
    "ScalarValue",
    "StringValue",
    "Value",
    "is_container",
    "is_number_literal",
    "parse_float",
    "parse_int",
    "parse_number",
    "to_python",
]
