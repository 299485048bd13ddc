"""Value model for parsed Bulba documents."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str


@dataclass(frozen=True, slots=True)
class IntValue:
    value: int


@dataclass(frozen=True, slots=True)
class FloatValue:
    value: float


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool


@dataclass(frozen=True, slots=True)
class NullValue:
    @property
    def value(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class ArrayValue:
    """Ordered sequence of values; nested arrays allowed."""

    items: tuple[Value, ...] = ()

    @property
    def value(self) -> tuple[Value, ...]:
        return self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)


class ObjectValue(Mapping[str, "Value"]):
    """Keyed mapping with unique keys, enumerated in lexicographic key order.

    Only the parser writes into an object (through `assign`); a returned
    document is treated as read-only.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Value] | None = None) -> None:
        self._entries: dict[str, Value] = dict(entries) if entries is not None else {}

    @property
    def value(self) -> ObjectValue:
        return self

    def assign(self, key: str, value: Value) -> None:
        """Insert or overwrite `key` (last write wins)."""
        self._entries[key] = value

    def __getitem__(self, key: str) -> Value:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        inner = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"ObjectValue({{{inner}}})"


ScalarValue: TypeAlias = StringValue | IntValue | FloatValue | BoolValue | NullValue
Value: TypeAlias = ScalarValue | ArrayValue | ObjectValue
Document: TypeAlias = ObjectValue
PythonValue: TypeAlias = "str | int | float | bool | None | list[PythonValue] | dict[str, PythonValue]"


def is_container(value: Value) -> bool:
    return isinstance(value, (ArrayValue, ObjectValue))


def to_python(value: Value) -> PythonValue:
    """Convert a value tree into plain dicts/lists/scalars."""
    match value:
        case ObjectValue():
            return {key: to_python(child) for key, child in value.items()}
        case ArrayValue(items=items):
            return [to_python(item) for item in items]
        case NullValue():
            return None
        case StringValue(value=text):
            return text
        case BoolValue(value=flag):
            return flag
        case IntValue(value=number) | FloatValue(value=number):
            return number
        case _:
            raise TypeError(f"Unsupported value: {value!r}")


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
    "to_python",
]
