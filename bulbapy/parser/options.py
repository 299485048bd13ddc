"""Parser configuration options."""

from dataclasses import dataclass, field
from typing import Final

DEFAULT_RESERVED_KEYS: Final[frozenset[str]] = frozenset({"Charizard"})


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Settings applied while interpreting the token stream."""

    reserved_keys: frozenset[str] = field(default=DEFAULT_RESERVED_KEYS)

    def is_reserved(self, key: str) -> bool:
        return key in self.reserved_keys

    def with_reserved_keys(self, *keys: str) -> "ParserOptions":
        return ParserOptions(reserved_keys=self.reserved_keys | frozenset(keys))
