"""Parse carrier shared by the check/format entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bulbapy.document import Document, PythonValue
    from bulbapy.lexer import Token
    from bulbapy.parser import ParserOptions


@dataclass(slots=True)
class BulbaParseResult:
    """Successful parse: source, tokens and the finished document."""

    source_text: str
    tokens: tuple[Token, ...]
    document: Document
    options: ParserOptions
    _rendered: str | None = field(default=None, init=False, repr=False)

    def to_python(self) -> PythonValue:
        from bulbapy.document import to_python

        return to_python(self.document)

    def rendered(self) -> str:
        if self._rendered is None:
            from bulbapy.format.printer import render_document

            self._rendered = render_document(self.document)
        return self._rendered
