"""Document rendering."""

from bulbapy.format.printer import print_document, render_document, render_scalar
from bulbapy.format.runner import run_format

__all__ = [
    "print_document",
    "render_document",
    "render_scalar",
    "run_format",
]
