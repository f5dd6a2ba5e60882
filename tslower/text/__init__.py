"""Source spans."""

from tslower.text.span import EMPTY, Span, slice_span

__all__ = [
    "EMPTY",
    "Span",
    "slice_span",
]
