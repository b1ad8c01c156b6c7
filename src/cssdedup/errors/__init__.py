"""Error handling: exceptions raised by the parser and the batch runner."""

from cssdedup.errors.exceptions import BatchError, CssDedupError, CssParseError

__all__ = [
    "CssDedupError",
    "CssParseError",
    "BatchError",
]
