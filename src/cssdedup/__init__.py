"""css-dedup: context-aware deduplication of concatenated stylesheets."""

from cssdedup.core import CssDedup, deduplicate, deduplicate_directory, deduplicate_text

__all__ = [
    "CssDedup",
    "deduplicate",
    "deduplicate_text",
    "deduplicate_directory",
]
