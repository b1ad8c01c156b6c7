"""Context-aware deduplication passes over a style-sheet tree."""

from cssdedup.dedup.cleanup import remove_empty_containers
from cssdedup.dedup.context import resolve_context
from cssdedup.dedup.declarations import dedupe_declarations
from cssdedup.dedup.engine import DedupEngine
from cssdedup.dedup.fingerprint import fingerprint, group_key
from cssdedup.dedup.rules import dedupe_rules

__all__ = [
    "DedupEngine",
    "resolve_context",
    "fingerprint",
    "group_key",
    "dedupe_rules",
    "dedupe_declarations",
    "remove_empty_containers",
]
