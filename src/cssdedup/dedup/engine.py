"""Deduplication engine: runs the passes over one tree."""

from __future__ import annotations

import logging

from cssdedup.dedup.cleanup import remove_empty_containers
from cssdedup.dedup.declarations import dedupe_declarations
from cssdedup.dedup.rules import dedupe_rules
from cssdedup.tree.nodes import Root
from cssdedup.types import DedupStats

logger = logging.getLogger(__name__)


class DedupEngine:
    """Pass 1 (whole rules) → Pass 2 (declarations) → empty-container cleanup.

    Each stage finishes before the next starts. All bookkeeping lives inside
    a single ``run`` call, so one engine can process any number of
    independent documents.
    """

    def __init__(self, hash_fingerprints: bool = True) -> None:
        self._hash_fingerprints = hash_fingerprints

    def run(self, root: Root) -> DedupStats:
        """Deduplicate *root* in place and report what was removed."""
        stats = DedupStats()
        dedupe_rules(root, stats, hashed=self._hash_fingerprints)
        dedupe_declarations(root, stats)
        remove_empty_containers(root, stats)

        logger.info(
            "Removed %d rules, %d at-rules, %d declarations, %d emptied rules, %d containers",
            stats.rules_removed,
            stats.at_rules_removed,
            stats.declarations_removed,
            stats.rules_emptied,
            stats.containers_removed,
        )
        return stats
