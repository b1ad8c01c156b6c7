"""Removal of at-rule containers left empty by the dedup passes."""

from __future__ import annotations

import logging

from cssdedup.tree.nodes import NodeKind, Root
from cssdedup.types import DedupStats

logger = logging.getLogger(__name__)


def remove_empty_containers(root: Root, stats: DedupStats | None = None) -> int:
    """Remove at-rules with an empty body until none are left.

    Removing ``@media`` inside ``@layer base`` may empty the layer too, so
    full scans repeat until one removes nothing.

    Returns the number of at-rules removed.
    """
    total = 0
    while True:
        removed = 0
        for node in root.walk():
            if node.parent is None or node.kind is not NodeKind.AT_RULE or node.is_nested:
                continue
            if node.nodes is not None and not node.nodes:
                logger.debug("Removing empty @%s %s", node.name, node.params)
                node.remove()
                removed += 1
        if not removed:
            break
        total += removed

    if stats is not None:
        stats.containers_removed += total
    return total
