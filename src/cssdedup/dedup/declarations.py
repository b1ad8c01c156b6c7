"""Pass 2: declaration-level deduplication."""

from __future__ import annotations

import logging
from collections import defaultdict

from cssdedup.dedup.fingerprint import group_key
from cssdedup.tree.nodes import NodeKind, Root
from cssdedup.types import DedupStats

logger = logging.getLogger(__name__)


def dedupe_declarations(root: Root, stats: DedupStats | None = None) -> int:
    """Strip declarations already seen in an earlier rule of the same group.

    A group is context + selector. Rules that Pass 1 kept because their
    declaration sets differ may still share some declarations:

        .btn { color: red; margin: 0; }        .btn { color: red; margin: 0; }
        .btn { color: red; padding: 8px; }  →  .btn { padding: 8px; }

    A rule left with nothing in it is removed. Declarations are never
    compared across selectors or contexts.

    Returns the number of declarations removed.
    """
    seen_by_group: dict[str, set[str]] = defaultdict(set)
    removed = 0

    for node in root.walk():
        if node.parent is None or node.kind is not NodeKind.RULE or node.is_nested:
            continue

        seen = seen_by_group[group_key(node)]
        for decl in node.declarations:
            key = decl.serialize()
            if key in seen:
                decl.remove()
                removed += 1
            else:
                seen.add(key)

        if not node.nodes:
            logger.debug("Removing rule %r: every declaration already seen", node.selector)
            node.remove()
            if stats is not None:
                stats.rules_emptied += 1

    if stats is not None:
        stats.declarations_removed += removed
    return removed
