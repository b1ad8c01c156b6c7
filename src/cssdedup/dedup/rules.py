"""Pass 1: whole-rule deduplication."""

from __future__ import annotations

import logging

from cssdedup.dedup.fingerprint import fingerprint
from cssdedup.tree.nodes import Node, NodeKind, Root
from cssdedup.types import DedupStats

logger = logging.getLogger(__name__)


def dedupe_rules(root: Root, stats: DedupStats | None = None, hashed: bool = True) -> int:
    """Remove every rule or declaration-only at-rule already seen in the same context.

    One pre-order walk with a single seen-set for the whole document; the
    context is part of each fingerprint. First occurrence wins.

        .btn { color: red; }           .btn { color: red; }
        .btn { color: red; }    →      (removed)

    Returns the number of nodes removed.
    """
    seen: set[str] = set()
    removed = 0

    for node in root.walk():
        # Detached earlier in this walk.
        if node.parent is None:
            continue

        key = fingerprint(node, hashed=hashed)
        if key is None:
            continue

        if key not in seen:
            seen.add(key)
            continue

        logger.debug("Removing duplicate %s %s", node.kind, _describe(node))
        node.remove()
        removed += 1
        if stats is not None:
            if node.kind is NodeKind.RULE:
                stats.rules_removed += 1
            else:
                stats.at_rules_removed += 1

    return removed


def _describe(node: Node) -> str:
    if node.kind is NodeKind.RULE:
        return repr(node.selector)
    return f"@{node.name} {node.params}".rstrip()
