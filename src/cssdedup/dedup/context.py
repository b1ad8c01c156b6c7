"""At-rule context resolution."""

from __future__ import annotations

from cssdedup.tree.nodes import Node, NodeKind

Context = tuple[tuple[str, str], ...]


def resolve_context(node: Node) -> Context:
    """Return the enclosing at-rules of *node* as ``(name, params)`` pairs.

    Ordered outermost first, Root excluded. Rule ancestors are skipped.
    On a detached node this returns whatever chain is still reachable.

    Example: a rule inside ``@layer properties { @supports (display: grid) { ... } }``
    resolves to ``(("layer", "properties"), ("supports", "(display: grid)"))``.
    """
    parts: list[tuple[str, str]] = []
    current = node.parent
    while current is not None and current.kind is not NodeKind.ROOT:
        if current.kind is NodeKind.AT_RULE:
            parts.append((current.name, current.params))
        current = current.parent
    parts.reverse()
    return tuple(parts)
