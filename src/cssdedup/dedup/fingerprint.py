"""Fingerprints: canonical keys for exact rule equivalence in context."""

from __future__ import annotations

import hashlib
import json

from cssdedup.dedup.context import Context, resolve_context
from cssdedup.tree.nodes import AtRule, Node, NodeKind, Rule


def serialize_declarations(node: Node) -> list[str]:
    """Serialize the direct child declarations of *node*, sorted.

    Sorting makes ``{color: red; margin: 0}`` equal ``{margin: 0; color: red}``.
    """
    return sorted(decl.serialize() for decl in node.declarations)


def rule_fingerprint(rule: Rule, context: Context | None = None, hashed: bool = True) -> str:
    if context is None:
        context = resolve_context(rule)
    return _finish(["rule", context, rule.selector, serialize_declarations(rule)], hashed)


def at_rule_fingerprint(
    at_rule: AtRule, context: Context | None = None, hashed: bool = True
) -> str:
    if context is None:
        context = resolve_context(at_rule)
    key = ["atrule", context, at_rule.name, at_rule.params, serialize_declarations(at_rule)]
    return _finish(key, hashed)


def is_fingerprintable(node: Node) -> bool:
    """Whether *node* is compared as a whole unit.

    Eligible: flat rules and at-rules whose body holds declarations only,
    neither of them inside a rule at any depth. Containers are only
    traversed into.
    """
    if node.kind is NodeKind.RULE:
        return not node.is_nested and node.is_flat
    if node.kind is NodeKind.AT_RULE:
        return not node.is_nested and node.is_declaration_block
    return False


def fingerprint(node: Node, hashed: bool = True) -> str | None:
    """Fingerprint an eligible node, or return None for anything else."""
    if not is_fingerprintable(node):
        return None
    if node.kind is NodeKind.RULE:
        return rule_fingerprint(node, hashed=hashed)
    return at_rule_fingerprint(node, hashed=hashed)


def group_key(rule: Rule) -> str:
    """Context + selector, the scope for declaration-level comparison."""
    return json.dumps([resolve_context(rule), rule.selector])


def _finish(parts: list, hashed: bool) -> str:
    # JSON keeps the component boundaries unambiguous whatever the selector text.
    raw = json.dumps(parts, ensure_ascii=False)
    if not hashed:
        return raw
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()
