"""Style-sheet tree: Root, AtRule, Rule and Declaration nodes.

Every node carries a ``kind`` tag and a ``parent`` link. Parents own their
children; ``remove()`` detaches a node together with its whole subtree.
The tree is only ever shrunk by the dedup passes, never rebuilt.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar


class NodeKind(StrEnum):
    ROOT = "root"
    AT_RULE = "atrule"
    RULE = "rule"
    DECLARATION = "decl"


@dataclass
class Node:
    """Shared tree navigation for all node kinds."""

    kind: ClassVar[NodeKind]
    # Leaf kinds have no children; containers override with a list field.
    nodes = None

    parent: Node | None = field(default=None, compare=False, repr=False, kw_only=True)

    def __post_init__(self) -> None:
        for child in self.nodes or ():
            child.parent = self

    @property
    def declarations(self) -> list[Declaration]:
        """Direct child declarations, in document order."""
        return [c for c in self.nodes or () if c.kind is NodeKind.DECLARATION]

    @property
    def is_nested(self) -> bool:
        """True when any ancestor is a Rule (CSS nesting), however deep.

        Context skips Rule ancestors, so nested content under different
        parent selectors would otherwise compare equal.
        """
        current = self.parent
        while current is not None:
            if current.kind is NodeKind.RULE:
                return True
            current = current.parent
        return False

    def append(self, *children: Node) -> None:
        if self.nodes is None:
            raise TypeError(f"{self.kind} node cannot hold children")
        for child in children:
            child.remove()
            child.parent = self
            self.nodes.append(child)

    def remove(self) -> None:
        """Detach this node (and its subtree) from its parent. Idempotent."""
        parent = self.parent
        if parent is None:
            return
        # Identity, not equality: structurally equal siblings are common here.
        for index, sibling in enumerate(parent.nodes):
            if sibling is self:
                del parent.nodes[index]
                break
        self.parent = None

    def walk(self) -> Iterator[Node]:
        """Pre-order traversal of all descendants.

        Children are snapshotted per level, so removing the node currently
        being visited is safe. A node removed during its own visit is not
        descended into.
        """
        for child in list(self.nodes or ()):
            yield child
            if child.parent is self and child.nodes:
                yield from child.walk()


@dataclass
class Root(Node):
    kind: ClassVar[NodeKind] = NodeKind.ROOT

    nodes: list[Node] = field(default_factory=list)


@dataclass
class AtRule(Node):
    """An ``@name params`` rule; ``nodes`` is None when it has no body."""

    kind: ClassVar[NodeKind] = NodeKind.AT_RULE

    name: str = ""
    params: str = ""
    nodes: list[Node] | None = None

    @property
    def is_declaration_block(self) -> bool:
        """True for bodies made only of declarations (``@font-face``, ``@property``)."""
        return bool(self.nodes) and all(c.kind is NodeKind.DECLARATION for c in self.nodes)

    @property
    def is_container(self) -> bool:
        """True for bodies that nest other rules (``@media``, ``@layer``, ...).

        An empty body counts as a container so cleanup can collapse it.
        """
        return self.nodes is not None and not self.is_declaration_block


@dataclass
class Rule(Node):
    kind: ClassVar[NodeKind] = NodeKind.RULE

    selector: str = ""
    nodes: list[Node] = field(default_factory=list)

    @property
    def is_flat(self) -> bool:
        """True when the body holds declarations only."""
        return all(c.kind is NodeKind.DECLARATION for c in self.nodes)


@dataclass
class Declaration(Node):
    kind: ClassVar[NodeKind] = NodeKind.DECLARATION

    prop: str = ""
    value: str = ""
    important: bool = False

    def serialize(self) -> str:
        """Compact ``prop:value[!important]`` form used for comparison."""
        return f"{self.prop}:{self.value}{'!important' if self.important else ''}"
