"""Style-sheet tree model plus the tinycss2-backed parser and printer."""

from cssdedup.tree.nodes import AtRule, Declaration, Node, NodeKind, Root, Rule
from cssdedup.tree.parser import parse_css
from cssdedup.tree.printer import print_css

__all__ = [
    "Node",
    "NodeKind",
    "Root",
    "AtRule",
    "Rule",
    "Declaration",
    "parse_css",
    "print_css",
]
