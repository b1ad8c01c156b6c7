"""Style-sheet tree → CSS text."""

from __future__ import annotations

from cssdedup.tree.nodes import AtRule, Declaration, Node, NodeKind, Root, Rule

__all__ = ["print_css"]

DEFAULT_INDENT = "  "


def print_css(root: Root, indent: str = DEFAULT_INDENT) -> str:
    """Serialize *root* as indented CSS, one declaration per line.

    An empty tree prints as the empty string.
    """
    lines: list[str] = []
    for node in root.nodes:
        _emit(node, 0, indent, lines)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _emit(node: Node, depth: int, indent: str, lines: list[str]) -> None:
    pad = indent * depth
    if node.kind is NodeKind.DECLARATION:
        lines.append(pad + _declaration(node))
    elif node.kind is NodeKind.RULE:
        _emit_block(node.selector, node, depth, indent, lines)
    elif node.kind is NodeKind.AT_RULE:
        header = _at_rule_header(node)
        if node.nodes is None:
            lines.append(f"{pad}{header};")
        else:
            _emit_block(header, node, depth, indent, lines)
    else:
        raise TypeError(f"Cannot print {node.kind} node inside a tree")


def _emit_block(
    header: str, node: Rule | AtRule, depth: int, indent: str, lines: list[str]
) -> None:
    pad = indent * depth
    if not node.nodes:
        lines.append(f"{pad}{header} {{}}")
        return
    lines.append(f"{pad}{header} {{")
    for child in node.nodes:
        _emit(child, depth + 1, indent, lines)
    lines.append(f"{pad}}}")


def _at_rule_header(node: AtRule) -> str:
    if node.params:
        return f"@{node.name} {node.params}"
    return f"@{node.name}"


def _declaration(decl: Declaration) -> str:
    suffix = " !important" if decl.important else ""
    return f"{decl.prop}: {decl.value}{suffix};"
