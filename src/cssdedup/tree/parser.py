"""CSS text → style-sheet tree, built on tinycss2."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import tinycss2

from cssdedup.errors.exceptions import CssParseError
from cssdedup.tree.nodes import AtRule, Declaration, Node, Root, Rule

__all__ = ["parse_css"]

logger = logging.getLogger(__name__)


def parse_css(css: str) -> Root:
    """Parse style-sheet text into a mutable tree.

    Comments and insignificant whitespace are dropped. Selectors, at-rule names,
    at-rule preludes and declaration values keep their source text, trimmed.

    Raises:
        CssParseError: on the first parse error tinycss2 reports.
    """
    items = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)
    root = Root()
    root.append(*(_convert(item) for item in items))
    logger.debug("Parsed %d top-level nodes", len(root.nodes))
    return root


def _convert(item: Any) -> Node:
    if item.type == "error":
        raise CssParseError(
            item.message, line=item.source_line, column=item.source_column, kind=item.kind
        )

    if item.type == "qualified-rule":
        rule = Rule(selector=_text(item.prelude))
        rule.append(*_convert_block(item.content))
        return rule

    if item.type == "at-rule":
        at_rule = AtRule(name=item.at_keyword, params=_text(item.prelude))
        if item.content is not None:
            at_rule.nodes = []
            at_rule.append(*_convert_block(item.content))
        return at_rule

    if item.type == "declaration":
        return Declaration(prop=item.name, value=_text(item.value), important=item.important)

    raise CssParseError(
        f"Unexpected {item.type} node", line=item.source_line, column=item.source_column
    )


def _convert_block(tokens: Iterable[Any]) -> list[Node]:
    """Parse the inside of a ``{}`` block: declarations and nested rules."""
    contents = tinycss2.parse_blocks_contents(tokens, skip_comments=True, skip_whitespace=True)
    return [_convert(item) for item in contents]


def _text(tokens: Iterable[Any] | None) -> str:
    if not tokens:
        return ""
    return tinycss2.serialize(tokens).strip()
