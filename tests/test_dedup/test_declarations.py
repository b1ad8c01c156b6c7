"""Tests for declaration-level deduplication (pass 2)."""

from cssdedup.dedup.declarations import dedupe_declarations
from cssdedup.tree.parser import parse_css
from cssdedup.tree.printer import print_css
from cssdedup.types import DedupStats


class TestPartialOverlap:
    def test_strips_shared_declarations(self):
        root = parse_css(".a { color: red; margin: 0 } .a { color: red; padding: 8px }")
        assert dedupe_declarations(root) == 1
        assert print_css(root) == (
            ".a {\n  color: red;\n  margin: 0;\n}\n"
            ".a {\n  padding: 8px;\n}\n"
        )

    def test_repeat_within_one_rule(self):
        root = parse_css(".a { color: red; color: red } .a { margin: 0 }")
        dedupe_declarations(root)
        # A repeat inside one rule also counts as already seen.
        assert [d.serialize() for d in root.nodes[0].nodes] == ["color:red"]

    def test_accumulates_across_many_rules(self):
        root = parse_css(".a { x: 1 } .a { y: 2 } .a { x: 1; y: 2; z: 3 }")
        dedupe_declarations(root)
        assert [d.serialize() for d in root.nodes[2].nodes] == ["z:3"]

    def test_value_must_match(self):
        root = parse_css(".a { color: red } .a { color: blue }")
        assert dedupe_declarations(root) == 0

    def test_important_must_match(self):
        root = parse_css(".a { color: red } .a { color: red !important }")
        assert dedupe_declarations(root) == 0


class TestFullOverlap:
    def test_rule_removed(self):
        root = parse_css(".a { color: red; margin: 0 } .a { color: red }")
        stats = DedupStats()
        dedupe_declarations(root, stats)
        assert len(root.nodes) == 1
        assert stats.rules_emptied == 1
        assert stats.declarations_removed == 1

    def test_empty_rule_removed(self):
        root = parse_css(".a {} .b { x: 1 }")
        dedupe_declarations(root)
        assert [n.selector for n in root.nodes] == [".b"]


class TestScope:
    def test_no_cross_selector_leakage(self):
        root = parse_css(".a { color: red } .b { color: red }")
        assert dedupe_declarations(root) == 0
        assert print_css(root).count("color: red") == 2

    def test_no_cross_context_leakage(self):
        root = parse_css(
            "@layer base { .a { color: red; margin: 0 } }"
            "@layer utilities { .a { color: red; padding: 10px } }"
        )
        assert dedupe_declarations(root) == 0

    def test_same_context_in_separate_blocks(self):
        root = parse_css(
            "@layer properties { @supports (display: grid) {"
            "  *, :before, :after { --tw-border-style: solid; --tw-shadow: 0 0 #0000 } } }"
            "@layer properties { @supports (display: grid) {"
            "  *, :before, :after { --tw-border-style: solid; --tw-blur: initial } } }"
        )
        dedupe_declarations(root)
        output = print_css(root)
        assert output.count("--tw-border-style") == 1
        assert "--tw-shadow" in output
        assert "--tw-blur" in output

    def test_at_rule_declarations_not_touched(self):
        root = parse_css('@font-face { font-family: "X" } @font-face { font-family: "X"; src: a }')
        assert dedupe_declarations(root) == 0


class TestNesting:
    def test_nested_rules_untouched(self):
        root = parse_css(".a { .b { color: red } } .c { .b { color: red } }")
        assert dedupe_declarations(root) == 0

    def test_rule_keeping_nested_children_survives(self):
        root = parse_css(".a { color: red } .a { color: red; .b { x: 1 } }")
        dedupe_declarations(root)
        assert len(root.nodes) == 2
        assert root.nodes[1].nodes[0].selector == ".b"
