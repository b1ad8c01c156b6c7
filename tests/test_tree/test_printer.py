"""Tests for the CSS printer."""

from cssdedup.tree.nodes import AtRule, Declaration, Root, Rule
from cssdedup.tree.parser import parse_css
from cssdedup.tree.printer import print_css


class TestPrintCss:
    def test_empty_root(self):
        assert print_css(Root()) == ""

    def test_rule(self):
        root = Root([Rule(".a", [Declaration("color", "red"), Declaration("margin", "0")])])
        assert print_css(root) == ".a {\n  color: red;\n  margin: 0;\n}\n"

    def test_important(self):
        root = Root([Rule(".a", [Declaration("color", "red", important=True)])])
        assert print_css(root) == ".a {\n  color: red !important;\n}\n"

    def test_nested_at_rules(self):
        media = AtRule("media", "print", [Rule(".a", [Declaration("x", "1")])])
        root = Root([AtRule("layer", "base", [media])])
        assert print_css(root) == (
            "@layer base {\n"
            "  @media print {\n"
            "    .a {\n"
            "      x: 1;\n"
            "    }\n"
            "  }\n"
            "}\n"
        )

    def test_body_less_at_rule(self):
        root = Root([AtRule("import", 'url("x.css")'), AtRule("charset", "")])
        assert print_css(root) == '@import url("x.css");\n@charset;\n'

    def test_empty_blocks(self):
        root = Root([Rule(".a"), AtRule("media", "print", [])])
        assert print_css(root) == ".a {}\n@media print {}\n"

    def test_custom_indent(self):
        root = Root([Rule(".a", [Declaration("color", "red")])])
        assert print_css(root, indent="\t") == ".a {\n\tcolor: red;\n}\n"


class TestReparse:
    def test_printed_output_parses_to_equal_tree(self):
        source = """
        @layer base { *, :before { margin: 0 } }
        @font-face { font-family: "X"; src: url("x.woff2") format("woff2"); }
        .a { color: red !important; --gap: 4px; }
        @import url("x.css");
        """
        root = parse_css(source)
        assert parse_css(print_css(root)) == root
