"""Tests for the CSS stylesheet parser."""

import pytest

from textmetrics.stylesheet import (
    AtRule,
    Declaration,
    ParseError,
    Rule,
    Stylesheet,
    parse_stylesheet,
)


# ---------------------------------------------------------------------------
# Rules and declarations
# ---------------------------------------------------------------------------


class TestQualifiedRules:
    def test_parse_single_rule(self):
        ss = parse_stylesheet(".p1 { font-size: 16px; line-height: 24px; }")
        assert len(ss.rules) == 1
        rule = ss.rules[0]
        assert rule.selector == ".p1"
        assert rule.declarations == (
            Declaration(prop="font-size", value="16px"),
            Declaration(prop="line-height", value="24px"),
        )
        assert rule.parent is None

    def test_selector_list_kept_verbatim(self):
        ss = parse_stylesheet(".a, .b .c { color: red; }")
        assert ss.rules[0].selector == ".a, .b .c"

    def test_property_names_lowercased(self):
        ss = parse_stylesheet(".a { FONT-SIZE: 16px; }")
        assert ss.rules[0].declarations[0].prop == "font-size"

    def test_important_flag(self):
        ss = parse_stylesheet(".a { color: red !important; }")
        decl = ss.rules[0].declarations[0]
        assert decl.value == "red"
        assert decl.important is True

    def test_comments_ignored(self):
        ss = parse_stylesheet("/* .x { color: red; } */ .y { /* note */ color: blue; }")
        assert [r.selector for r in ss.rules] == [".y"]
        assert ss.rules[0].declarations == (Declaration(prop="color", value="blue"),)


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestAtRules:
    def test_media_parent_recorded(self):
        ss = parse_stylesheet(
            "@media (max-width: 1499px) { .lang-ko .p1 { font-size: 14px; } }"
        )
        assert len(ss.rules) == 1
        rule = ss.rules[0]
        assert rule.selector == ".lang-ko .p1"
        assert rule.parent == AtRule(name="media", params="(max-width: 1499px)")

    def test_nested_at_rules_use_innermost_parent(self):
        ss = parse_stylesheet(
            "@supports (display: grid) { @media print { .a { color: red; } } }"
        )
        assert ss.rules[0].parent == AtRule(name="media", params="print")

    def test_document_order(self):
        source = """
        .first { color: red; }
        @media (min-width: 10px) { .second { color: red; } }
        .third { color: red; }
        """
        ss = parse_stylesheet(source)
        assert [r.selector for r in ss.rules] == [".first", ".second", ".third"]
        assert ss.rules[1].parent is not None
        assert ss.rules[2].parent is None

    def test_non_grouping_at_rules_skipped(self):
        source = """
        @import url(base.css);
        @font-face { font-family: Foo; src: url(foo.woff); }
        .a { color: red; }
        """
        ss = parse_stylesheet(source)
        assert [r.selector for r in ss.rules] == [".a"]


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class TestInvalidCSS:
    def test_invalid_declaration_skipped(self):
        ss = parse_stylesheet(".a { color red; font-size: 16px; }")
        assert ss.rules[0].declarations == (Declaration(prop="font-size", value="16px"),)

    def test_invalid_declaration_strict(self):
        with pytest.raises(ParseError):
            parse_stylesheet(".a { color red; }", strict=True)

    def test_rule_without_block_skipped(self):
        ss = parse_stylesheet(".a { color: red; } .b")
        assert [r.selector for r in ss.rules] == [".a"]

    def test_rule_without_block_strict(self):
        with pytest.raises(ParseError):
            parse_stylesheet(".a { color: red; } .b", strict=True)

    def test_parse_error_message_includes_position(self):
        err = ParseError("bad", line=3, column=7)
        assert str(err) == "bad (line 3, column 7)"
        assert ParseError("bad").line is None
        assert str(ParseError("bad")) == "bad"


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


class TestEmptyStylesheet:
    def test_empty_string(self):
        assert parse_stylesheet("").rules == ()

    def test_whitespace_only(self):
        assert parse_stylesheet("   \n\t  ").rules == ()


class TestStylesheetDataclass:
    def test_walk_rules_in_order(self):
        rules = (Rule(selector=".a"), Rule(selector=".b"))
        assert tuple(Stylesheet(rules=rules).walk_rules()) == rules

    def test_rule_is_frozen(self):
        rule = Rule(selector=".a")
        with pytest.raises(AttributeError):
            rule.selector = ".b"  # type: ignore[misc]
