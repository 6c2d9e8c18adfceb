"""Tests for the TypographyParser entry point."""

import pytest

from textmetrics import ParseError, ParserConfig, TypographyParser, create_parser

ARIAL = {"fontBoundingBoxAscent": 1854, "fontBoundingBoxDescent": 434, "hangingBaseline": 1556}


class TestTypographyParser:
    def test_default_config(self):
        parser = TypographyParser()
        assert parser.config == ParserConfig()

    def test_parse_single_text(self):
        parser = create_parser(metrics={"Arial": ARIAL})
        tree = parser.parse(".p1 { font: 16px/24px Arial; }")
        assert tree["%dot%p1"][0].delta == 6.0

    def test_parse_multiple_texts_merged(self):
        parser = create_parser()
        tree = parser.parse([
            ".p1 { font: 16px/24px Arial; }",
            ".p1 { font: 20px/30px Arial; }",
        ])
        assert [e.font_size for e in tree["%dot%p1"]] == [16, 20]

    def test_callable(self):
        parser = create_parser(dot_replacement="-")
        tree = parser(".p1 { font: 16px/24px Arial; }")
        assert list(tree) == ["-p1"]

    def test_dot_replacement_coerced(self):
        assert create_parser(dot_replacement=".").config.dot_replacement == "%dot%"

    def test_strict(self):
        with pytest.raises(ParseError):
            create_parser().parse(".a { color red; }", strict=True)

    def test_repeatable(self):
        parser = create_parser(metrics={"Arial": ARIAL})
        css = ".a .p1, .p2 { font: 14px/21px Arial; }"
        assert parser.parse(css) == parser.parse(css)
