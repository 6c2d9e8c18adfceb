from textmetrics.stylesheet.errors import ParseError
from textmetrics.stylesheet.font import FontProperties, resolve_font
from textmetrics.stylesheet.model import AtRule, Declaration, Rule, Stylesheet
from textmetrics.stylesheet.parser import parse_stylesheet

__all__ = [
    "parse_stylesheet",
    "resolve_font",
    "FontProperties",
    "ParseError",
    "Stylesheet",
    "Rule",
    "Declaration",
    "AtRule",
]
