"""CSS parser producing the rule tree walked by the correction builder.

Tokenizing and block structure come from tinycss2; this module only flattens
the result into :class:`Rule` objects that remember their enclosing at-rule.

Syntax example:
    .p1 { font: 16px/24px Arial, sans-serif; }
    @media (max-width: 1499px) { .lang-ko .p1 { font-size: 14px; line-height: 20px; } }
"""

from __future__ import annotations

import logging

import tinycss2

from textmetrics.stylesheet.errors import ParseError
from textmetrics.stylesheet.model import AtRule, Declaration, Rule, Stylesheet

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)

# At-rules whose block holds qualified rules rather than declarations.
_GROUPING_AT_RULES = frozenset({
    "media",
    "supports",
    "document",
    "-moz-document",
    "layer",
    "container",
    "scope",
})


def _handle_error(node: object, strict: bool) -> None:
    line = getattr(node, "source_line", None)
    column = getattr(node, "source_column", None)
    message = getattr(node, "message", "invalid CSS")
    if strict:
        raise ParseError(message, line=line, column=column)
    logger.debug("Skipping invalid CSS at %s:%s: %s", line, column, message)


def _parse_declarations(content: list, strict: bool) -> tuple[Declaration, ...]:
    declarations: list[Declaration] = []
    nodes = tinycss2.parse_declaration_list(
        content, skip_comments=True, skip_whitespace=True
    )
    for node in nodes:
        if node.type == "declaration":
            declarations.append(
                Declaration(
                    prop=node.lower_name,
                    value=tinycss2.serialize(node.value).strip(),
                    important=node.important,
                )
            )
        elif node.type == "error":
            _handle_error(node, strict)
    return tuple(declarations)


def _collect_rules(
    nodes: list, parent: AtRule | None, rules: list[Rule], strict: bool
) -> None:
    """Walk a rule list depth-first, appending qualified rules in source order."""
    for node in nodes:
        if node.type == "qualified-rule":
            selector = tinycss2.serialize(node.prelude).strip()
            rules.append(
                Rule(
                    selector=selector,
                    declarations=_parse_declarations(node.content, strict),
                    parent=parent,
                )
            )
        elif node.type == "at-rule":
            if node.content is None or node.lower_at_keyword not in _GROUPING_AT_RULES:
                continue
            at_rule = AtRule(
                name=node.at_keyword,
                params=tinycss2.serialize(node.prelude).strip(),
            )
            children = tinycss2.parse_rule_list(
                node.content, skip_comments=True, skip_whitespace=True
            )
            _collect_rules(children, at_rule, rules, strict)
        elif node.type == "error":
            _handle_error(node, strict)


def parse_stylesheet(source: str, *, strict: bool = False) -> Stylesheet:
    """Parse CSS text into a :class:`Stylesheet`.

    Returns a Stylesheet containing every qualified rule in document order,
    including rules nested inside grouping at-rules such as ``@media``.
    Invalid constructs are skipped unless *strict* is set, in which case
    the first one raises :class:`ParseError`.
    """
    nodes = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
    rules: list[Rule] = []
    _collect_rules(nodes, None, rules, strict)
    return Stylesheet(rules=tuple(rules))
