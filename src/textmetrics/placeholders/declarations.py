"""Declaration lookup for raw stylesheet text carrying correction groups.

Example:
    padding: {$p2, .p2, .l1} 0 {$p1-5, .p2, .l2};
    padding-bottom: $p2 /*{$p2, .p1, .bcaps}*/;
"""

from __future__ import annotations

import re

from textmetrics.placeholders.groups import has_group
from textmetrics.placeholders.scanner import find_statement_end, iter_group_spans

__all__ = ["extract_declarations", "extract_property", "extract_value"]

# Start of a declaration: property name followed by a colon.  The lookbehind
# keeps selectors (.a:hover), ids, at-rules and SCSS variables out.
_PROPERTY_RE = re.compile(
    r"""
    (?<![\w.#@$%&-])                 # not inside another token
    (?P<prop>-?[A-Za-z_][\w-]*)      # property name, vendor prefixes allowed
    \s*:                             # colon separator
    """,
    re.VERBOSE,
)


def _holds_rule_body(text: str) -> bool:
    """Return True if a top-level brace block of *text* is a rule body, not a group."""
    for start, end in iter_group_spans(text):
        interior = text[start:end]
        if ";" in interior or ":" in interior:
            return True
    return False


def _trailing_comment(value: str) -> str | None:
    """Return the interior of the block comment that ends *value*, if any."""
    index = value.find("/*")
    while index != -1:
        close = value.find("*/", index + 2)
        if close == -1:
            return None
        if not value[close + 2:].strip():
            return value[index + 2:close]
        index = value.find("/*", close + 2)
    return None


def extract_declarations(text: str) -> list[str]:
    """Return every ``property: value;`` span of *text* whose value has a group.

    Surrounding text is discarded and each declaration is whitespace
    trimmed. A declaration without its terminating semicolon is not
    returned, nor is a selector such as ``a:hover`` whose rule body would
    otherwise be read as a value.
    """
    declarations: list[str] = []
    pos = 0
    while True:
        match = _PROPERTY_RE.search(text, pos)
        if match is None:
            break
        end = find_statement_end(text, match.end())
        if end is None or _holds_rule_body(text[match.end():end]):
            pos = match.end()
            continue
        if has_group(text[match.end():end]):
            declarations.append(text[match.start():end + 1].strip())
        pos = end + 1
    return declarations


def extract_property(declaration: str) -> str:
    """Return the property name preceding the first colon."""
    prop, colon, _ = declaration.partition(":")
    if not colon:
        return ""
    return prop.strip()


def extract_value(declaration: str) -> str:
    """Return the declaration value, without the terminating semicolon.

    When the value ends with a block comment holding a correction group, the
    content of that last comment is returned instead of the literal value.
    """
    _, colon, value = declaration.partition(":")
    if not colon:
        return ""
    end = find_statement_end(value)
    if end is not None:
        value = value[:end]
    value = value.strip()

    comment = _trailing_comment(value)
    if comment is not None and has_group(comment):
        return comment.strip()
    return value
