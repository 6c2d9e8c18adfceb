"""Font property resolution: size, line-height and family list for a rule.

The ``font`` shorthand and the ``font-size`` / ``line-height`` /
``font-family`` longhands are applied in declaration order, so a later
declaration wins, the same way the cascade treats them inside one block.
"""

from __future__ import annotations

from dataclasses import dataclass

import tinycss2

from textmetrics.stylesheet.model import Rule

__all__ = ["FontProperties", "parse_font_family", "parse_font_shorthand", "resolve_font"]

_SIZE_KEYWORDS = frozenset({
    "xx-small",
    "x-small",
    "small",
    "medium",
    "large",
    "x-large",
    "xx-large",
    "xxx-large",
    "smaller",
    "larger",
})


@dataclass(frozen=True)
class FontProperties:
    """The effective font values of a rule; values are raw CSS strings."""

    size: str | None = None
    line_height: str | None = None
    family: tuple[str, ...] = ()


def _tokens(value: str) -> list:
    return [
        token
        for token in tinycss2.parse_component_value_list(value, skip_comments=True)
        if token.type != "whitespace"
    ]


def _is_size_token(token: object) -> bool:
    kind = getattr(token, "type", "")
    if kind in ("dimension", "percentage", "function"):
        return True
    return kind == "ident" and token.lower_value in _SIZE_KEYWORDS  # type: ignore[attr-defined]


def _is_literal(token: object, value: str) -> bool:
    return getattr(token, "type", "") == "literal" and token.value == value  # type: ignore[attr-defined]


def _families_from_tokens(tokens: list) -> tuple[str, ...]:
    families: list[str] = []
    current: list[str] = []
    for token in tokens:
        if _is_literal(token, ","):
            if current:
                families.append(" ".join(current))
            current = []
        elif token.type in ("string", "ident"):
            current.append(token.value.strip())
        else:
            current.append(tinycss2.serialize([token]).strip())
    if current:
        families.append(" ".join(current))
    return tuple(name for name in families if name)


def parse_font_family(value: str) -> tuple[str, ...]:
    """Split a ``font-family`` value into unquoted family names."""
    return _families_from_tokens(_tokens(value))


def parse_font_shorthand(value: str) -> FontProperties | None:
    """Parse a ``font`` shorthand value.

    Returns None for values without a font size (system fonts such as
    ``caption`` and CSS-wide keywords). A shorthand without an explicit
    line-height resets it to ``normal``.
    """
    tokens = _tokens(value)
    for index, token in enumerate(tokens):
        if _is_size_token(token):
            break
    else:
        return None

    size = tinycss2.serialize([token]).strip()
    rest = tokens[index + 1:]
    line_height = "normal"
    if len(rest) >= 2 and _is_literal(rest[0], "/"):
        line_height = tinycss2.serialize([rest[1]]).strip()
        rest = rest[2:]
    return FontProperties(
        size=size,
        line_height=line_height,
        family=_families_from_tokens(rest),
    )


def resolve_font(rule: Rule) -> FontProperties:
    """Return the effective font size, line-height and family list of *rule*."""
    size: str | None = None
    line_height: str | None = None
    family: tuple[str, ...] = ()
    for decl in rule.declarations:
        if decl.prop == "font":
            shorthand = parse_font_shorthand(decl.value)
            if shorthand is None:
                continue
            size = shorthand.size
            line_height = shorthand.line_height
            family = shorthand.family
        elif decl.prop == "font-size":
            size = decl.value
        elif decl.prop == "line-height":
            line_height = decl.value
        elif decl.prop == "font-family":
            family = parse_font_family(decl.value)
    return FontProperties(size=size, line_height=line_height, family=family)
