"""Stylesheet model: AtRule, Declaration, Rule, and Stylesheet dataclasses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class AtRule:
    """The at-rule wrapping a rule, e.g. ``@media (max-width: 1499px)``.

    ``params`` is the raw prelude text, kept verbatim apart from surrounding
    whitespace.
    """

    name: str  # "media", "supports", ...
    params: str  # "(max-width: 1499px)"


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair from a rule block."""

    prop: str
    value: str
    important: bool = False


@dataclass(frozen=True)
class Rule:
    """A qualified rule: a selector list and its declarations."""

    selector: str
    declarations: tuple[Declaration, ...] = ()
    parent: AtRule | None = None


@dataclass(frozen=True)
class Stylesheet:
    """All rules of a parsed stylesheet, in document order."""

    rules: tuple[Rule, ...] = ()

    def walk_rules(self) -> Iterator[Rule]:
        yield from self.rules
