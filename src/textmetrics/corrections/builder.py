"""Correction builder: walks parsed stylesheets and computes per-selector deltas."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Sequence

from textmetrics.corrections.numbers import parse_int, round_fixed
from textmetrics.corrections.sources import CorrectionSource, source_for
from textmetrics.corrections.tree import CorrectionTree, merge_trees
from textmetrics.model.correction import AtRuleContext, CorrectionEntry
from textmetrics.model.metrics import MetricsTable
from textmetrics.stylesheet.font import resolve_font
from textmetrics.stylesheet.model import Rule, Stylesheet

__all__ = [
    "DEFAULT_DOT_REPLACEMENT",
    "build_corrections",
    "corrections_for_rule",
    "corrections_for_stylesheet",
    "match_source",
]

logger = logging.getLogger(__name__)

DEFAULT_DOT_REPLACEMENT = "%dot%"

# ".a, .b .c" -> [".a", ".b .c"]
_SELECTOR_LIST_RE = re.compile(r"\s*,\s*")


def _is_px(value: str | None) -> bool:
    return isinstance(value, str) and value.strip().lower().endswith("px")


def match_source(
    families: Sequence[str], metrics: MetricsTable, font_size: int
) -> CorrectionSource | None:
    """Return the correction source of the first family present in *metrics*.

    Declared order decides: later families are never consulted once one
    matches, even if its entry yields no usable correction.
    """
    for name in families:
        if name in metrics:
            logger.debug("Using metrics of font family %r", name)
            return source_for(metrics[name], font_size)
    return None


def corrections_for_rule(
    rule: Rule, metrics: MetricsTable, dot_replacement: str = DEFAULT_DOT_REPLACEMENT
) -> Iterator[tuple[str, CorrectionEntry]]:
    """Yield ``(path, entry)`` for each selector of *rule*.

    Rules whose font size or line height is not given in pixels yield
    nothing.
    """
    font = resolve_font(rule)
    if not (_is_px(font.size) and _is_px(font.line_height)):
        logger.debug(
            "Skipping %r: font-size=%r line-height=%r",
            rule.selector,
            font.size,
            font.line_height,
        )
        return

    font_size = parse_int(font.size) or 0
    line_height = parse_int(font.line_height) or 0

    decrease_by = 0.0
    source = match_source(font.family, metrics, font_size)
    if source is not None:
        decrease_by = source.resolve(font_size, line_height) or 0.0

    base_delta = round_fixed((line_height - font_size) / 2, 2)
    delta = round_fixed(base_delta + decrease_by, 1)

    at_rule = None
    if rule.parent is not None:
        at_rule = AtRuleContext(name=rule.parent.name, params=rule.parent.params)

    for alternative in _SELECTOR_LIST_RE.split(rule.selector):
        components = alternative.split()
        if not components:
            continue
        class_name = components.pop()
        yield class_name.replace(".", dot_replacement), CorrectionEntry(
            at_rule=at_rule,
            selector=" ".join(components),
            class_name=class_name,
            base_delta=base_delta,
            decrease_by=decrease_by,
            delta=delta,
            font_size=font_size,
            line_height=line_height,
        )


def corrections_for_stylesheet(
    stylesheet: Stylesheet,
    metrics: MetricsTable,
    dot_replacement: str = DEFAULT_DOT_REPLACEMENT,
) -> CorrectionTree:
    collected: dict[str, list[CorrectionEntry]] = {}
    for rule in stylesheet.walk_rules():
        for path, entry in corrections_for_rule(rule, metrics, dot_replacement):
            collected.setdefault(path, []).append(entry)
    return CorrectionTree(collected)


def build_corrections(
    stylesheets: Iterable[Stylesheet],
    metrics: MetricsTable,
    dot_replacement: str = DEFAULT_DOT_REPLACEMENT,
) -> CorrectionTree:
    """Build the correction tree of *stylesheets*, merged left to right."""
    return merge_trees(
        corrections_for_stylesheet(stylesheet, metrics, dot_replacement)
        for stylesheet in stylesheets
    )
