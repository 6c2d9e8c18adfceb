"""textmetrics: vertical text corrections from font metrics for CSS builds."""

from __future__ import annotations

__version__ = "0.1.0"

from textmetrics.config import ParserConfig, load_metrics  # noqa: E402
from textmetrics.corrections import (  # noqa: E402
    CorrectionTree,
    build_corrections,
    calculate_decrease_by,
    merge_trees,
)
from textmetrics.model import AtRuleContext, CorrectionEntry, FontMetrics  # noqa: E402
from textmetrics.placeholders import (  # noqa: E402
    extract_at_rule_replacement,
    extract_declarations,
    extract_groups,
    extract_property,
    extract_value,
    has_group,
)
from textmetrics.stylesheet import ParseError, parse_stylesheet  # noqa: E402
from textmetrics.typography import TypographyParser, create_parser  # noqa: E402

__all__ = [
    "__version__",
    # entry point
    "TypographyParser",
    "create_parser",
    "ParserConfig",
    "load_metrics",
    # corrections
    "CorrectionTree",
    "CorrectionEntry",
    "AtRuleContext",
    "FontMetrics",
    "build_corrections",
    "calculate_decrease_by",
    "merge_trees",
    # stylesheet
    "parse_stylesheet",
    "ParseError",
    # placeholders
    "extract_declarations",
    "extract_property",
    "extract_value",
    "extract_groups",
    "has_group",
    "extract_at_rule_replacement",
]
