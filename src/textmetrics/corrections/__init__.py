from textmetrics.corrections.builder import (
    DEFAULT_DOT_REPLACEMENT,
    build_corrections,
    corrections_for_stylesheet,
)
from textmetrics.corrections.calculator import calculate_decrease_by
from textmetrics.corrections.sources import CallableSource, LiteralSource, source_for
from textmetrics.corrections.tree import CorrectionTree, merge_trees

__all__ = [
    "DEFAULT_DOT_REPLACEMENT",
    "build_corrections",
    "corrections_for_stylesheet",
    "calculate_decrease_by",
    "CallableSource",
    "LiteralSource",
    "source_for",
    "CorrectionTree",
    "merge_trees",
]
