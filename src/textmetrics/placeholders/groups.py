"""Correction group lookup: ``{$p2, .p1, .bcaps}`` style placeholders."""

from __future__ import annotations

from textmetrics.placeholders.scanner import find_balanced_groups

__all__ = ["extract_groups", "has_group"]


def extract_groups(text: str) -> list[str]:
    """Return every correction group in *text*, in order of appearance.

    Each group is the raw interior of its braces with surrounding whitespace
    removed; groups made only of whitespace are dropped. Groups inside CSS
    comments are found as well.
    """
    if not text:
        return []
    return find_balanced_groups(text)


def has_group(text: str) -> bool:
    """Return True if *text* holds at least one non-empty correction group."""
    return bool(extract_groups(text))
