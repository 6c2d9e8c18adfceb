"""Diacritic overshoot estimate from font bounding-box metrics."""

from __future__ import annotations

import math

from textmetrics.corrections.numbers import round_fixed
from textmetrics.model.metrics import FontMetrics

__all__ = ["calculate_decrease_by", "decrease_by_for_metrics"]


def calculate_decrease_by(
    font_size: float, ascent: float = 0, descent: float = 0, hanging: float = 0
) -> int:
    """Return the pixel amount taken up by diacritics above the hanging baseline.

    The share of the bounding box outside the hanging baseline is halved,
    rounded to three decimals and applied to *font_size*. Metrics with no
    total height give 0.
    """
    total_height = ascent + descent
    if total_height == 0:
        return 0
    fraction = round_fixed((total_height - abs(hanging)) / total_height / 2, 3)
    return math.floor(font_size * fraction)


def decrease_by_for_metrics(font_size: float, metrics: FontMetrics) -> int:
    return calculate_decrease_by(
        font_size,
        ascent=metrics.ascent,
        descent=metrics.descent,
        hanging=metrics.hanging,
    )
