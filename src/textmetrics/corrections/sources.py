"""Correction sources: where a family's extra ``decrease_by`` amount comes from.

A metrics table value is turned into one of two source kinds:

    - ``LiteralSource``: a fixed amount given as a number or string (read as a
      leading base-10 integer), or computed from a metrics record.
    - ``CallableSource``: a function called with ``(font_size, line_height)``.

Either kind resolves to a finite number rounded to two decimals, or None
when the source produced nothing usable.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Union

from textmetrics.corrections.calculator import decrease_by_for_metrics
from textmetrics.corrections.numbers import is_finite_number, parse_int, round_fixed
from textmetrics.model.metrics import FontMetrics

__all__ = ["CallableSource", "CorrectionSource", "LiteralSource", "source_for"]


def _accept(value: object) -> float | None:
    if not is_finite_number(value):
        return None
    return round_fixed(value, 2)  # type: ignore[arg-type]


@dataclass(frozen=True)
class LiteralSource:
    value: int | float | str

    def resolve(self, font_size: int, line_height: int) -> float | None:
        return _accept(parse_int(self.value))


@dataclass(frozen=True)
class CallableSource:
    func: Callable[[int, int], object]

    def resolve(self, font_size: int, line_height: int) -> float | None:
        return _accept(self.func(font_size, line_height))


CorrectionSource = Union[LiteralSource, CallableSource]


def source_for(value: object, font_size: int) -> CorrectionSource | None:
    """Return the correction source described by a metrics table *value*.

    Metrics records (``FontMetrics`` or a mapping of measurement keys) are
    evaluated for *font_size* right away. Returns None for values of any
    other type.
    """
    if isinstance(value, FontMetrics):
        return LiteralSource(decrease_by_for_metrics(font_size, value))
    if isinstance(value, Mapping):
        metrics = FontMetrics.from_mapping(value)
        return LiteralSource(decrease_by_for_metrics(font_size, metrics))
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, str)):
        return LiteralSource(value)
    if callable(value):
        return CallableSource(value)
    return None
