"""Correction model: the per-selector vertical correction record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _json_number(value: float) -> float | int:
    """Return whole-valued floats as ints, so ``4.0`` serializes as ``4``."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class AtRuleContext:
    """Enclosing at-rule of a corrected rule, e.g. ``media`` / ``(max-width: 1499px)``."""

    name: str
    params: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "params": self.params}


@dataclass(frozen=True)
class CorrectionEntry:
    """A single correction for one target selector.

    Attributes:
        at_rule: Enclosing at-rule, or None for top-level rules.
        selector: Ancestor selectors of the target, e.g. ``.lang-ko .template``;
            empty when the target stands alone.
        class_name: The target selector component, e.g. ``.p1``.
        base_delta: Half the line-height / font-size difference.
        decrease_by: Metric driven adjustment added to ``base_delta``.
        delta: Final correction, ``base_delta + decrease_by`` to one decimal.
        font_size: Font size in whole pixels.
        line_height: Line height in whole pixels.
    """

    at_rule: AtRuleContext | None
    selector: str
    class_name: str
    base_delta: float
    decrease_by: float
    delta: float
    font_size: int
    line_height: int

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping consumed by the rewriting plugin."""
        return {
            "atRule": self.at_rule.to_dict() if self.at_rule else None,
            "selector": self.selector,
            "className": self.class_name,
            "delta": _json_number(self.delta),
            "baseDelta": _json_number(self.base_delta),
            "decreaseBy": _json_number(self.decrease_by),
            "fontSize": self.font_size,
            "lineHeight": self.line_height,
        }
