"""Font metrics model: bounding-box measurements per font family."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# Keys written by the font measurement tool for each family.
ASCENT_KEY = "fontBoundingBoxAscent"
DESCENT_KEY = "fontBoundingBoxDescent"
HANGING_KEY = "hangingBaseline"

# Family name -> metrics record, literal correction, or correction callable.
MetricsTable = Mapping[str, Any]


def _number(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


@dataclass(frozen=True)
class FontMetrics:
    """Bounding-box metrics of one font family, in font units."""

    ascent: float = 0
    descent: float = 0
    hanging: float = 0

    @property
    def total_height(self) -> float:
        return self.ascent + self.descent

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FontMetrics:
        """Build from a measurement record; absent or non-numeric fields are 0."""
        return cls(
            ascent=_number(data.get(ASCENT_KEY)),
            descent=_number(data.get(DESCENT_KEY)),
            hanging=_number(data.get(HANGING_KEY)),
        )
