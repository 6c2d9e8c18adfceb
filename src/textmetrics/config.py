from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from textmetrics.corrections.builder import DEFAULT_DOT_REPLACEMENT
from textmetrics.model.metrics import MetricsTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserConfig:
    dot_replacement: str = DEFAULT_DOT_REPLACEMENT
    metrics: MetricsTable = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.dot_replacement or self.dot_replacement == ".":
            raise ValueError("dot_replacement must be a non-empty string other than '.'")

    @classmethod
    def from_options(
        cls, dot_replacement: object = "", metrics: MetricsTable | None = None
    ) -> ParserConfig:
        """Build a config from loosely typed options.

        An empty or non-string *dot_replacement*, or a plain ``.``, falls back
        to ``%dot%``.
        """
        if (
            not isinstance(dot_replacement, str)
            or not dot_replacement
            or dot_replacement == "."
        ):
            dot_replacement = DEFAULT_DOT_REPLACEMENT
        return cls(dot_replacement=dot_replacement, metrics=dict(metrics or {}))


def load_metrics(path: str | Path) -> dict[str, Any]:
    """Load a font metrics table from a JSON file.

    Accepts the bare ``{family: {...}}`` table or the measurement tool's
    ``{"metrics": {...}}`` envelope. Any failure is logged and gives an
    empty table.
    """
    metrics_path = Path(path)
    try:
        data = json.loads(metrics_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("Font metrics file %s not found, using empty metrics", metrics_path)
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Could not read font metrics from %s: %s", metrics_path, exc)
        return {}

    if isinstance(data, dict) and isinstance(data.get("metrics"), dict):
        data = data["metrics"]
    if not isinstance(data, dict):
        logger.warning("Font metrics in %s must be a JSON object, using empty metrics", metrics_path)
        return {}
    return data
