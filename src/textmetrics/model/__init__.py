"""textmetrics model layer -- public type re-exports."""

from textmetrics.model.correction import AtRuleContext, CorrectionEntry
from textmetrics.model.metrics import FontMetrics, MetricsTable

__all__ = [
    # correction
    "AtRuleContext",
    "CorrectionEntry",
    # metrics
    "FontMetrics",
    "MetricsTable",
]
