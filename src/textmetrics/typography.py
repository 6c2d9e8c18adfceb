"""Typography parser: raw CSS text in, correction tree out."""

from __future__ import annotations

from collections.abc import Iterable

from textmetrics.config import ParserConfig
from textmetrics.corrections.builder import build_corrections
from textmetrics.corrections.tree import CorrectionTree
from textmetrics.model.metrics import MetricsTable
from textmetrics.stylesheet.parser import parse_stylesheet

__all__ = ["TypographyParser", "create_parser"]


class TypographyParser:
    """Compute corrections for typography stylesheets with a fixed config.

    ``parse`` accepts one CSS text or several; the trees of several texts
    are merged in the given order.
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()

    def parse(self, css: str | Iterable[str], *, strict: bool = False) -> CorrectionTree:
        sources = [css] if isinstance(css, str) else list(css)
        stylesheets = [parse_stylesheet(source, strict=strict) for source in sources]
        return build_corrections(
            stylesheets, self.config.metrics, self.config.dot_replacement
        )

    __call__ = parse


def create_parser(
    dot_replacement: object = "", metrics: MetricsTable | None = None
) -> TypographyParser:
    return TypographyParser(ParserConfig.from_options(dot_replacement, metrics))
