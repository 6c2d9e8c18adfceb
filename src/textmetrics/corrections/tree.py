"""Correction tree: target path -> list of corrections.

Merging is purely additive: entries under a shared path are concatenated in
input order and never replaced.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from textmetrics.model.correction import CorrectionEntry

__all__ = ["CorrectionTree", "merge_trees"]


class CorrectionTree(Mapping[str, tuple[CorrectionEntry, ...]]):
    """Read-only mapping from target path to its corrections.

    ``add`` and ``merge`` return new trees; a tree never changes after
    construction.
    """

    def __init__(
        self, entries: Mapping[str, Iterable[CorrectionEntry]] | None = None
    ) -> None:
        self._entries: dict[str, tuple[CorrectionEntry, ...]] = {}
        for path, items in (entries or {}).items():
            self._entries[path] = tuple(items)

    def __getitem__(self, path: str) -> tuple[CorrectionEntry, ...]:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CorrectionTree):
            return self._entries == other._entries
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CorrectionTree({self._entries!r})"

    def add(self, path: str, entry: CorrectionEntry) -> CorrectionTree:
        return self.merge(CorrectionTree({path: [entry]}))

    def merge(self, other: Mapping[str, Iterable[CorrectionEntry]]) -> CorrectionTree:
        """Return a tree holding this tree's entries followed by *other*'s."""
        merged: dict[str, list[CorrectionEntry]] = {
            path: list(items) for path, items in self._entries.items()
        }
        for path, items in other.items():
            merged.setdefault(path, []).extend(items)
        return CorrectionTree(merged)

    def entries(self) -> Iterator[tuple[str, CorrectionEntry]]:
        for path, items in self._entries.items():
            for entry in items:
                yield path, entry

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            path: [entry.to_dict() for entry in items]
            for path, items in self._entries.items()
        }


def merge_trees(trees: Iterable[Mapping[str, Iterable[CorrectionEntry]]]) -> CorrectionTree:
    """Merge *trees* left to right."""
    result = CorrectionTree()
    for tree in trees:
        result = result.merge(tree)
    return result
