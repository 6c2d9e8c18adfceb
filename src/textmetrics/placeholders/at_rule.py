"""At-rule replacement lookup.

Given the raw text of an at-rule such as::

    @include adaptive-padding-margin(padding-top, $map, 0/*{0, .p1, l3}*/);
    @media (max-width: 1500px /*{1500px, 120, 12}*/

finds the argument or condition fragment that carries a correction group
(``0/*{0, .p1, l3}*/`` and ``1500px /*{1500px, 120, 12}*/`` above).
"""

from __future__ import annotations

from collections.abc import Iterator

from textmetrics.placeholders.groups import has_group

__all__ = ["extract_at_rule_replacement", "iter_at_rule_preludes"]

# Characters that open a new argument or condition segment.
_SEPARATORS = ",():"


def extract_at_rule_replacement(text: str) -> str | None:
    """Return the last segment of *text* that holds a correction group.

    The segment runs from the preceding top-level separator (``,``, ``(``,
    ``)`` or ``:``) to the end of the group, or of the comment wrapping it.
    Text that ends inside a comment is treated as if the comment were
    closed. Returns None when *text* has no correction group.
    """
    if not has_group(text):
        return None

    found: tuple[int, int] | None = None
    segment_start = 0
    depth = 0
    group_start = 0
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if depth == 0 and text.startswith("/*", index):
            close = text.find("*/", index + 2)
            interior_end = length if close == -1 else close
            end = length if close == -1 else close + 2
            if has_group(text[index + 2:interior_end]):
                found = (segment_start, end)
            index = end
            continue
        if char == "{":
            if depth == 0:
                group_start = index + 1
            depth += 1
        elif char == "}" and depth:
            depth -= 1
            if depth == 0 and text[group_start:index].strip():
                found = (segment_start, index + 1)
        elif depth == 0 and char in _SEPARATORS:
            segment_start = index + 1
        index += 1

    if found is None:
        return None
    start, end = found
    return text[start:end].strip() or None


def _prelude_end(text: str, start: int) -> int:
    depth = 0
    index = start
    length = len(text)
    while index < length:
        if text.startswith("/*", index):
            close = text.find("*/", index + 2)
            if close == -1:
                return length
            index = close + 2
            continue
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")" and depth:
            depth -= 1
        elif depth == 0 and char in ";{}":
            return index
        index += 1
    return length


def iter_at_rule_preludes(text: str) -> Iterator[str]:
    """Yield the text of each at-rule in *text*, from ``@`` up to its block or ``;``."""
    index = text.find("@")
    while index != -1:
        end = _prelude_end(text, index)
        prelude = text[index:end].strip()
        if len(prelude) > 1:
            yield prelude
        index = text.find("@", max(end, index + 1))
