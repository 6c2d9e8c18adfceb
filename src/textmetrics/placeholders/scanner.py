"""Single-pass text scanners for correction groups and statement boundaries."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["find_balanced_groups", "find_statement_end", "iter_group_spans"]


def iter_group_spans(text: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` of every top-level ``{...}`` interior in *text*.

    ``text[start:end]`` is the raw content between the outermost braces.
    Stray closing braces are ignored and an unclosed group is never yielded.
    """
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if char == "{":
            if depth == 0:
                start = index + 1
            depth += 1
        elif char == "}" and depth:
            depth -= 1
            if depth == 0:
                yield start, index


def find_balanced_groups(text: str) -> list[str]:
    """Return the trimmed interior of each non-empty top-level brace group."""
    groups: list[str] = []
    for start, end in iter_group_spans(text):
        content = text[start:end].strip()
        if content:
            groups.append(content)
    return groups


def find_statement_end(text: str, start: int = 0) -> int | None:
    """Return the index of the first statement-terminating ``;`` at or after *start*.

    Semicolons inside braces, parentheses, ``/* */`` comments and quoted
    strings do not terminate. Returns None when the text, or the block
    enclosing *start*, ends first.
    """
    depth = 0
    quote = ""
    index = start
    length = len(text)
    while index < length:
        char = text[index]
        if quote:
            if char == "\\":
                index += 1
            elif char == quote:
                quote = ""
        elif text.startswith("/*", index):
            close = text.find("*/", index + 2)
            if close == -1:
                return None
            index = close + 1
        elif char in ("'", '"'):
            quote = char
        elif char in "{(":
            depth += 1
        elif char in "})":
            if depth == 0:
                return None
            depth -= 1
        elif char == ";" and depth == 0:
            return index
        index += 1
    return None
