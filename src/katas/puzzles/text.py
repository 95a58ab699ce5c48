"""String puzzles: character counting, reversal, brackets and paths."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

# closing bracket -> opening bracket
_BRACKET_PAIRS = {"]": "[", ")": "(", "}": "{", ">": "<"}
_OPENING = frozenset(_BRACKET_PAIRS.values())


def find_first_single_char(text: str) -> str | None:
    """Return the first character that occurs exactly once in *text*, else None."""
    counts = Counter(text)
    for ch in text:
        if counts[ch] == 1:
            return ch
    return None


def get_interval_string(
    a: float, b: float, start_included: bool, end_included: bool
) -> str:
    """Format the interval between *a* and *b*, smaller bound first.

    Examples: ``(0, 1, True, False) -> "[0, 1)"``, ``(5, 3, True, True) -> "[3, 5]"``.
    """
    start, end = (b, a) if b < a else (a, b)
    open_bracket = "[" if start_included else "("
    close_bracket = "]" if end_included else ")"
    return f"{open_bracket}{start}, {end}{close_bracket}"


def reverse_string(text: str) -> str:
    return text[::-1]


def is_brackets_balanced(text: str) -> bool:
    """True if *text* consists only of correctly nested [] () {} <> pairs."""
    stack: list[str] = []
    for ch in text:
        if ch in _OPENING:
            stack.append(ch)
            continue
        expected = _BRACKET_PAIRS.get(ch)
        if expected is None or not stack or stack.pop() != expected:
            return False
    return not stack


def get_common_directory_path(paths: Sequence[str]) -> str:
    """Return the longest directory shared by all *paths*, with a trailing '/'.

    Returns '' when the paths share no leading directory (or *paths* is empty).
    """
    if not paths:
        return ""

    split_paths = [p.split("/") for p in paths]
    first = split_paths[0]
    common: list[str] = []
    # the last component of each path is a file name, never a directory
    for i, component in enumerate(first[:-1]):
        if all(len(p) > i and p[i] == component for p in split_paths):
            common.append(component)
        else:
            break
    return "/".join(common) + "/" if common else ""
