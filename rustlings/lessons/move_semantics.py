"""Handing a vector to a function and getting a filled one back."""

from __future__ import annotations

from collections.abc import Iterable

_FILL_VALUES = (22, 44, 66)


def fill_vec(vec: Iterable[int] = ()) -> list[int]:
    """Return a new list holding the given values followed by 22, 44 and 66.

    The argument is left untouched; with no argument a fresh list is filled.
    """
    return [*vec, *_FILL_VALUES]


def describe_vec(name: str, vec: list[int]) -> str:
    """Describe a vector by name, length and content."""
    return f"{name} has length {len(vec)} content `{list(vec)!r}`"