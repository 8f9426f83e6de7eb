"""Owned strings, string slices and the usual string conversions."""

from __future__ import annotations

COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """Return the current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Tell whether a word is one of the known colour words."""
    return attempt in COLOR_WORDS


def sample_strings() -> list[str]:
    """Build a set of strings, each made in a different common way."""
    return [
        "blue",
        str("red"),
        "".join(["h", "i"]),
        "rust is fun!"[:],
        "nice weather",
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]