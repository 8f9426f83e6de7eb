"""A classic struct, a tuple struct and a unit struct."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    """A colour with named fields."""

    hex: str
    name: str


class ColorTupleStruct(NamedTuple):
    """A colour whose fields are reached by position."""

    name: str
    hex: str


@dataclass(frozen=True, repr=False)
class UnitStruct:
    """A struct with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"