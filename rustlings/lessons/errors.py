"""Reporting failures: error messages, parse errors and validated values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import IO, AnyStr

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

_I32_RANGE = (-(2**31), 2**31 - 1)
_I64_RANGE = (-(2**63), 2**63 - 1)

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a decimal integer strictly, within the given inclusive bounds."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    low, high = bounds
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens due for a typed-in quantity: 5 per item plus a fee of 1.

    Raises ValueError when the quantity is not a whole number.
    """
    qty = _parse_int(item_quantity, _I32_RANGE)
    return qty * _COST_PER_ITEM + _PROCESSING_FEE


def purchase(tokens: int, item_quantity: str) -> str:
    """Try to buy items with the given tokens and describe the outcome."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


def pop_too_much() -> bool:
    """Pop from a one-element list twice, coping with the empty second pop."""
    items = [3]
    last = items.pop() if items else None
    if last is not None:
        print(f"The last item in the list is {last!r}")
    second_to_last = items.pop() if items else None
    if second_to_last is None:
        print("There is no second-to-last item in the list")
    else:
        print(f"The second-to-last item in the list is {second_to_last!r}")
    return True


class CreationError(Enum):
    """Why a value cannot be a positive non-zero integer."""

    NEGATIVE = "Negative"
    ZERO = "Zero"

    def __str__(self) -> str:
        return self.value


class PositiveIntegerError(ValueError):
    """Raised when a positive non-zero integer is built from a bad value."""

    def __init__(self, kind: CreationError) -> None:
        super().__init__(str(kind))
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise PositiveIntegerError(CreationError.ZERO)
        if self.value < 0:
            raise PositiveIntegerError(CreationError.NEGATIVE)


def read_and_validate(stream: IO[AnyStr]) -> PositiveNonzeroInteger:
    """Read one line from a stream and turn it into a positive integer.

    Errors from reading propagate as they are; a line that is not a number
    raises ValueError, and a number that is not positive raises
    PositiveIntegerError.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    number = _parse_int(line.strip(), _I64_RANGE)
    return PositiveNonzeroInteger(number)