"""Capitalising words, exact division and factorials with iterators."""

from __future__ import annotations

import math
from collections.abc import Iterable

_U64_MAX = 2**64 - 1


class DivisionError(ArithmeticError):
    """Raised when one number cannot be divided exactly by another."""


class NotDivisibleError(DivisionError):
    """Raised when the dividend is not a whole multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError, ZeroDivisionError):
    """Raised when the divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def capitalize_first(text: str) -> str:
    """Return the text with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalise the first character of every word."""
    return [capitalize_first(word) for word in words]


def capitalize_joined(words: Iterable[str]) -> str:
    """Capitalise every word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when ``a`` is a whole multiple of ``b``.

    Raises DivideByZeroError for a zero divisor and NotDivisibleError when
    the division leaves a remainder.
    """
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number exactly; the first failure is raised."""
    return [divide(number, divisor) for number in numbers]


def factorial(num: int) -> int:
    """Return ``num!`` as an unsigned 64-bit value.

    Raises ValueError for a negative number and OverflowError when the
    result does not fit in 64 bits.
    """
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"factorial of {num} does not fit in 64 bits")
    return result