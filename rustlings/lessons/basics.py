"""Variables, functions, conditionals and primitive types."""

from __future__ import annotations

from collections.abc import Sequence

_BULK_THRESHOLD = 40
_BULK_PRICE = 1
_REGULAR_PRICE = 2
_TEN = 10


def calculate_price(num_of_apples: int) -> int:
    """Price of an apple order: 2 each, or 1 each when buying more than 40."""
    apple_cost = _BULK_PRICE if num_of_apples > _BULK_THRESHOLD else _REGULAR_PRICE
    return apple_cost * num_of_apples


def times_two(num: int) -> int:
    """Return twice the given number."""
    return num * 2


def is_even(num: int) -> bool:
    """Tell whether a number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Sale price: 10 off an even price, 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the square of a number."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def call_me(num: int) -> list[str]:
    """Return one ring message for each of ``num`` calls."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def ten_check(x: int) -> str:
    """Say whether a value is ten: ``Ten!`` or ``Not ten!``."""
    negation = "" if x == _TEN else "not "
    return f"{negation}ten!".capitalize()


def greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """Return the greetings that suit the time of day."""
    messages = []
    if is_morning:
        messages.append("Good morning!")
    if is_evening:
        messages.append("Good evening!")
    return messages


def classify_character(character: str) -> str:
    """Describe a single character as alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(values: Sequence[object]) -> str:
    """Comment on whether a sequence holds at least 100 elements."""
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def slice_message(values: Sequence[int]) -> str:
    """Take the elements at positions 1 to 3 and check that they are 2, 3, 4."""
    nice_slice = list(values[1:4])
    if nice_slice == [2, 3, 4]:
        return "Nice slice!"
    return f"Not quite what I was expecting... I see: {nice_slice}"


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a cat given as a ``(name, age)`` pair."""
    name, age = cat
    return f"{name} is {age} years old."


def second_number(numbers: Sequence[int]) -> int:
    """Return the second element of a sequence."""
    return numbers[1]


def main() -> None:
    """Print the output of each of the basic lessons."""
    x = 5
    print(f"x has the value {x}")
    print(ten_check(0))
    for value in (3, 5):
        print(f"Number {value}")
    print("Number 0")

    for line in call_me(3):
        print(line)
    for line in call_me(10):
        print(line)
    print(f"Your sale price is {sale_price(51)}")
    print(f"The answer is {square(3)}")

    for line in greetings(True, False):
        print(line)
    print(classify_character("C"))
    print(classify_character("A"))
    print(array_size_message([1] * 100))
    print(slice_message([1, 2, 3, 4, 5]))
    print(describe_cat(("Furry McFurson", 3.5)))
    print(f"The second number is {second_number((1, 2, 3))}")