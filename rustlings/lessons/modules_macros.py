"""Public items of modules, re-exported names and a macro with several arms."""

from __future__ import annotations

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

FRUIT = PEAR
VEGGIE = CUCUMBER


def make_sausage() -> str:
    """Return what the sausage factory produces."""
    return "sausage!"


def favorite_snacks() -> str:
    """Describe the favourite fruit and vegetable."""
    return f"favorite snacks: {FRUIT} and {VEGGIE}"


def my_macro(*args: object) -> str:
    """Produce the message for an empty call or for a call with one value."""
    match args:
        case ():
            return "Check out my macro!"
        case (value,):
            return f"Look at this other macro: {value}"
        case _:
            raise TypeError(f"my_macro takes at most one argument, got {len(args)}")


def hello(name: str) -> str:
    """Greet the given name."""
    return f"Hello {name}"