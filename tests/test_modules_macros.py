import pytest

from rustlings.lessons.modules_macros import (
    CUCUMBER,
    FRUIT,
    PEAR,
    VEGGIE,
    favorite_snacks,
    hello,
    make_sausage,
    my_macro,
)


def test_make_sausage():
    assert make_sausage() == "sausage!"


def test_reexported_names_point_at_inner_constants():
    assert FRUIT == PEAR == "Pear"
    assert VEGGIE == CUCUMBER == "Cucumber"
    assert favorite_snacks() == "favorite snacks: Pear and Cucumber"


def test_favorite_snacks_mentions_both():
    text = favorite_snacks()
    assert text.startswith("favorite snacks: ")
    assert FRUIT in text
    assert VEGGIE in text
    assert text.index(FRUIT) < text.index(VEGGIE)


def test_macro_without_arguments():
    assert my_macro() == "Check out my macro!"


def test_macro_with_one_argument():
    assert my_macro(7777).endswith("7777")
    assert my_macro(7777).startswith("Look at this other macro: ")


def test_macro_with_too_many_arguments():
    with pytest.raises(TypeError):
        my_macro(1, 2)


def test_hello_world():
    assert hello("world!") == "Hello world!"