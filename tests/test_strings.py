import pytest

from rustlings.lessons.strings import (
    current_favorite_color,
    is_a_color_word,
    sample_strings,
)


def test_current_favorite_color_is_blue():
    assert current_favorite_color() == "blue"


def test_favorite_color_is_a_color_word():
    assert is_a_color_word(current_favorite_color())


@pytest.mark.parametrize("word", ["green", "blue", "red"])
def test_known_color_words(word):
    assert is_a_color_word(word) is True


@pytest.mark.parametrize("word", ["Green", "yellow", "", " red"])
def test_unknown_color_words(word):
    assert is_a_color_word(word) is False


def test_sample_strings_keeps_plain_literals():
    values = sample_strings()
    assert values[0] == "blue"
    assert "red" in values
    assert "rust is fun!" in values
    assert "nice weather" in values


def test_sample_strings_are_trimmed():
    assert all(value == value.strip() for value in sample_strings())


def test_sample_strings_conversions():
    values = sample_strings()
    assert "Interpolation Station" in values
    assert "Happy Tuesday!" in values
    assert values[-1] == values[-1].lower()