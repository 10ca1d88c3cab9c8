import pytest

from minitasks.parsing import parse_char, parse_int


@pytest.mark.parametrize("text", ["42", "007", "1000"])
def test_parse_int_round_trips_digits(text):
    assert parse_int(text) == int(text)


@pytest.mark.parametrize("text", ["", "-5", "12a", " 3", "1.5", "\u0663"])
def test_parse_int_rejects_non_digits(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_int_error_message():
    with pytest.raises(ValueError) as info:
        parse_int("abc")
    assert str(info.value) == "abc:  Is not a valid int"


@pytest.mark.parametrize("text", ["y", "Y", "n"])
def test_parse_char_accepts_single_letter(text):
    assert parse_char(text) == text


@pytest.mark.parametrize("text", ["", "1", "yes", "?", "\u00e9"])
def test_parse_char_rejects_other_input(text):
    with pytest.raises(ValueError):
        parse_char(text)


def test_parse_char_error_message():
    with pytest.raises(ValueError) as info:
        parse_char("yes")
    assert str(info.value) == "yes:  Is not a valid char"