import pytest

from rustlings.exercises.people import (
    BadLenError,
    EmptyError,
    NoNameError,
    ParseIntError,
    Person,
    parse_person,
    person_from,
)


def test_default():
    dp = Person()
    assert dp.name == "John"
    assert dp.age == 30


def test_good_convert():
    p = person_from("Mark,20")
    assert p.name == "Mark"
    assert p.age == 20


@pytest.mark.parametrize("text", [
    "", "Mark,twenty", "Mark", "Mark,", ",1", ",", ",one", "Mike,32,", "Mike,32,man",
])
def test_bad_input_gives_default(text):
    p = person_from(text)
    assert p.name == "John"
    assert p.age == 30


def test_empty_input():
    with pytest.raises(EmptyError):
        parse_person("")


def test_good_input():
    p = parse_person("John,32")
    assert p.name == "John"
    assert p.age == 32


def test_missing_age():
    with pytest.raises(ParseIntError):
        parse_person("John,")


def test_invalid_age():
    with pytest.raises(ParseIntError, match="invalid digit found in string"):
        parse_person("John,twenty")


def test_missing_comma_and_age():
    with pytest.raises(BadLenError):
        parse_person("John")


def test_missing_name():
    with pytest.raises(NoNameError):
        parse_person(",1")


@pytest.mark.parametrize("text", [",", ",one"])
def test_missing_name_and_age(text):
    with pytest.raises((NoNameError, ParseIntError)):
        parse_person(text)


@pytest.mark.parametrize("text", ["John,32,", "John,32,man"])
def test_trailing_fields(text):
    with pytest.raises(BadLenError):
        parse_person(text)


def test_negative_age_is_rejected():
    with pytest.raises(ParseIntError):
        parse_person("John,-3")


def test_plus_sign_is_accepted():
    assert parse_person("John,+7") == Person("John", 7)