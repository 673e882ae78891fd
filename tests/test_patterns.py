import pytest

from strength_check.patterns import (
    PENALTY,
    REPEATED_MESSAGE,
    SEQUENCE_MESSAGE,
    YEAR_MESSAGE,
    embedded_year,
    predictable_sequence,
    repeated_characters,
)


@pytest.mark.parametrize("password", ["aaa", "xx111yy", "___", "Passsword", "ZZZZ"])
def test_repeated_run_of_three_word_characters(password):
    assert repeated_characters(password) == (PENALTY, REPEATED_MESSAGE)


@pytest.mark.parametrize("password", ["aa", "aAa", "!!!", "a a a", "abab"])
def test_no_repeated_run(password):
    assert repeated_characters(password) == (0, None)


@pytest.mark.parametrize("password", ["x1234x", "ABCD", "myQwErTy!", "abcdef"])
def test_predictable_sequences(password):
    assert predictable_sequence(password) == (PENALTY, SEQUENCE_MESSAGE)


@pytest.mark.parametrize("password", ["123", "abc", "qwert", "4321"])
def test_no_predictable_sequence(password):
    assert predictable_sequence(password) == (0, None)


@pytest.mark.parametrize("password", ["born1999", "2024!", "x20001", "1900"])
def test_embedded_years(password):
    assert embedded_year(password) == (PENALTY, YEAR_MESSAGE)


@pytest.mark.parametrize("password", ["1850", "2100", "19a9", "199"])
def test_no_embedded_year(password):
    assert embedded_year(password) == (0, None)
