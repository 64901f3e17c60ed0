# tests/test_alphabet.py
import string

import pytest

from alphabet import (
    DEFAULT_ALPHABET,
    DEFAULT_HASH_CONFIG,
    Alphabet,
    AlphabetError,
    EmptyPatternError,
    HashConfig,
    PatternError,
    PatternTooLongError,
    validate_inputs,
)


LOWERCASE_ALPHABET = Alphabet(string.ascii_lowercase)


def test_default_alphabet():
    assert DEFAULT_ALPHABET.size == 97
    assert "a" in DEFAULT_ALPHABET
    assert "~" in DEFAULT_ALPHABET
    assert "\r" in DEFAULT_ALPHABET and "\n" in DEFAULT_ALPHABET
    assert "\t" not in DEFAULT_ALPHABET
    assert DEFAULT_ALPHABET.delimiter not in DEFAULT_ALPHABET
    assert "ab" not in DEFAULT_ALPHABET


def test_invalid_symbols_sorted_and_unique():
    assert DEFAULT_ALPHABET.invalid_symbols("a\tb\t\0") == ["\0", "\t"]
    assert LOWERCASE_ALPHABET.invalid_symbols("abc") == []


@pytest.mark.parametrize("kwargs", [
    {"symbols": ""},
    {"symbols": "abc", "delimiter": "a"},
    {"symbols": "abc", "delimiter": ""},
    {"symbols": "abc", "delimiter": "##"},
])
def test_bad_alphabet_rejected(kwargs):
    with pytest.raises(ValueError):
        Alphabet(**kwargs)


def test_hash_config_defaults():
    assert DEFAULT_HASH_CONFIG.multiplier == 257
    assert DEFAULT_HASH_CONFIG.modulus == 1_000_000_007
    assert HashConfig(3, 7).inverse == 5


@pytest.mark.parametrize("multiplier, modulus", [(0, 7), (2, 1), (2, 4), (257, 257)])
def test_bad_hash_config_rejected(multiplier, modulus):
    with pytest.raises(ValueError):
        HashConfig(multiplier, modulus)


def test_validate_inputs_order():
    with pytest.raises(EmptyPatternError):
        validate_inputs("", "")
    with pytest.raises(PatternTooLongError, match="pattern longer than base"):
        validate_inputs("a\t", "abc")


def test_alphabet_error_details():
    with pytest.raises(AlphabetError) as excinfo:
        validate_inputs("ab\tc", "b")
    assert excinfo.value.label == "base"
    assert excinfo.value.symbols == ["\t"]

    with pytest.raises(AlphabetError) as excinfo:
        validate_inputs("abc", "\t")
    assert excinfo.value.label == "pattern"


def test_errors_are_value_errors():
    for error in (EmptyPatternError, PatternTooLongError, AlphabetError):
        assert issubclass(error, PatternError)
        assert issubclass(error, ValueError)
