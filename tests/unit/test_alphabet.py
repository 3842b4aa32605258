"""Unit tests for the radix-64 symbol mapping."""

from __future__ import annotations

import pytest

from b64seq.codec.alphabet import ALPHABET, pack_symbols, unpack_symbols
from b64seq.exceptions import DecodeError, InvalidCharacterError


def test_alphabet_layout() -> None:
    """Test alphabet size and ordering."""
    assert len(ALPHABET) == 64
    assert len(set(ALPHABET)) == 64
    assert ALPHABET[0] == "A"
    assert ALPHABET[26] == "a"
    assert ALPHABET[52] == "0"
    assert ALPHABET[63] == "/"


def test_pack_symbols() -> None:
    """Test chunk-to-symbol mapping."""
    assert pack_symbols("000000" "000001" "111111") == "AB/"
    assert pack_symbols("") == ""


def test_pack_requires_alignment() -> None:
    """Test that unaligned bit strings are rejected."""
    with pytest.raises(ValueError, match="multiple of 6"):
        pack_symbols("0000000")


def test_unpack_symbols() -> None:
    """Test symbol-to-chunk expansion."""
    assert unpack_symbols("AB/") == "000000" "000001" "111111"
    assert unpack_symbols("+") == "111110"


def test_case_sensitive() -> None:
    """Test that upper and lower case map to different chunks."""
    assert unpack_symbols("a") != unpack_symbols("A")


@pytest.mark.parametrize("text, bad, position", [("#", "#", 0), ("AB=", "=", 2), ("A B", " ", 1)])
def test_invalid_character(text: str, bad: str, position: int) -> None:
    """Test that the first foreign character is reported."""
    with pytest.raises(InvalidCharacterError) as excinfo:
        unpack_symbols(text)

    assert excinfo.value.character == bad
    assert excinfo.value.position == position
    assert isinstance(excinfo.value, DecodeError)
