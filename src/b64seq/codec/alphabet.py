"""Radix-64 symbol mapping.

Each symbol stands for exactly 6 bits. The alphabet is the standard Base64
one (index 0 = 'A', index 63 = '/'), but there is no '=' padding: the bit
string is zero-padded to a multiple of 6 before packing.
"""

from __future__ import annotations

from ..exceptions import InvalidCharacterError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BITS_PER_SYMBOL = 6

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def pack_symbols(bits: str) -> str:
    """Map a padded bit string to alphabet symbols, 6 bits per symbol.

    Args:
        bits: String of '0'/'1' whose length is a multiple of 6

    Returns:
        Symbol string of len(bits) // 6 characters

    Raises:
        ValueError: If the bit string is not 6-bit aligned
    """
    if len(bits) % BITS_PER_SYMBOL:
        raise ValueError(f"Bit string length {len(bits)} is not a multiple of {BITS_PER_SYMBOL}")

    return "".join(
        ALPHABET[int(bits[i : i + BITS_PER_SYMBOL], 2)]
        for i in range(0, len(bits), BITS_PER_SYMBOL)
    )


def unpack_symbols(text: str) -> str:
    """Expand a symbol string back to its bit string.

    Args:
        text: Symbol string

    Returns:
        String of '0'/'1', six per input character

    Raises:
        InvalidCharacterError: On the first character outside the alphabet
    """
    chunks = []
    for position, ch in enumerate(text):
        index = _INDEX.get(ch)
        if index is None:
            raise InvalidCharacterError(ch, position)
        chunks.append(format(index, "06b"))
    return "".join(chunks)
