"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of a sequence
without actually encoding it, and to compare it with the plain comma-joined
decimal form.
"""

from __future__ import annotations

from typing import Sequence

from ..codec.alphabet import BITS_PER_SYMBOL
from ..codec.encoder import encode, validate_values
from ..codec.header import Header


def encoded_bits(values: Sequence[int]) -> int:
    """Calculate the unpadded size of an encoded sequence in bits.

    Accepts exactly the inputs encode() accepts.

    Args:
        values: Sequence to size

    Returns:
        Header bits plus count x width

    Raises:
        RangeError: If any element is outside [1, 300]
        SequenceTooLongError: If there are more than 1023 elements

    Example:
        >>> # 9-bit header + 3 x 4 bits
        >>> encoded_bits([1, 2, 3])
        21
    """
    items = list(values)
    validate_values(items)
    header = Header.for_values(items)
    return header.bit_length() + header.count * header.width


def encoded_length(values: Sequence[int]) -> int:
    """Calculate the number of symbols encode() will produce.

    Example:
        >>> encoded_length([1, 2, 3])
        4
    """
    return -(-encoded_bits(values) // BITS_PER_SYMBOL)


def trivial_serialize(values: Sequence[int]) -> str:
    """Return the comma-joined decimal form, e.g. ``"1,2,3"``."""
    return ",".join(str(value) for value in values)


def compression_ratio(values: Sequence[int]) -> float:
    """Ratio of encoded length to comma-joined decimal length.

    Lower is better. An empty sequence has an empty trivial form and
    reports a ratio of 0.0.

    Raises:
        RangeError: If any element is outside [1, 300]
    """
    trivial = trivial_serialize(values)
    if not trivial:
        return 0.0
    return len(encode(values)) / len(trivial)
