"""Sequence encoder.

This module provides the encode() function that packs a sequence of integers
in [1, 300] into a radix-64 symbol string.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..exceptions import RangeError, SequenceTooLongError
from .alphabet import BITS_PER_SYMBOL, pack_symbols
from .bitpack import BitPacker
from .header import MAX_COUNT, Header
from .width import MAX_VALUE, MIN_VALUE

logger = logging.getLogger(__name__)


def encode(values: Sequence[int]) -> str:
    """Encode a sequence of bounded integers to a symbol string.

    The whole sequence shares one element width chosen from its maximum
    (4, 7 or 9 bits). The output is the header, then every element in order,
    zero-padded to a multiple of 6 bits and mapped to the 64-symbol alphabet.

    Args:
        values: Integers in [1, 300], at most 1023 of them

    Returns:
        Symbol string over ``A-Z a-z 0-9 + /``

    Raises:
        RangeError: If any element is outside [1, 300] (nothing is encoded)
        SequenceTooLongError: If there are more than 1023 elements

    Examples:
        ```python
        from b64seq import decode, encode

        text = encode([1, 2, 3])
        assert decode(text) == [1, 2, 3]
        ```
    """
    items = list(values)
    validate_values(items)

    header = Header.for_values(items)

    packer = BitPacker()
    header.write(packer)
    for value in items:
        packer.write_uint(value, header.width)

    padding = packer.pad_to_multiple(BITS_PER_SYMBOL)
    logger.debug(
        "encoded %d values at width %d: %d bits + %d padding",
        header.count,
        header.width,
        packer.bit_length() - padding,
        padding,
    )

    return pack_symbols(packer.to_bitstring())


def validate_values(items: Sequence[int]) -> None:
    """Check every element before any bit is written.

    Raises:
        RangeError: On the first element outside [MIN_VALUE, MAX_VALUE]
        SequenceTooLongError: If the count does not fit the header
    """
    for index, value in enumerate(items):
        # bool is an int subclass but never a valid element
        if not isinstance(value, int) or isinstance(value, bool):
            raise RangeError(index, value, MIN_VALUE, MAX_VALUE)
        if value < MIN_VALUE or value > MAX_VALUE:
            raise RangeError(index, value, MIN_VALUE, MAX_VALUE)

    if len(items) > MAX_COUNT:
        raise SequenceTooLongError(len(items), MAX_COUNT)


serialize = encode
