"""Sequence decoder.

This module provides the decode() function that converts a radix-64 symbol
string back to the original sequence of integers.
"""

from __future__ import annotations

import logging

from ..exceptions import TruncatedDataError
from .alphabet import unpack_symbols
from .bitpack import BitUnpacker
from .header import Header

logger = logging.getLogger(__name__)


def decode(text: str) -> list[int]:
    """Decode a symbol string produced by encode().

    Only the bits declared by the header (count x width) are read; trailing
    padding is ignored and never inspected.

    Args:
        text: Symbol string over ``A-Z a-z 0-9 + /``

    Returns:
        The original sequence, in order

    Raises:
        InvalidCharacterError: If a character is outside the alphabet
        InvalidWidthCodeError: If the header carries the reserved width code
        TruncatedDataError: If the string is too short for its header

    Examples:
        ```python
        from b64seq import decode

        decode("AA")  # []
        ```
    """
    unpacker = BitUnpacker(unpack_symbols(text))

    try:
        header = Header.read(unpacker)
    except IndexError as e:
        raise TruncatedDataError(f"Truncated data while decoding header: {e}") from e

    values: list[int] = []
    for index in range(header.count):
        try:
            values.append(unpacker.read_uint(header.width))
        except IndexError as e:
            raise TruncatedDataError(
                f"Truncated data while decoding element {index} of {header.count}: {e}"
            ) from e

    logger.debug(
        "decoded %d values at width %d, %d trailing bits ignored",
        header.count,
        header.width,
        unpacker.bits_remaining(),
    )
    return values


deserialize = decode
