"""b64seq: compact radix-64 codec for bounded integer sequences

Packs an ordered sequence of integers in [1, 300] into a short string over the
64-symbol alphabet ``A-Z a-z 0-9 + /`` and reverses the transform exactly.

Key Features:
- One element width per sequence (4, 7 or 9 bits), chosen from its maximum
- Variable-length header (9 or 13 bits) carrying count and width
- Printable output, safe for text channels
- Pure Python implementation

Quick Start:
    >>> from b64seq import encode, decode
    >>>
    >>> text = encode([1, 2, 3])
    >>> text
    'BgkY'
    >>> decode(text)
    [1, 2, 3]
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import ALPHABET, Header, decode, deserialize, encode, serialize
from .exceptions import (
    B64SeqError,
    DecodeError,
    EncodeError,
    InvalidCharacterError,
    InvalidWidthCodeError,
    RangeError,
    SequenceTooLongError,
    TruncatedDataError,
)
from .utils import compression_ratio, encoded_bits, encoded_length, trivial_serialize

__all__ = [
    # Core API
    "encode",
    "decode",
    "serialize",
    "deserialize",
    "ALPHABET",
    "Header",
    # Exceptions
    "B64SeqError",
    "EncodeError",
    "DecodeError",
    "RangeError",
    "SequenceTooLongError",
    "InvalidCharacterError",
    "InvalidWidthCodeError",
    "TruncatedDataError",
    # Sizing
    "encoded_bits",
    "encoded_length",
    "trivial_serialize",
    "compression_ratio",
    # Version
    "__version__",
]
