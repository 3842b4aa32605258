"""Compact radix-64 codec for b64seq.

This module provides encoding and decoding of bounded integer sequences
to and from strings over a 64-symbol alphabet.
"""

from __future__ import annotations

from .alphabet import ALPHABET
from .decoder import decode, deserialize
from .encoder import encode, serialize
from .header import Header
from .width import WIDTH_LADDER, WidthRule, select_width

__all__ = [
    "encode",
    "decode",
    "serialize",
    "deserialize",
    "ALPHABET",
    "Header",
    "WIDTH_LADDER",
    "WidthRule",
    "select_width",
]
