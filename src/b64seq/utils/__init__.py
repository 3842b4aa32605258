"""Utility functions for b64seq.

This module provides size calculation and compression-ratio helpers.
"""

from __future__ import annotations

from .sizing import compression_ratio, encoded_bits, encoded_length, trivial_serialize

__all__ = [
    "encoded_bits",
    "encoded_length",
    "trivial_serialize",
    "compression_ratio",
]
