"""Exception hierarchy for b64seq.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from B64SeqError for easy catching of any b64seq-specific error.
"""

from __future__ import annotations


class B64SeqError(Exception):
    """Base exception for all b64seq errors."""

    pass


class EncodeError(B64SeqError):
    """Raised when a sequence cannot be encoded.

    Examples:
        - Element outside the supported value range
        - Sequence longer than the header can describe
    """

    pass


class RangeError(EncodeError):
    """Raised when a sequence element lies outside [1, 300].

    The whole sequence is rejected; nothing is encoded.

    Attributes:
        index: Position of the offending element
        value: The offending element
    """

    def __init__(self, index: int, value: object, low: int, high: int) -> None:
        self.index = index
        self.value = value
        super().__init__(f"Element {index}: value {value!r} out of bounds [{low}, {high}]")


class SequenceTooLongError(EncodeError):
    """Raised when the element count does not fit the 10-bit length field."""

    def __init__(self, count: int, max_count: int) -> None:
        self.count = count
        super().__init__(f"Sequence has {count} elements, header supports at most {max_count}")


class DecodeError(B64SeqError):
    """Raised when decoding a symbol string fails.

    Examples:
        - Character outside the 64-symbol alphabet
        - Reserved width code in the header
        - Truncated data (fewer bits than the header declares)
    """

    pass


class InvalidCharacterError(DecodeError):
    """Raised when a symbol string contains a character outside the alphabet.

    Attributes:
        character: The offending character
        position: Its index in the symbol string
    """

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(f"Invalid character {character!r} at position {position}")


class InvalidWidthCodeError(DecodeError):
    """Raised when a header carries the reserved width code (0b11)."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Invalid width code {code:02b}")


class TruncatedDataError(DecodeError):
    """Raised when the symbol string holds fewer bits than its header declares."""

    pass
