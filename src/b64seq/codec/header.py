"""Variable-length sequence header.

Layout (big-endian):

    [flag: 1 bit] [count: 6 bits if flag == 0, else 10 bits] [width code: 2 bits]

The short form is used when the count is below 64.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .bitpack import BitPacker, BitUnpacker
from .width import WIDTH_CODE_BITS, WidthRule, select_width, width_for_code

SHORT_COUNT_BITS = 6
LONG_COUNT_BITS = 10
MAX_COUNT = (1 << LONG_COUNT_BITS) - 1


class Header(BaseModel):
    """Decoded header fields of one encoded sequence."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0, le=MAX_COUNT)
    width: Literal[4, 7, 9]
    code: int = Field(ge=0, le=0b10)

    @classmethod
    def for_values(cls, values: list[int]) -> Header:
        """Build the header for an already validated sequence."""
        rule = select_width(values)
        return cls(count=len(values), width=rule.width, code=rule.code)

    @classmethod
    def from_rule(cls, count: int, rule: WidthRule) -> Header:
        return cls(count=count, width=rule.width, code=rule.code)

    @property
    def long_form(self) -> bool:
        """True when the count needs the 10-bit field."""
        return self.count >= 1 << SHORT_COUNT_BITS

    @property
    def count_bits(self) -> int:
        return LONG_COUNT_BITS if self.long_form else SHORT_COUNT_BITS

    def bit_length(self) -> int:
        """Size of the header in bits (9 or 13)."""
        return 1 + self.count_bits + WIDTH_CODE_BITS

    def write(self, packer: BitPacker) -> None:
        packer.write_bool(self.long_form)
        packer.write_uint(self.count, self.count_bits)
        packer.write_uint(self.code, WIDTH_CODE_BITS)

    @classmethod
    def read(cls, unpacker: BitUnpacker) -> Header:
        """Parse a header at the unpacker's cursor.

        Raises:
            InvalidWidthCodeError: If the width code is reserved
            IndexError: If the bits run out
        """
        long_form = unpacker.read_bool()
        count = unpacker.read_uint(LONG_COUNT_BITS if long_form else SHORT_COUNT_BITS)
        rule = width_for_code(unpacker.read_uint(WIDTH_CODE_BITS))
        return cls.from_rule(count, rule)
