"""Bit-level packing and unpacking utilities.

This module provides low-level bit manipulation for the sequence codec.
All integers are written big-endian (most significant bit first).
"""

from __future__ import annotations


class BitPacker:
    """Packs values bit-by-bit into a bit buffer.

    This class maintains an internal bit buffer and provides methods to write
    individual bits and unsigned integers of arbitrary bit width. The buffer
    is rendered as a string of '0'/'1' characters for the symbol packer.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_bool(False)
        >>> packer.write_uint(3, num_bits=6)
        >>> packer.pad_to_multiple(6)
        >>> packer.to_bitstring()
        '000001100000'
    """

    def __init__(self) -> None:
        """Initialize an empty bit packer."""
        self._bits: list[int] = []  # List of 0s and 1s

    def write_bool(self, value: bool) -> None:
        """Write a boolean as a single bit.

        Args:
            value: Boolean value to write (True=1, False=0)
        """
        self._bits.append(1 if value else 0)

    def write_uint(self, value: int, num_bits: int) -> None:
        """Write an unsigned integer using the specified number of bits.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bits: Number of bits to use for encoding (1-64)

        Raises:
            ValueError: If value is negative or doesn't fit in num_bits
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        if num_bits < 1 or num_bits > 64:
            raise ValueError(f"num_bits must be 1-64, got {num_bits}")

        max_value = (1 << num_bits) - 1
        if value > max_value:
            raise ValueError(f"Value {value} requires more than {num_bits} bits (max: {max_value})")

        for i in range(num_bits - 1, -1, -1):
            self._bits.append((value >> i) & 1)

    def pad_to_multiple(self, multiple: int) -> int:
        """Append zero bits until the buffer length is a multiple of ``multiple``.

        An empty buffer stays empty.

        Args:
            multiple: Alignment in bits (e.g. 6 for radix-64 symbols)

        Returns:
            Number of padding bits appended
        """
        if multiple < 1:
            raise ValueError(f"multiple must be positive, got {multiple}")

        padding = (multiple - len(self._bits) % multiple) % multiple
        self._bits.extend([0] * padding)
        return padding

    def bit_length(self) -> int:
        """Return the current number of bits written.

        Returns:
            Number of bits in the buffer
        """
        return len(self._bits)

    def to_bitstring(self) -> str:
        """Render the bit buffer as a string of '0' and '1' characters."""
        return "".join("1" if bit else "0" for bit in self._bits)


class BitUnpacker:
    """Unpacks values bit-by-bit from a bit string.

    The reader keeps a cursor and never looks past what it is asked to read,
    so trailing padding is left untouched.

    Example:
        >>> unpacker = BitUnpacker("000001100000")
        >>> unpacker.read_bool()
        False
        >>> unpacker.read_uint(6)
        3
    """

    def __init__(self, bits: str) -> None:
        """Initialize a bit unpacker with the given bit string.

        Args:
            bits: String made of '0' and '1' characters

        Raises:
            ValueError: If the string contains any other character
        """
        self._bits: list[int] = []
        for ch in bits:
            if ch == "0":
                self._bits.append(0)
            elif ch == "1":
                self._bits.append(1)
            else:
                raise ValueError(f"Bit string may only contain '0' and '1', got {ch!r}")
        self._position = 0

    def read_bool(self) -> bool:
        """Read a single bit as a boolean.

        Returns:
            Boolean value (1=True, 0=False)

        Raises:
            IndexError: If no more bits are available
        """
        if self._position >= len(self._bits):
            raise IndexError("Attempted to read past end of bit buffer")

        value = self._bits[self._position] == 1
        self._position += 1
        return value

    def read_uint(self, num_bits: int) -> int:
        """Read an unsigned integer of the specified bit width.

        Args:
            num_bits: Number of bits to read (1-64)

        Returns:
            Unsigned integer value

        Raises:
            ValueError: If num_bits is out of range
            IndexError: If not enough bits are available
        """
        if num_bits < 1 or num_bits > 64:
            raise ValueError(f"num_bits must be 1-64, got {num_bits}")

        if self._position + num_bits > len(self._bits):
            raise IndexError(
                f"Not enough bits: need {num_bits}, have {len(self._bits) - self._position}"
            )

        value = 0
        for _ in range(num_bits):
            value = (value << 1) | self._bits[self._position]
            self._position += 1

        return value

    def bits_remaining(self) -> int:
        """Return the number of bits remaining in the buffer."""
        return len(self._bits) - self._position

    def position(self) -> int:
        """Return the current read position in bits."""
        return self._position
