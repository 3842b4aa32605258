"""Command implementations for the b64seq CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..codec import decode, encode
from ..harness import default_cases, run_report
from ..utils.sizing import trivial_serialize


def parse_values(text: str) -> list[int]:
    """Parse ``"1, 2,3"`` into a list of integers.

    An empty or blank string is the empty sequence.

    Raises:
        ValueError: If any item is not a decimal integer
    """
    if not text.strip():
        return []
    try:
        return [int(item) for item in text.split(",")]
    except ValueError as err:
        raise ValueError(f"Expected comma-separated integers, got {text!r}") from err


def encode_text(text: str) -> str:
    """Encode a comma-separated sequence to a symbol string."""
    return encode(parse_values(text))


def decode_text(text: str) -> str:
    """Decode a symbol string to a comma-separated sequence."""
    return trivial_serialize(decode(text.strip()))


def write_report(seed: Optional[int], output: Optional[Path] = None) -> bool:
    """Run the compression report to stdout or to a file.

    Args:
        seed: Seed for the random cases
        output: Destination file, or None for stdout

    Returns:
        True if every case round-tripped
    """
    cases = default_cases(seed)

    if output is None:
        results = run_report(cases)
    else:
        with output.open("w", encoding="utf-8") as handle:
            results = run_report(cases, sink=lambda line: handle.write(line + "\n"))
        print(f"Report written to {output}")

    return all(result.roundtrip_ok for result in results)
