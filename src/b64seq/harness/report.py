"""Compression report over a set of sample cases.

The report is written line by line to a caller-supplied sink, so the codec
and whoever runs the report share no output state.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from pydantic import BaseModel, ConfigDict

from ..codec import decode, encode
from ..utils.sizing import compression_ratio, trivial_serialize
from .datasets import SampleCase

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]

PREVIEW_CHARS = 60


class CaseResult(BaseModel):
    """Outcome of encoding and decoding one sample case."""

    model_config = ConfigDict(frozen=True)

    description: str
    count: int
    trivial_length: int
    encoded: str
    ratio: float
    roundtrip_ok: bool

    @property
    def encoded_length(self) -> int:
        return len(self.encoded)


def evaluate_case(case: SampleCase) -> CaseResult:
    """Encode, decode and measure one case.

    Raises:
        EncodeError: If the case data cannot be encoded
    """
    encoded = encode(case.data)
    decoded = decode(encoded)
    return CaseResult(
        description=case.description,
        count=len(case.data),
        trivial_length=len(trivial_serialize(case.data)),
        encoded=encoded,
        ratio=compression_ratio(case.data),
        roundtrip_ok=decoded == case.data,
    )


def _preview(text: str) -> str:
    if len(text) > PREVIEW_CHARS:
        return text[:PREVIEW_CHARS] + "..."
    return text


def run_report(cases: Iterable[SampleCase], sink: Sink = print) -> list[CaseResult]:
    """Evaluate every case and write a human-readable report to ``sink``.

    Args:
        cases: Cases to evaluate, in report order
        sink: Callable receiving one line of text per call

    Returns:
        One CaseResult per case
    """
    results = []
    for case in cases:
        result = evaluate_case(case)
        results.append(result)
        logger.debug("case %r: ratio %.3f", case.description, result.ratio)

        sink(f"Test: {result.description}")
        sink(f"Trivial: {_preview(trivial_serialize(case.data))}")
        sink(f"Encoded: {result.encoded}")
        sink(f"Compression ratio: {result.ratio:.3f}")
        sink(f"Round-trip OK: {'yes' if result.roundtrip_ok else 'no'}")
        sink("-" * 54)

    failed = [r.description for r in results if not r.roundtrip_ok]
    if failed:
        logger.warning("round-trip mismatch in %d case(s): %s", len(failed), ", ".join(failed))
    return results
