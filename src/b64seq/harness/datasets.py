"""Canonical benchmark data sets.

These cover short sequences, random sequences of increasing length, and the
boundary cases for each element width.
"""

from __future__ import annotations

import random
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..codec.width import MAX_VALUE, MIN_VALUE


class SampleCase(BaseModel):
    """A named input sequence for the report harness."""

    model_config = ConfigDict(frozen=True)

    description: str
    data: list[int] = Field(default_factory=list)


def random_values(rng: random.Random, count: int) -> list[int]:
    """Draw ``count`` values uniformly from [1, 300]."""
    return [rng.randint(MIN_VALUE, MAX_VALUE) for _ in range(count)]


def default_cases(seed: Optional[int] = None) -> list[SampleCase]:
    """Build the standard set of benchmark cases.

    Args:
        seed: Seed for the random cases; None draws a fresh one

    Returns:
        Cases in report order
    """
    rng = random.Random(seed)

    cases = [
        SampleCase(description="Short: 1..3", data=[1, 2, 3]),
        SampleCase(description="Short: 1..9", data=list(range(1, 10))),
    ]
    for count in (50, 100, 500, 1000):
        cases.append(
            SampleCase(description=f"Random {count} values", data=random_values(rng, count))
        )

    cases.extend(
        [
            SampleCase(
                description="Boundary: one digit (1..9)",
                data=[(i % 9) + 1 for i in range(300)],
            ),
            SampleCase(
                description="Boundary: two digits (10..99)",
                data=[10 + (i % 90) for i in range(300)],
            ),
            SampleCase(
                description="Boundary: three digits (100..300)",
                data=[100 + (i % 201) for i in range(300)],
            ),
        ]
    )

    cases.append(
        SampleCase(
            description="Boundary: each of 1..300 three times (900 values)",
            data=[value for value in range(MIN_VALUE, MAX_VALUE + 1) for _ in range(3)],
        )
    )
    return cases
