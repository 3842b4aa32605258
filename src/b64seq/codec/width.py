"""Per-sequence bit width selection.

Every element of one encoded sequence uses the same width. The width is the
first rung of a fixed ladder whose limit exceeds the sequence maximum, and the
rung's 2-bit code is what the header stores.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

from ..exceptions import InvalidWidthCodeError, RangeError

MIN_VALUE = 1
MAX_VALUE = 300


class WidthRule(NamedTuple):
    """One rung of the width ladder.

    Attributes:
        limit: Exclusive upper bound on the sequence maximum
        width: Bits per element
        code: 2-bit header code
    """

    limit: int
    width: int
    code: int


WIDTH_LADDER: tuple[WidthRule, ...] = (
    WidthRule(limit=10, width=4, code=0b00),
    WidthRule(limit=100, width=7, code=0b01),
    WidthRule(limit=512, width=9, code=0b10),
)

WIDTH_CODE_BITS = 2

_RULES_BY_CODE = {rule.code: rule for rule in WIDTH_LADDER}


def select_width(values: Iterable[int]) -> WidthRule:
    """Choose the narrowest ladder rung able to hold every value.

    An empty sequence has no maximum and gets the first rung.

    Args:
        values: Sequence elements (already range-checked)

    Returns:
        The selected WidthRule

    Raises:
        RangeError: If the maximum exceeds the last rung
    """
    items = list(values)
    if not items:
        return WIDTH_LADDER[0]

    largest = max(items)
    for rule in WIDTH_LADDER:
        if largest < rule.limit:
            return rule

    raise RangeError(items.index(largest), largest, MIN_VALUE, MAX_VALUE)


def width_for_code(code: int) -> WidthRule:
    """Resolve a header width code to its ladder rung.

    Raises:
        InvalidWidthCodeError: If the code is not assigned (0b11)
    """
    try:
        return _RULES_BY_CODE[code]
    except KeyError as err:
        raise InvalidWidthCodeError(code) from err
