"""Least number of perfect squares summing to a number, and grouping by it."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto
from math import isqrt


class NegativeTreatment(Enum):
    """How classify_by_square_count deals with negative values."""

    IGNORE_SIGN = auto()
    DISCARD = auto()
    TREAT_AS_ZERO = auto()
    REPORT_ERROR = auto()


def is_square(n: int) -> bool:
    """True if n is a perfect square."""
    return n >= 0 and isqrt(n) ** 2 == n


def _two_squares(n: int) -> bool:
    return any(is_square(n - i * i) for i in range(isqrt(n) + 1))


def _three_squares(n: int) -> bool:
    while n % 4 == 0:
        n //= 4
    return n % 8 != 7


def square_count(n: int) -> int:
    """Fewest positive squares that add up to n (0 for n == 0)."""
    if n < 0:
        raise ValueError("number must be non-negative")
    if n == 0:
        return 0
    if is_square(n):
        return 1
    if _two_squares(n):
        return 2
    if _three_squares(n):
        return 3
    return 4


def classify_by_square_count(
    values: Iterable[int], treatment: NegativeTreatment
) -> tuple[list[int], list[int], list[int], list[int], list[int]]:
    """Sort values into five buckets indexed by their square count.

    Negative values are kept as given but classified according to treatment.
    """
    buckets: tuple[list[int], list[int], list[int], list[int], list[int]] = (
        [], [], [], [], [],
    )
    for value in values:
        probe = value
        if value < 0:
            if treatment is NegativeTreatment.DISCARD:
                continue
            if treatment is NegativeTreatment.IGNORE_SIGN:
                probe = -value
            elif treatment is NegativeTreatment.TREAT_AS_ZERO:
                probe = 0
            else:
                raise ValueError("negative numbers cannot be classified")
        buckets[square_count(probe)].append(value)
    return buckets