"""Enumeration of sub-multisets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import product


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """Every distinct sub-multiset of nums.

    Values are grouped in order of first appearance; the first value's
    copy count changes slowest.
    """
    counts = Counter(nums)
    distinct = list(counts)
    return [
        [value for value, copies in zip(distinct, choice) for _ in range(copies)]
        for choice in product(*(range(counts[value] + 1) for value in distinct))
    ]