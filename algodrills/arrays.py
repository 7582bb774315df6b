"""Array problems: sliding windows, prefix sums, two pointers and friends."""

from __future__ import annotations

from collections import Counter
from typing import NamedTuple


def max_profit(prices: list[int]) -> int:
    """Best profit from one buy followed by one later sell (0 if none)."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


class _Run(NamedTuple):
    start: int
    end: int
    descending: bool


def candy(ratings: list[int]) -> int:
    """Minimum candies so that higher-rated neighbours get more."""
    if not ratings:
        raise ValueError("ratings must not be empty")
    padded = [*ratings, ratings[-1]]
    runs: list[_Run] = []
    descending = False
    left = 0
    for i, (current, following) in enumerate(zip(padded, padded[1:])):
        if current < following:
            if descending:
                descending = False
                runs.append(_Run(left, i, True))
                left = i + 1
        elif current > following:
            if left == i:
                descending = True
            elif not descending:
                runs.append(_Run(left, i, False))
                left = i + 1
        else:
            runs.append(_Run(left, i, descending))
            left = i + 1
            descending = False

    # A peak belongs to the longer of its two slopes.
    for i in range(len(runs) - 1):
        rising, falling = runs[i], runs[i + 1]
        if (
            not rising.descending
            and falling.descending
            and falling.end - falling.start >= rising.end - rising.start
            and padded[rising.end] != padded[falling.start]
        ):
            runs[i] = _Run(rising.start, rising.end - 1, False)
            runs[i + 1] = _Run(falling.start - 1, falling.end, True)

    first = runs[0]
    length = first.end - first.start + 1
    total = length * (length + 1) // 2
    for previous, run in zip(runs, runs[1:]):
        length = run.end - run.start + 1
        if (
            not run.descending
            and previous.descending
            and padded[run.start] != padded[previous.end]
        ):
            total += (length + 1) * (length + 2) // 2 - 1
        else:
            total += length * (length + 1) // 2
    return total


def shuffle(nums: list[int], n: int) -> list[int]:
    """Interleave [x1..xn, y1..yn] into [x1, y1, x2, y2, ...]."""
    if len(nums) != 2 * n:
        raise ValueError("nums must hold exactly 2 * n values")
    return [value for pair in zip(nums[:n], nums[n:]) for value in pair]


def min_operations(nums: list[int], x: int) -> int:
    """Fewest removals from either end whose values sum to x, or -1."""
    if not nums:
        raise ValueError("nums must not be empty")
    size = len(nums)
    if nums[0] == x:
        return 1
    total = sum(nums)
    if total == x:
        return size
    target = total - x
    if target < 0:
        return -1

    left = right = 0
    window = nums[0]
    longest = 0
    while left <= right + 1 and right <= size - 1:
        if window < target:
            right += 1
            if right < size:
                window += nums[right]
        elif window > target:
            window -= nums[left]
            left += 1
        else:
            longest = max(longest, right - left + 1)
            window -= nums[left]
            left += 1
            if left == right + 1:
                right += 1
                if right < size:
                    window += nums[right]
    return size - longest if longest else -1


def ways_to_make_fair(nums: list[int]) -> int:
    """Count indices whose removal leaves equal even- and odd-indexed sums."""
    if not nums:
        raise ValueError("nums must not be empty")
    n = len(nums)
    if n == 1:
        return 1
    even_sum = sum(nums[0::2])
    odd_sum = sum(nums[1::2])

    ways = 0
    if even_sum - nums[0] == odd_sum:
        ways += 1
    if n % 2 == 0:
        if odd_sum - nums[-1] == even_sum:
            ways += 1
    elif even_sum - nums[-1] == odd_sum:
        ways += 1

    cum_even = nums[0]
    cum_odd = 0
    for i, value in enumerate(nums[1:-1], start=1):
        if i % 2 == 0:
            cum_even += value
            new_even = (odd_sum - cum_odd) + (cum_even - value)
            new_odd = (even_sum - cum_even) + cum_odd
        else:
            cum_odd += value
            new_even = (odd_sum - cum_odd) + cum_even
            new_odd = (even_sum - cum_even) + (cum_odd - value)
        if new_even == new_odd:
            ways += 1
    return ways


def two_sum_sorted(numbers: list[int], target: int) -> tuple[int, int]:
    """1-based positions of two values of a sorted list that add up to target."""
    left, right = 0, len(numbers) - 1
    while left < right:
        pair = numbers[left] + numbers[right]
        if pair < target:
            left += 1
        elif pair > target:
            right -= 1
        else:
            break
    return left + 1, right + 1


def two_sum(nums: list[int], target: int) -> list[int]:
    """Indices [later, earlier] of two values adding up to target, or []."""
    seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [i, seen[complement]]
        seen[value] = i
    return []


def contains_duplicate(nums: list[int]) -> bool:
    """True if any value appears more than once."""
    return len(set(nums)) != len(nums)


def next_permutation(nums: list[int]) -> None:
    """Rearrange nums in place into the next lexicographic permutation."""
    for i in range(len(nums) - 1, 0, -1):
        pivot = nums[i - 1]
        if nums[i] > pivot:
            best = i
            for j in range(i + 1, len(nums)):
                if pivot < nums[j] < nums[best]:
                    best = j
            nums[i - 1], nums[best] = nums[best], nums[i - 1]
            nums[i:] = sorted(nums[i:])
            return
    nums.reverse()


def max_subarray(nums: list[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = running = nums[0]
    for value in nums[1:]:
        running = max(running + value, value)
        best = max(best, running)
    return best


def subarray_sum(arr: list[int], k: int) -> int:
    """Number of contiguous runs whose sum is k."""
    prefix_counts: Counter[int] = Counter({0: 1})
    running = 0
    count = 0
    for value in arr:
        running += value
        count += prefix_counts[running - k]
        prefix_counts[running] += 1
    return count


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits."""
    if not digits:
        raise ValueError("digits must not be empty")
    result = list(digits)
    for i in range(len(result) - 1, -1, -1):
        if result[i] != 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1, *result]


def binary_search(nums: list[int], target: int) -> int:
    """Index of target in a sorted list, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def total_fruit(fruits: list[int]) -> int:
    """Longest contiguous run holding at most two distinct values."""
    basket: Counter[int] = Counter()
    left = 0
    for fruit in fruits:
        basket[fruit] += 1
        if len(basket) > 2:
            dropped = fruits[left]
            basket[dropped] -= 1
            if basket[dropped] == 0:
                del basket[dropped]
            left += 1
    return len(fruits) - left