"""Integer and floating-point puzzles."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def count_odds(low: int, high: int) -> int:
    """Number of odd integers in the closed range [low, high]."""
    span = high - low
    return -(-span // 2) + (high % 2) * (low % 2)


def maximum_score(a: int, b: int, c: int) -> int:
    """Most turns of taking one stone each from two different non-empty piles."""
    smallest, middle, largest = sorted((a, b, c))
    if largest >= smallest + middle:
        return smallest + middle
    return (a + b + c) // 2


def _digit_square_sum(n: int) -> int:
    return sum(int(d) ** 2 for d in str(n))


def is_happy(n: int) -> bool:
    """True if repeatedly summing squared digits of n reaches 1."""
    if n < 1:
        raise ValueError("n must be positive")
    while True:
        n = _digit_square_sum(n)
        if n == 4:
            return False
        if n == 1:
            return True


def my_pow(x: float, n: int) -> float:
    """x raised to the integer power n by repeated squaring."""
    if n == 0:
        return 1.0
    half_exponent = n // 2 if n >= 0 else -((-n) // 2)
    half = my_pow(x, half_exponent)
    if n % 2 == 0:
        return half * half
    if n > 0:
        return x * half * half
    return half * half / x


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of a 32-bit integer; 0 if the result overflows."""
    if not INT_MIN <= x <= INT_MAX:
        raise ValueError("x must fit in a signed 32-bit integer")
    magnitude = int(str(abs(x))[::-1])
    if magnitude > INT_MAX:
        return 0
    return -magnitude if x < 0 else magnitude


def is_palindrome_number(x: int) -> bool:
    """True if the decimal digits of x read the same backwards."""
    if x < 0:
        return False
    if x == 0:
        return True
    if x % 10 == 0:
        return False
    reversed_half = 0
    while x > reversed_half:
        reversed_half = reversed_half * 10 + x % 10
        x //= 10
    return x in (reversed_half, reversed_half // 10)