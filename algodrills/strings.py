"""String problems: palindromes, brackets, anagrams and substring searches."""

from __future__ import annotations

from collections import Counter

_BRACKETS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_BRACKETS.values())


def is_palindrome(s: str) -> bool:
    """True if the alphanumeric characters of s, case folded, read the same backwards."""
    kept = [c.lower() for c in s if c.isalnum()]
    return kept == kept[::-1]


def is_valid_parentheses(s: str) -> bool:
    """True if every bracket in s is closed by its partner in the right order.

    Any character that is not an opening bracket is treated as a closer, so
    other characters make the string invalid.
    """
    stack: list[str] = []
    for c in s:
        if c in _OPENERS:
            stack.append(c)
        elif not stack or stack.pop() != _BRACKETS.get(c):
            return False
    return not stack


def remove_stars(s: str) -> str:
    """Let each '*' delete the closest remaining character to its left."""
    kept: list[str] = []
    for c in s:
        if c == "*":
            if kept:
                kept.pop()
        else:
            kept.append(c)
    return "".join(kept)


def is_anagram(s: str, t: str) -> bool:
    """True if t uses exactly the characters of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def two_edit_words(queries: list[str], dictionary: list[str]) -> list[str]:
    """Queries that differ from some dictionary word in at most two places."""
    matches: list[str] = []
    for query in queries:
        for word in dictionary:
            if len(query) != len(word):
                raise ValueError("queries and dictionary words must share one length")
            if sum(a != b for a, b in zip(query, word)) <= 2:
                matches.append(query)
                break
    return matches


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of needle in haystack, or -1.

    An empty needle is never found.
    """
    if not needle:
        return -1
    return haystack.find(needle)


def length_of_longest_substring(s: str) -> int:
    """Length of the longest run of s without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for i, c in enumerate(s):
        previous = last_seen.get(c)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[c] = i
        best = max(best, i - start + 1)
    return best


def group_anagrams(strs: list[str]) -> list[list[str]]:
    """Group words that are anagrams, groups ordered by first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word of s."""
    trimmed = s.rstrip(" ")
    if not trimmed:
        raise ValueError("s must contain a word")
    return len(trimmed.rsplit(" ", 1)[-1])