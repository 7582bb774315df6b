"""Shortest transformation chains between words."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator


def _patterns(word: str) -> Iterator[tuple[int, str, str]]:
    for i in range(len(word)):
        yield i, word[:i], word[i + 1 :]


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Number of words in the shortest chain from begin_word to end_word.

    Each step changes exactly one letter and must land on a word of
    word_list. Returns 0 when end_word is not in the list or no chain exists.
    """
    words = set(word_list)
    if end_word not in words:
        return 0
    if begin_word == end_word:
        return 1

    buckets: defaultdict[tuple[int, str, str], list[str]] = defaultdict(list)
    for word in words | {begin_word}:
        for pattern in _patterns(word):
            buckets[pattern].append(word)

    distance = {begin_word: 1}
    queue = deque([begin_word])
    while queue:
        word = queue.popleft()
        for pattern in _patterns(word):
            for following in buckets[pattern]:
                if following in distance:
                    continue
                distance[following] = distance[word] + 1
                if following == end_word:
                    return distance[following]
                queue.append(following)
    return 0