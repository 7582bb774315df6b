# algodrills

Small, dependency-free algorithm routines, grouped by the kind of data they
work on. Every function is a plain Python function that takes ordinary
lists, strings and integers and returns a result. The package is a library
only: it has no command-line interface.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.arrays`

- `max_profit(prices)`: best profit from one buy and one later sell, 0 if none.
- `candy(ratings)`: fewest candies so that a child rated higher than a
  neighbour gets more.
- `shuffle(nums, n)`: turns `[x1..xn, y1..yn]` into `[x1, y1, x2, y2, ...]`.
- `min_operations(nums, x)`: fewest values removed from either end that sum
  to `x`, or -1.
- `ways_to_make_fair(nums)`: number of indices whose removal leaves equal
  even- and odd-indexed sums.
- `two_sum_sorted(numbers, target)`: 1-based positions of two values of a
  sorted list that add up to `target`, as a tuple.
- `two_sum(nums, target)`: indices `[later, earlier]` of two values adding up
  to `target`, or `[]`.
- `contains_duplicate(nums)`: whether any value repeats.
- `next_permutation(nums)`: rearranges the list in place into the next
  lexicographic permutation (the last one wraps to the first); returns `None`.
- `max_subarray(nums)`: largest sum of a non-empty contiguous run.
- `subarray_sum(arr, k)`: number of contiguous runs summing to `k`.
- `plus_one(digits)`: adds one to a number given as decimal digits, returning
  a new list.
- `binary_search(nums, target)`: index of `target` in a sorted list, or -1.
- `total_fruit(fruits)`: longest contiguous run with at most two distinct
  values.

### `algodrills.strings`

- `is_palindrome(s)`: palindrome check on the alphanumeric characters,
  ignoring case.
- `is_valid_parentheses(s)`: whether `()`, `[]` and `{}` are properly nested;
  any other character makes the string invalid.
- `remove_stars(s)`: each `*` deletes the closest remaining character to its
  left.
- `is_anagram(s, t)`: whether `t` uses exactly the characters of `s`.
- `two_edit_words(queries, dictionary)`: queries that differ from some
  dictionary word in at most two positions (all words must share one length,
  otherwise `ValueError`).
- `str_str(haystack, needle)`: index of the first occurrence of `needle`, or
  -1; an empty needle is never found.
- `length_of_longest_substring(s)`: longest run without a repeated character.
- `group_anagrams(strs)`: anagram groups in order of first appearance.
- `length_of_last_word(s)`: length of the last space-separated word.

### `algodrills.arithmetic`

- `count_odds(low, high)`: odd integers in `[low, high]`.
- `maximum_score(a, b, c)`: most turns of taking a stone from two different
  non-empty piles.
- `is_happy(n)`: whether repeatedly summing squared digits reaches 1.
- `my_pow(x, n)`: `x` to the integer power `n` by repeated squaring.
- `reverse_integer(x)`: reverses the digits of a signed 32-bit integer,
  returning 0 on overflow.
- `is_palindrome_number(x)`: whether the decimal digits read the same
  backwards.

### `algodrills.grids`

- `spiral_order(matrix)`: values read clockwise from the top-left corner
  inwards.
- `num_islands(grid)`: number of 4-connected groups of `"1"` cells; the grid
  is not modified.
- `snakes_and_ladders(board)`: fewest moves from square 1 to the last square,
  where a move is a die roll of 1 to 6 or taking the snake or ladder on the
  current square (counted as a move of its own).

### `algodrills.graphs`

- `ladder_length(begin_word, end_word, word_list)`: number of words in the
  shortest one-letter-change chain, or 0.

### `algodrills.combinatorics`

- `subsets_with_dup(nums)`: every distinct sub-multiset of `nums`.

### `algodrills.squares`

- `NegativeTreatment`: `IGNORE_SIGN`, `DISCARD`, `TREAT_AS_ZERO`,
  `REPORT_ERROR`.
- `is_square(n)`: whether `n` is a perfect square.
- `square_count(n)`: fewest positive squares summing to `n` (0 for 0).
- `classify_by_square_count(values, treatment)`: five buckets indexed by
  square count; negative values are kept as given but classified according to
  `treatment`.

## Examples

```python
from algodrills.arrays import max_profit, two_sum
from algodrills.strings import remove_stars, group_anagrams
from algodrills.grids import num_islands
from algodrills.squares import NegativeTreatment, classify_by_square_count

max_profit([5, 1, 3, 4, 10, 8, 7])          # 9
two_sum([2, 4, 11, 3], 6)                    # [1, 0]
remove_stars("leet**cod*e")                  # "lecoe"
group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
# [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]

num_islands([
    ["1", "1", "1", "1", "0"],
    ["1", "1", "0", "1", "0"],
    ["1", "1", "0", "0", "0"],
    ["0", "0", "0", "0", "0"],
])                                           # 1

classify_by_square_count([100, -200, 1394, -7620, 111],
                         NegativeTreatment.TREAT_AS_ZERO)
```

## Errors

Functions raise `ValueError` for input they cannot work on, for example an
empty list where a value is needed (`max_profit`, `candy`, `max_subarray`,
`plus_one`, ...), a string without a word for `length_of_last_word`, a
non-positive `n` for `is_happy`, an integer outside 32 bits for
`reverse_integer`, or a board that is not square for `snakes_and_ladders`.
`square_count` raises `ValueError` for negative input, and
`classify_by_square_count` raises it when it meets a negative number under
`NegativeTreatment.REPORT_ERROR`.