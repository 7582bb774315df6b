"""Grid problems: spiral traversal, islands of land and a board race."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_LAND = "1"
_WATER = "0"
_NO_JUMP = -1


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values of a matrix read clockwise from the top-left corner inwards."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    rows = [list(row) for row in matrix]
    order: list[int] = []
    while rows:
        order.extend(rows.pop(0))
        # Turn what is left counter-clockwise so the next edge is on top.
        rows = [list(column) for column in zip(*rows)][::-1]
    return order


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected groups of land cells ("1") in the grid.

    The grid is left unchanged.
    """
    seen: set[tuple[int, int]] = set()
    islands = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == _LAND and (i, j) not in seen:
                islands += 1
                _flood(grid, (i, j), seen)
    return islands


def _flood(
    grid: Sequence[Sequence[str]],
    start: tuple[int, int],
    seen: set[tuple[int, int]],
) -> None:
    stack = [start]
    seen.add(start)
    while stack:
        i, j = stack.pop()
        for ni, nj in ((i + 1, j), (i, j + 1), (i - 1, j), (i, j - 1)):
            if (
                0 <= ni < len(grid)
                and 0 <= nj < len(grid[ni])
                and (ni, nj) not in seen
                and grid[ni][nj] != _WATER
            ):
                seen.add((ni, nj))
                stack.append((ni, nj))


def _cell(n: int, square: int) -> tuple[int, int]:
    """Row and column of a numbered square, counted from the bottom row up."""
    offset = (square - 1) // n
    row = n - 1 - offset
    position = square - n * offset
    column = n - position if row % 2 == 0 else position - 1
    return row, column


def snakes_and_ladders(board: Sequence[Sequence[int]]) -> int:
    """Fewest moves from square 1 to the last square of the board.

    A move is a die roll of 1 to 6, or taking the snake or ladder that
    starts on the current square, which counts as a move of its own.
    """
    n = len(board)
    if n == 0 or any(len(row) != n for row in board):
        raise ValueError("board must be a non-empty square grid")
    last = n * n

    moves: dict[int, list[int]] = {}
    for square in range(1, last + 1):
        targets = list(range(square + 1, min(square + 6, last) + 1))
        row, column = _cell(n, square)
        jump = board[row][column]
        if jump != _NO_JUMP:
            if not 1 <= jump <= last:
                raise ValueError(f"jump target {jump} is not on the board")
            if jump not in targets:
                targets.append(jump)
        moves[square] = targets

    distance = {1: 0}
    queue = deque([1])
    while queue:
        current = queue.popleft()
        for following in moves[current]:
            if following not in distance:
                distance[following] = distance[current] + 1
                queue.append(following)
    return distance.get(last, 0)