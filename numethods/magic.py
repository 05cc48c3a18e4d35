"""Odd-order magic squares by the Siamese method."""

from __future__ import annotations

from typing import Sequence


def generate_magic_square(n: int) -> list[list[int]]:
    """Fill an ``n`` x ``n`` square with 1..n² by the Siamese method.

    Placement starts in the middle of the top row. Each number moves up and
    to the right, wrapping around the edges, and drops one row down when
    that cell is already taken.
    """
    if n < 1:
        raise ValueError("the size of a magic square must be positive")
    if n % 2 == 0 and n < 4:
        raise ValueError(
            "Magic square is not possible for even numbers less than 4x4 size."
        )
    square = [[0] * n for _ in range(n)]
    i, j = 0, n // 2
    for number in range(1, n * n + 1):
        square[i][j] = number
        next_i, next_j = (i - 1) % n, (j + 1) % n
        if square[next_i][next_j]:
            i = (i + 1) % n
        else:
            i, j = next_i, next_j
    return square


def format_magic_square(square: Sequence[Sequence[int]]) -> str:
    """Render the square with a tab after each number and one row per line."""
    return "".join("".join(f"{number}\t" for number in row) + "\n" for row in square)