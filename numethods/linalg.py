"""Linear systems: Gaussian elimination, Gauss-Jordan, Gauss-Seidel, products."""

from __future__ import annotations

from typing import Sequence

Matrix = list[list[float]]


def _augmented(matrix: Sequence[Sequence[float]]) -> Matrix:
    rows = [[float(v) for v in row] for row in matrix]
    n = len(rows)
    if n == 0:
        raise ValueError("matrix must have at least one row")
    if any(len(row) != n + 1 for row in rows):
        raise ValueError("augmented matrix must have n rows of n + 1 entries")
    return rows


def _eliminate(pivot_row: list[float], row: list[float], column: int) -> None:
    factor = row[column] / pivot_row[column]
    row[column:] = [value - factor * p for value, p in zip(row[column:], pivot_row[column:])]


def forward_eliminate(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the augmented matrix reduced to upper-triangular form."""
    rows = _augmented(matrix)
    n = len(rows)
    for i in range(n - 1):
        pivot_row = rows[i]
        if pivot_row[i] == 0:
            raise ZeroDivisionError(f"zero pivot in row {i + 1}")
        for row in rows[i + 1 :]:
            _eliminate(pivot_row, row, i)
    return rows


def gauss_jordan(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the augmented matrix reduced to diagonal form."""
    rows = forward_eliminate(matrix)
    for i in reversed(range(len(rows))):
        pivot_row = rows[i]
        if pivot_row[i] == 0:
            raise ZeroDivisionError(f"zero pivot in row {i + 1}")
        for row in rows[:i]:
            _eliminate(pivot_row, row, i)
    return rows


def back_substitute(matrix: Sequence[Sequence[float]]) -> list[float]:
    """Solve an upper-triangular augmented system."""
    rows = _augmented(matrix)
    n = len(rows)
    rhs = [row[n] for row in rows]
    solutions = [0.0] * n
    for i in reversed(range(n)):
        solutions[i] = rhs[i] / rows[i][i]
        for j in range(i):
            rhs[j] -= rows[j][i] * solutions[i]
    return solutions


def solve_gauss(matrix: Sequence[Sequence[float]]) -> list[float]:
    """Solve an augmented system by Gaussian elimination and back substitution."""
    return back_substitute(forward_eliminate(matrix))


def solve_gauss_jordan(matrix: Sequence[Sequence[float]]) -> list[float]:
    """Solve an augmented system by Gauss-Jordan elimination."""
    return back_substitute(gauss_jordan(matrix))


def gauss_seidel(
    augmented: Sequence[Sequence[float]],
    max_iterations: int = 1000,
    tolerance: float = 1e-6,
) -> list[float]:
    """Iteratively solve an augmented system, starting from zero.

    Stops when the summed absolute change of a sweep is below ``tolerance``
    or after ``max_iterations`` sweeps.
    """
    rows = _augmented(augmented)
    n = len(rows)
    x = [0.0] * n
    for _ in range(max_iterations):
        previous = x.copy()
        for i, row in enumerate(rows):
            off_diagonal = sum(
                coefficient * value
                for j, (coefficient, value) in enumerate(zip(row[:n], x))
                if j != i
            )
            x[i] = (row[n] - off_diagonal) / row[i]
        if sum(abs(new - old) for new, old in zip(x, previous)) < tolerance:
            break
    return x


def matmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> list[list[float]]:
    """Multiply two matrices given as lists of rows."""
    if not a or not b or not a[0] or not b[0]:
        raise ValueError("matrices must not be empty")
    if len(a[0]) != len(b):
        raise ValueError("Matrices cannot be multiplied. Invalid dimensions.")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render a matrix with each entry right-aligned in ten columns."""
    return "".join(
        "".join(f"{format(float(value), 'g'):>10} " for value in row) + "\n" for row in matrix
    )