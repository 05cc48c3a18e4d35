"""Polynomial interpolation: Lagrange, Newton forward/backward/divided, Gauss backward."""

from __future__ import annotations

import math
from itertools import pairwise
from typing import Sequence


def _nodes(xs: Sequence[float], ys: Sequence[float]) -> tuple[list[float], list[float]]:
    px = [float(v) for v in xs]
    py = [float(v) for v in ys]
    if len(px) != len(py):
        raise ValueError("xs and ys must have the same length")
    if not px:
        raise ValueError("at least one data point is required")
    return px, py


def _distinct(xs: Sequence[float]) -> None:
    if len(set(xs)) != len(xs):
        raise ValueError("x values must be distinct")


def _step(xs: Sequence[float]) -> float:
    if len(xs) < 2:
        raise ValueError("at least two equally spaced points are required")
    h = xs[1] - xs[0]
    if h == 0:
        raise ValueError("x values must be distinct")
    return h


def _difference_columns(ys: Sequence[float]) -> list[list[float]]:
    columns = [[float(v) for v in ys]]
    while len(columns[-1]) > 1:
        columns.append([b - a for a, b in pairwise(columns[-1])])
    return columns


def forward_difference_table(ys: Sequence[float]) -> list[list[float]]:
    """Return rows ``[y_j, Δy_j, Δ²y_j, ...]``; row ``j`` holds ``n - j`` entries."""
    columns = _difference_columns(ys)
    n = len(columns[0])
    return [[column[j] for column in columns[: n - j]] for j in range(n)]


def backward_difference_table(ys: Sequence[float]) -> list[list[float]]:
    """Return rows ``[y_j, ∇y_j, ∇²y_j, ...]``; row ``j`` holds ``j + 1`` entries."""
    columns = _difference_columns(ys)
    n = len(columns[0])
    return [[columns[k][j - k] for k in range(j + 1)] for j in range(n)]


def _backward_sum(last_row: Sequence[float], u: float) -> float:
    total = last_row[0]
    coefficient = 1.0
    for i, difference in enumerate(last_row[1:], start=1):
        coefficient *= (u + i - 1) / i
        total += coefficient * difference
    return total


def newton_backward(xs: Sequence[float], ys: Sequence[float], value: float) -> float:
    """Interpolate at ``value`` with Newton's backward difference formula."""
    px, py = _nodes(xs, ys)
    h = _step(px)
    u = (value - px[-1]) / h
    return _backward_sum(backward_difference_table(py)[-1], u)


def gauss_backward(x: float, xs: Sequence[float], ys: Sequence[float]) -> float:
    """Interpolate at ``x`` from the last node using backward differences."""
    px, py = _nodes(xs, ys)
    h = _step(px)
    p = (x - px[-1]) / h
    return _backward_sum(backward_difference_table(py)[-1], p)


def newton_forward(xs: Sequence[float], ys: Sequence[float], value: float) -> float:
    """Interpolate at ``value`` with Newton's forward difference formula."""
    px, py = _nodes(xs, ys)
    h = _step(px)
    u = (value - px[0]) / h
    first_row = forward_difference_table(py)[0]
    total = first_row[0]
    coefficient = 1.0
    for i, difference in enumerate(first_row[1:], start=1):
        coefficient *= (u - (i - 1)) / i
        total += coefficient * difference
    return total


def lagrange(xs: Sequence[float], ys: Sequence[float], xp: float) -> float:
    """Evaluate the Lagrange interpolating polynomial at ``xp``."""
    px, py = _nodes(xs, ys)
    _distinct(px)
    result = 0.0
    for i, (xi, yi) in enumerate(zip(px, py)):
        term = yi
        for j, xj in enumerate(px):
            if j != i:
                term = term * (xp - xj) / (xi - xj)
        result += term
    return result


def divided_difference_table(xs: Sequence[float], ys: Sequence[float]) -> list[list[float]]:
    """Return rows of Newton divided differences; row ``j`` holds ``n - j`` entries."""
    px, py = _nodes(xs, ys)
    _distinct(px)
    columns = [py]
    for k in range(1, len(px)):
        previous = columns[-1]
        columns.append(
            [
                (previous[j] - previous[j + 1]) / (px[j] - px[j + k])
                for j in range(len(previous) - 1)
            ]
        )
    n = len(px)
    return [[columns[k][j] for k in range(n - j)] for j in range(n)]


def newton_divided(xs: Sequence[float], ys: Sequence[float], value: float) -> float:
    """Interpolate at ``value`` with Newton's divided difference formula."""
    px, _ = _nodes(xs, ys)
    top = divided_difference_table(xs, ys)[0]
    return sum(
        coefficient * math.prod(value - xj for xj in px[:i])
        for i, coefficient in enumerate(top)
    )