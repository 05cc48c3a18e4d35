"""Maclaurin series for sine and cosine."""

from __future__ import annotations


def sine_series(x: float, terms: int) -> float:
    """Sum the first ``terms`` terms of the sine series at ``x`` (radians)."""
    total = 0.0
    term = float(x)
    for n in range(terms):
        total += term
        term *= -x * x / ((2 * n + 2) * (2 * n + 3))
    return total


def cosine_series(x: float, terms: int) -> float:
    """Sum the first ``terms`` terms of the cosine series at ``x`` (radians)."""
    total = 0.0
    term = 1.0
    for n in range(terms):
        total += term
        term *= -x * x / ((2 * n + 1) * (2 * n + 2))
    return total