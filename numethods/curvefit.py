"""Least-squares curve fitting by normal equations."""

from __future__ import annotations

from typing import Sequence


def _points(x: Sequence[float], y: Sequence[float]) -> tuple[list[float], list[float]]:
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    if len(xs) != len(ys):
        raise ValueError("x and y must have the same length")
    if not xs:
        raise ValueError("at least one data point is required")
    return xs, ys


def linear_fit(x: Sequence[float], y: Sequence[float]) -> tuple[float, float]:
    """Return ``(a, b)`` of the best line ``y = a*x + b``."""
    xs, ys = _points(x, y)
    n = len(xs)
    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(xi * yi for xi, yi in zip(xs, ys))
    sum_x2 = sum(xi * xi for xi in xs)
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise ValueError("data is degenerate: cannot fit a line")
    a = (n * sum_xy - sum_x * sum_y) / denominator
    b = (sum_y - a * sum_x) / n
    return a, b


def parabolic_fit(x: Sequence[float], y: Sequence[float]) -> tuple[float, float, float]:
    """Return ``(a, b, c)`` of the best parabola ``y = a*x^2 + b*x + c``."""
    xs, ys = _points(x, y)
    n = len(xs)
    s1 = sum(xs)
    s2 = sum(xi**2 for xi in xs)
    s3 = sum(xi**3 for xi in xs)
    s4 = sum(xi**4 for xi in xs)
    sy = sum(ys)
    sxy = sum(xi * yi for xi, yi in zip(xs, ys))
    sx2y = sum(xi**2 * yi for xi, yi in zip(xs, ys))

    denominator = s4 * (s2 * n - s1 * s1) - s3 * (s3 * n - s1 * s2) + s2 * (s3 * s1 - s2 * s2)
    if denominator == 0:
        raise ValueError("data is degenerate: cannot fit a parabola")

    a = (sx2y * (s2 * n - s1 * s1) - sxy * (s3 * n - s1 * s2) + sy * (s3 * s1 - s2 * s2)) / denominator
    b = (s4 * (sxy * n - sy * s1) - s3 * (sx2y * n - sy * s2) + s2 * (sx2y * s1 - sxy * s2)) / denominator
    c = (s4 * (s2 * sy - s1 * sxy) - s3 * (s3 * sy - s1 * sx2y) + s2 * (s3 * sxy - s2 * sx2y)) / denominator
    return a, b, c


def cubic_fit(x: Sequence[float], y: Sequence[float]) -> tuple[float, float, float, float]:
    """Return coefficients ``(a, b, c, d)`` for ``y = a*x^3 + b*x^2 + c*x + d``.

    The coefficients come from closed-form expressions over the sums of
    x, x^2, x^3, x^4, y, x*y and x^2*y.
    """
    xs, ys = _points(x, y)
    n = len(xs)
    sx = sum(xs)
    sx2 = sum(xi * xi for xi in xs)
    sx3 = sum(xi * xi * xi for xi in xs)
    sx4 = sum(xi * xi * xi * xi for xi in xs)
    sy = sum(ys)
    sxy = sum(xi * yi for xi, yi in zip(xs, ys))
    sx2y = sum(xi * xi * yi for xi, yi in zip(xs, ys))

    denominator = (
        n * sx2 * sx4 - sx2 * sx2 * sx2 - n * sx3 * sx3 + 2 * sx * sx2 * sx3 - sx * sx * sx4
    )
    if denominator == 0:
        raise ValueError("data is degenerate: cannot fit a cubic")

    a = (
        sy * sx2 * sx4
        - sy * sx2 * sx2 * sx2
        - sxy * sx3 * sx3
        + sxy * sx * sx2 * sx3
        - sx2y * sx * sx * sx4
    ) / denominator
    b = (
        n * sx2y * sx4
        - sxy * sx2 * sx2 * sx2
        - sy * sx3 * sx3
        + sy * sx * sx2 * sx3
        - n * sx * sx2 * sx2y
    ) / denominator
    c = (
        n * sxy * sx4
        - sy * sx2 * sx2 * sx2
        - sx2y * sx3 * sx3
        + sx * sx2y * sx * sx3
        - sy * sx * sx2 * sx4
    ) / denominator
    d = (
        n * sx2 * sx2y
        - sx * sxy * sx2 * sx2
        + sx * sx * sxy * sx2
        - n * sx2 * sx * sy
        + sx2 * sx * sy * sx
    ) / denominator
    return a, b, c, d