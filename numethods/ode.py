"""Initial value problems: modified Euler, Milne, Runge-Kutta 4 and Taylor series."""

from __future__ import annotations

import math
from typing import Callable

Derivative = Callable[[float, float], float]

_E = 2.71828


def product(x: float, y: float) -> float:
    """The sample equation dy/dx = x * y."""
    return x * y


def _check_steps(n: int) -> None:
    if n < 0:
        raise ValueError("the number of steps must not be negative")


def modified_euler(
    f: Derivative, x0: float, y0: float, h: float, n: int
) -> tuple[list[float], list[float]]:
    """Integrate ``n`` steps with the predictor-corrector Euler method."""
    _check_steps(n)
    xs, ys = [x0], [y0]
    for _ in range(n):
        x, y = xs[-1], ys[-1]
        slope = f(x, y)
        predictor = y + h * slope
        x_next = x + h
        xs.append(x_next)
        ys.append(y + h / 2 * (slope + f(x_next, predictor)))
    return xs, ys


def runge_kutta_4(
    f: Derivative, x0: float, y0: float, h: float, n: int
) -> tuple[list[float], list[float]]:
    """Integrate ``n`` steps with the classical fourth-order Runge-Kutta method."""
    _check_steps(n)
    xs, ys = [x0], [y0]
    for _ in range(n):
        x, y = xs[-1], ys[-1]
        k1 = h * f(x, y)
        k2 = h * f(x + h / 2, y + k1 / 2)
        k3 = h * f(x + h / 2, y + k2 / 2)
        k4 = h * f(x + h, y + k3)
        ys.append(y + (k1 + 2 * k2 + 2 * k3 + k4) / 6)
        xs.append(x + h)
    return xs, ys


def milne(
    f: Derivative, x0: float, y0: float, h: float, n: int
) -> tuple[list[float], list[float]]:
    """Integrate ``n`` steps with Milne's predictor-corrector method.

    The four starting values come from Runge-Kutta increments whose slopes
    are all evaluated from ``y0``.
    """
    if n < 4:
        raise ValueError("Milne's method needs at least 4 steps")
    xs, ys = [x0], [y0]
    for i in range(4):
        x = x0 + i * h
        k1 = h * f(x, y0)
        k2 = h * f(x + h / 2, y0 + k1 / 2)
        k3 = h * f(x + h / 2, y0 + k2 / 2)
        k4 = h * f(x + h, y0 + k3)
        ys.append(ys[i] + (k1 + 2 * k2 + 2 * k3 + k4) / 6)
        xs.append(x0 + (i + 1) * h)

    for i in range(3, n):
        x_next = xs[i] + h
        f_i = f(xs[i], ys[i])
        f_prev = f(xs[i - 1], ys[i - 1])
        predictor = ys[i - 3] + 4 * h / 3 * (2 * f_i - f_prev + 2 * f(xs[i - 2], ys[i - 2]))
        y_next = ys[i - 1] + h / 3 * (f_prev + 4 * f_i + f(x_next, predictor))
        if i + 1 < len(xs):
            xs[i + 1], ys[i + 1] = x_next, y_next
        else:
            xs.append(x_next)
            ys.append(y_next)
    return xs, ys


def _derivatives(x: float, y: float) -> tuple[float, float, float, float, float]:
    exponential = 3 * _E**x
    first = 2 * y + exponential
    second = exponential + 2 * first
    third = exponential + 2 * second
    fourth = exponential + 2 * third
    fifth = exponential + 2 * fourth
    return first, second, third, fourth, fifth


def taylor(x: float, h: float, x1: float, y: float) -> list[tuple[float, float]]:
    """Solve dy/dx = 2y + 3e^x from ``(x, y)`` towards ``x1`` with a fifth-order Taylor series.

    Returns the ``(x, y)`` pair reached after each step.
    """
    if h == 0:
        raise ValueError("step size must not be zero")
    steps = math.ceil(abs((x1 - x) / h))
    points = []
    for _ in range(steps):
        d1, d2, d3, d4, d5 = _derivatives(x, y)
        y = y + d1 * h + d2 * h**2 / 2 + d3 * h**3 / 6 + d4 * h**4 / 24 + d5 * h**5 / 120
        x = x + h
        points.append((x, y))
    return points