"""Root finding: bisection, false position and Newton-Raphson."""

from __future__ import annotations

from typing import Callable

Function = Callable[[float], float]


def cubic(x: float) -> float:
    """The sample bracketing function x^3 - x^2 + 2."""
    return x * x * x - x * x + 2


def quadratic(x: float) -> float:
    """The sample Newton-Raphson function x^2 - 25."""
    return x * x - 25


def quadratic_derivative(x: float) -> float:
    """Derivative of :func:`quadratic`."""
    return 2 * x


def _check_tolerance(tolerance: float) -> None:
    if tolerance <= 0:
        raise ValueError("tolerance must be positive")


def _check_bracket(f: Function, a: float, b: float) -> None:
    if f(a) * f(b) >= 0:
        raise ValueError("the interval does not bracket a root: f(a) and f(b) share a sign")


def bisection(a: float, b: float, tolerance: float, f: Function = cubic) -> float:
    """Find a root of ``f`` in ``[a, b]`` by repeated halving."""
    _check_tolerance(tolerance)
    _check_bracket(f, a, b)
    c = a
    while abs(b - a) >= tolerance:
        c = (a + b) / 2
        fc = f(c)
        if fc == 0.0 or abs(fc) < tolerance:
            break
        if fc * f(a) < 0:
            b = c
        else:
            a = c
    return c


def false_position(lower: float, upper: float, tolerance: float, f: Function = cubic) -> float:
    """Find a root of ``f`` in ``[lower, upper]`` by the regula falsi method."""
    _check_tolerance(tolerance)
    _check_bracket(f, lower, upper)
    root = lower
    while abs(upper - lower) > tolerance:
        f_lower, f_upper = f(lower), f(upper)
        root = (lower * f_upper - upper * f_lower) / (f_upper - f_lower)
        f_root = f(root)
        if f_root == 0.0 or abs(f_root) < tolerance:
            return root
        if f_lower * f_root < 0:
            upper = root
        else:
            lower = root
    return root


def newton_raphson(
    x: float,
    tolerance: float,
    f: Function = quadratic,
    df: Function = quadratic_derivative,
) -> float:
    """Refine the guess ``x`` with Newton steps until a step is within ``tolerance``."""
    _check_tolerance(tolerance)
    step = f(x) / df(x)
    while abs(step) > tolerance:
        step = f(x) / df(x)
        x -= step
    return x