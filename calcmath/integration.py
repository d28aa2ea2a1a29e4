"""Composite quadrature rules on a mesh."""

from __future__ import annotations

from itertools import pairwise
from typing import Callable, Sequence

Function = Callable[[float], float]


def uniform_mesh(n: int, x_min: float, x_max: float) -> list[float]:
    """Return ``n`` equally spaced points from ``x_min`` to ``x_max`` inclusive."""
    if n < 2:
        raise ValueError("a mesh needs at least two points")
    step = (x_max - x_min) / (n - 1)
    return [x_min + i * step for i in range(n)]


def boole_integral(function: Function, mesh: Sequence[float]) -> float:
    """Boole's rule applied on every mesh cell."""
    total = 0.0
    for left, right in pairwise(mesh):
        h = (right - left) / 4
        total += 2 * h * (
            7 * function(left)
            + 32 * function(left + h)
            + 12 * function(left + 2 * h)
            + 32 * function(left + 3 * h)
            + 7 * function(left + 4 * h)
        ) / 45
    return total


def trapezoidal_integral(function: Function, mesh: Sequence[float]) -> float:
    """Trapezoidal rule on every mesh cell."""
    return sum(
        (right - left) * (function(right) + function(left)) / 2.0
        for left, right in pairwise(mesh)
    )


def simpson_1_3_integral(function: Function, mesh: Sequence[float]) -> float:
    """Simpson's 1/3 rule on every mesh cell."""
    return sum(
        (right - left)
        * (function(right) + function(left) + 4 * function((right + left) / 2))
        / 6.0
        for left, right in pairwise(mesh)
    )


def simpson_3_8_integral(function: Function, mesh: Sequence[float]) -> float:
    """Simpson's 3/8 rule on every mesh cell."""
    return sum(
        (right - left)
        * (
            function(right)
            + function(left)
            + 3 * function((2 * right + left) / 3)
            + 3 * function((right + 2 * left) / 3)
        )
        / 8.0
        for left, right in pairwise(mesh)
    )


def rectangle_right_integral(function: Function, mesh: Sequence[float]) -> float:
    """Rectangle rule taking the value at the right end of each cell."""
    return sum((right - left) * function(right) for left, right in pairwise(mesh))


def rectangle_left_integral(function: Function, mesh: Sequence[float]) -> float:
    """Rectangle rule taking the value at the left end of each cell."""
    return sum((right - left) * function(left) for left, right in pairwise(mesh))


class Integration:
    """Integral of ``function`` over ``[a, b]`` on a uniform mesh of ``n`` points."""

    def __init__(self, n: int, function: Function, a: float = 0.0, b: float = 1.0) -> None:
        self.function = function
        self.a = a
        self.b = b
        self.mesh = tuple(uniform_mesh(n, a, b))

    def boole(self) -> float:
        return boole_integral(self.function, self.mesh)

    def trapezoidal(self) -> float:
        return trapezoidal_integral(self.function, self.mesh)

    def simpson_1_3(self) -> float:
        return simpson_1_3_integral(self.function, self.mesh)

    def simpson_3_8(self) -> float:
        return simpson_3_8_integral(self.function, self.mesh)

    def rectangle_right(self) -> float:
        return rectangle_right_integral(self.function, self.mesh)

    def rectangle_left(self) -> float:
        return rectangle_left_integral(self.function, self.mesh)