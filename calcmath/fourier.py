"""Discrete Fourier transform by direct summation."""

from __future__ import annotations

import cmath
from typing import Sequence


def dft(values: Sequence[complex], invert: bool = False) -> list[complex]:
    """Transform ``values`` by the O(N^2) sum.

    The forward transform uses ``exp(-2*pi*i*j*k/N)`` and is scaled by ``1/N``;
    the inverse uses ``exp(+2*pi*i*j*k/N)`` without scaling, so the two undo
    each other.
    """
    n = len(values)
    if n == 0:
        return []
    sign = 1 if invert else -1
    scale = 1.0 if invert else 1.0 / n
    return [
        scale
        * sum(x * cmath.exp(sign * 2j * cmath.pi * j * k / n) for j, x in enumerate(values))
        for k in range(n)
    ]