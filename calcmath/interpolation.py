"""Piecewise-linear interpolation of tabulated functions."""

from __future__ import annotations

from itertools import pairwise

from calcmath.basic_type import TableFunction


def linear_interpolation(x: float, data: TableFunction) -> float:
    """Interpolate ``data`` linearly at ``x``.

    The cell used is the last ``[mesh[i], mesh[i+1])`` holding ``x``; a point
    outside every cell raises :class:`ValueError`.
    """
    left_index = None
    for i, (left, right) in enumerate(pairwise(data.mesh)):
        if left <= x < right:
            left_index = i
    if left_index is None:
        raise ValueError(f"{x} lies outside the mesh")

    x0, x1 = data.mesh[left_index], data.mesh[left_index + 1]
    y0, y1 = data.values[left_index], data.values[left_index + 1]
    return y0 + (y1 - y0) / (x1 - x0) * (x - x0)