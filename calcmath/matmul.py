"""Dense square matrix multiplication and helpers for padded layouts."""

from __future__ import annotations

import math
from typing import Sequence

Rows = Sequence[Sequence[float]]


def _square(matrix: Rows, name: str) -> list[list[float]]:
    rows = [[float(v) for v in row] for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError(f"{name} must be a square matrix")
    return rows


def matmul_n3(a: Rows, b: Rows) -> list[list[float]]:
    """Multiply two square matrices by the classic triple loop."""
    left = _square(a, "a")
    right = _square(b, "b")
    if len(left) != len(right):
        raise ValueError(f"cannot multiply a {len(left)}x{len(left)} matrix by a "
                         f"{len(right)}x{len(right)} matrix")
    columns = list(zip(*right))
    return [
        [sum((x * y for x, y in zip(row, column)), 0.0) for column in columns]
        for row in left
    ]


def format_matrix(matrix: Rows) -> str:
    """Render a square matrix as text framed by rule lines."""
    rows = _square(matrix, "matrix")
    lines = ["_________"]
    lines.extend("".join(f"{v:3.2f} " for v in row) for row in rows)
    lines.append("_________")
    return "\n".join(lines) + "\n"


def padded_size(n: int) -> int:
    """Size to which an ``n``-by-``n`` matrix is padded before block multiplication.

    The size is ``m * 2**k`` with ``k = floor(log2(n)) - 4`` and
    ``m = 1 + floor(n / 2**k)``, truncated to an integer; it is never below ``n``.
    """
    if n < 1:
        raise ValueError("matrix size must be positive")
    k = int(math.log(n) / math.log(2)) - 4
    m = 1 + int(n * 2.0 ** -k)
    return int(m * 2.0 ** k)