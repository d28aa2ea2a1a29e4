"""Direct solvers for small dense and diagonal linear systems."""

from __future__ import annotations

from typing import Sequence

from calcmath.basic_type import Matrix


def diagonal_solve(matrix: Matrix, b: Sequence[float]) -> list[float]:
    """Solve ``D x = b`` using only the diagonal of ``matrix``."""
    if len(b) != matrix.n:
        raise ValueError(f"right-hand side has {len(b)} entries, expected {matrix.n}")
    return [float(rhs) / d for rhs, d in zip(b, matrix.diagonal)]


def _square_rows(matrix: Sequence[Sequence[float]], b: Sequence[float]) -> list[list[float]]:
    n = len(matrix)
    rows = [[float(v) for v in row] for row in matrix]
    if any(len(row) != n for row in rows):
        raise ValueError("matrix must be square")
    if len(b) != n:
        raise ValueError(f"right-hand side has {len(b)} entries, expected {n}")
    return rows


def direct_gauss_solve(matrix: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Solve ``A x = b`` by Gaussian elimination without pivoting.

    The inputs are left untouched. A zero pivot raises :class:`ZeroDivisionError`.
    """
    a = _square_rows(matrix, b)
    rhs = [float(v) for v in b]
    n = len(a)

    for i in range(n):
        pivot_inv = 1.0 / a[i][i]
        rhs[i] *= pivot_inv
        a[i][i:] = [v * pivot_inv for v in a[i][i:]]
        pivot_tail = a[i][i + 1:]
        for row_index in range(i + 1, n):
            row = a[row_index]
            factor = row[i]
            rhs[row_index] -= rhs[i] * factor
            row[i + 1:] = [v - p * factor for v, p in zip(row[i + 1:], pivot_tail)]

    x = [0.0] * n
    for i in reversed(range(n)):
        x[i] = rhs[i] - sum(a[i][j] * x[j] for j in range(i + 1, n))
    return x


def format_system(matrix: Sequence[Sequence[float]], b: Sequence[float]) -> str:
    """Render the augmented matrix ``[A | b]`` as text framed by rule lines."""
    rows = _square_rows(matrix, b)
    lines = ["_________"]
    for row, rhs in zip(rows, b):
        cells = "".join(f"{v:3.2f} " for v in row)
        lines.append(f"{cells}| {float(rhs):3.2f} ")
    lines.append("_________")
    return "\n".join(lines) + "\n"