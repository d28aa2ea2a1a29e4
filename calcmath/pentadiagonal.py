"""Solver for pentadiagonal systems with a unit main diagonal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class PentadiagonalMatrix:
    """A matrix with ones on the main diagonal and four off-diagonals.

    Row ``i`` holds ``first_up_diag[i]`` at column ``i+1``,
    ``second_up_diag[i]`` at column ``i+k``, ``first_down_diag[i]`` at column
    ``i-1`` and ``second_down_diag[i]`` at column ``i-k``; entries that would
    fall outside the matrix are ignored.
    """

    k: int
    first_up_diag: tuple[float, ...]
    second_up_diag: tuple[float, ...]
    first_down_diag: tuple[float, ...]
    second_down_diag: tuple[float, ...]

    def __post_init__(self) -> None:
        for name in ("first_up_diag", "second_up_diag", "first_down_diag", "second_down_diag"):
            object.__setattr__(self, name, tuple(float(v) for v in getattr(self, name)))
        n = len(self.first_up_diag)
        if any(
            len(d) != n
            for d in (self.second_up_diag, self.first_down_diag, self.second_down_diag)
        ):
            raise ValueError("all diagonals must have the same length")
        if self.k < 1:
            raise ValueError("offset k must be at least 1")
        if n < self.k + 1:
            raise ValueError(f"matrix of size {n} is too small for offset {self.k}")

    @property
    def n(self) -> int:
        """Size of the matrix."""
        return len(self.first_up_diag)

    def _reduced_row(
        self, p: list[list[float]], r: list[float], i: int
    ) -> tuple[list[float], float]:
        """Express ``x[i-k]`` through ``x[i-1]`` .. ``x[i+k-2]``."""
        k = self.k
        p2 = [[0.0] * k for _ in range(k + 1)]
        r2 = [0.0] * (k + 1)
        p2[0][0] = 1.0
        p2[1] = list(p[i - 1])
        r2[1] = r[i - 1]
        for j in range(2, k + 1):
            source = p[i - j]
            row = source[j - 1:k] + [0.0] * (j - 1)
            rhs = r[i - j]
            for l in range(1, j):
                coeff = source[j - l - 1]
                row = [a + coeff * c for a, c in zip(row, p2[l])]
                rhs += coeff * r2[l]
            p2[j] = row
            r2[j] = rhs
        return p2[k], r2[k]

    def solve(self, b: Sequence[float]) -> list[float]:
        """Solve ``A x = b`` and return ``x``."""
        n, k = self.n, self.k
        if len(b) != n:
            raise ValueError(f"right-hand side has {len(b)} entries, expected {n}")
        b = [float(v) for v in b]
        fud, sud = self.first_up_diag, self.second_up_diag
        fdd, sdd = self.first_down_diag, self.second_down_diag

        p = [[0.0] * k for _ in range(n)]
        r = [0.0] * n

        r[0] = b[0]
        p[0][0] = -fud[0]
        p[0][k - 1] = -sud[0]

        for i in range(1, k):
            di = fdd[i]
            frac = 1.0 / (1.0 + p[i - 1][0] * di)
            p[i][k - 1] = -sud[i] * frac
            for j in range(k - 1):
                p[i][j] = -di * p[i - 1][j + 1] * frac
            p[i][0] += -fud[i] * frac
            r[i] = (b[i] - di * r[i - 1]) * frac

        for i in range(k, n - 1):
            p2k, r2k = self._reduced_row(p, r, i)
            di, ei = fdd[i], sdd[i]
            frac = 1.0 / (1.0 + p[i - 1][0] * di + p2k[0] * ei)
            p[i][k - 1] = -sud[i] * frac
            for j in range(k - 1):
                p[i][j] = -(di * p[i - 1][j + 1] + ei * p2k[j + 1]) * frac
            p[i][0] += -fud[i] * frac
            r[i] = (b[i] - di * r[i - 1] - ei * r2k) * frac

        p2k, r2k = self._reduced_row(p, r, n - 1)
        di, ei = fdd[n - 1], sdd[n - 1]

        x = [0.0] * n
        x[n - 1] = (b[n - 1] - di * r[n - 2] - ei * r2k) / (
            1.0 + di * p[n - 2][0] + ei * p2k[0]
        )
        for i in range(n - 2, -1, -1):
            width = min(k, n - i - 1)
            x[i] = r[i] + sum(p[i][j] * x[i + 1 + j] for j in range(width))
        return x


def pentadiagonal_solve(matrix: PentadiagonalMatrix, b: Sequence[float]) -> list[float]:
    """Solve ``matrix @ x = b``."""
    return matrix.solve(b)