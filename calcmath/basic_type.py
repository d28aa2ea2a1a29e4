"""Core data containers: tabulated functions and matrices stored by diagonal and triangles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional


class MatrixType(IntEnum):
    """Storage layout of a :class:`Matrix`."""

    FULL = 0
    SYMMETRIC = 1
    DIAGONAL = 2


@dataclass(frozen=True)
class Matrix:
    """A square matrix of size ``n`` kept as its diagonal plus optional triangles."""

    n: int
    type: MatrixType
    diagonal: tuple[float, ...]
    upper_triangle: Optional[tuple[float, ...]] = None
    lower_triangle: Optional[tuple[float, ...]] = None


@dataclass(frozen=True)
class TableFunction:
    """A function given by its values on a mesh of points."""

    mesh: tuple[float, ...]
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "mesh", tuple(float(x) for x in self.mesh))
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))
        if len(self.mesh) != len(self.values):
            raise ValueError(
                f"mesh has {len(self.mesh)} points but {len(self.values)} values were given"
            )

    @property
    def n(self) -> int:
        """Number of mesh points."""
        return len(self.mesh)


def _as_tuple(values: Optional[Iterable[float]]) -> Optional[tuple[float, ...]]:
    return None if values is None else tuple(float(v) for v in values)


def make_matrix(
    n: int,
    diagonal: Iterable[float],
    upper_triangle: Optional[Iterable[float]] = None,
    lower_triangle: Optional[Iterable[float]] = None,
) -> Matrix:
    """Build a matrix whose type follows from which triangles are given.

    No triangles gives a diagonal matrix, only the upper one a symmetric
    matrix, and both a full matrix.
    """
    diag = _as_tuple(diagonal)
    if len(diag) != n:
        raise ValueError(f"diagonal has {len(diag)} entries, expected {n}")
    upper = _as_tuple(upper_triangle)
    lower = _as_tuple(lower_triangle)

    if upper is None and lower is None:
        return Matrix(n, MatrixType.DIAGONAL, diag)
    if lower is None:
        return Matrix(n, MatrixType.SYMMETRIC, diag, upper)
    return Matrix(n, MatrixType.FULL, diag, upper, lower)