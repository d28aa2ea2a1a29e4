import random

import pytest

from calcmath.pentadiagonal import PentadiagonalMatrix, pentadiagonal_solve

SUD = [0.56838519, 0.59106732, 0.60376811, 0.06784427, 0.97604943,
       0.68617165, 0.03754737, 0.0, 0.0, 0.0]
FUD = [0.21496537, 0.23166263, 0.55616111, 0.22583128, 0.10656655,
       0.54675014, 0.37189687, 0.38990937, 0.98233873, 0.0]
FDD = [0.0, 0.68343727, 0.89475701, 0.5148094, 0.03900925,
       0.68854438, 0.89352028, 0.2643208, 0.26646279, 0.9347437]
SDD = [0.0, 0.0, 0.0, 0.88109126, 0.62575212,
       0.13503155, 0.30101654, 0.21706122, 0.4206771, 0.10920916]
B = [0.94122422, 0.86527486, 0.66331387, 0.51497868, 0.69172562,
     0.99599477, 0.05788199, 0.26399862, 0.39642472, 0.60151007]
EXPECTED = [-1.06064525, 2.14129119, -2.47122364, 2.71218541, 0.03613519,
            -0.48000190, 0.02015260, -0.75710842, 2.58505392, -1.81705365]


def _dense(matrix):
    n, k = matrix.n, matrix.k
    rows = [[0.0] * n for _ in range(n)]
    for i in range(n):
        rows[i][i] += 1.0
        if i + 1 < n:
            rows[i][i + 1] += matrix.first_up_diag[i]
        if i + k < n:
            rows[i][i + k] += matrix.second_up_diag[i]
        if i - 1 >= 0:
            rows[i][i - 1] += matrix.first_down_diag[i]
        if i - k >= 0:
            rows[i][i - k] += matrix.second_down_diag[i]
    return rows


def _apply(rows, x):
    return [sum(a * v for a, v in zip(row, x)) for row in rows]


def _example():
    return PentadiagonalMatrix(3, FUD, SUD, FDD, SDD)


def test_source_example():
    assert _example().solve(B) == pytest.approx(EXPECTED, abs=1e-7)


def test_function_matches_method():
    matrix = _example()
    assert pentadiagonal_solve(matrix, B) == pytest.approx(matrix.solve(B))


def test_source_example_residual():
    matrix = _example()
    x = matrix.solve(B)
    assert _apply(_dense(matrix), x) == pytest.approx(B, abs=1e-9)


def test_identity_returns_rhs():
    zeros = [0.0] * 5
    matrix = PentadiagonalMatrix(2, zeros, zeros, zeros, zeros)
    b = [1.5, -2.0, 3.25, 0.0, 7.0]
    assert matrix.solve(b) == pytest.approx(b)


@pytest.mark.parametrize("n,k", [(6, 2), (8, 3), (12, 4), (5, 4)])
def test_random_system_residual(n, k):
    rng = random.Random(n * 100 + k)

    def diag():
        return [rng.uniform(0.0, 0.2) for _ in range(n)]

    matrix = PentadiagonalMatrix(k, diag(), diag(), diag(), diag())
    b = [rng.uniform(-1.0, 1.0) for _ in range(n)]
    x = matrix.solve(b)
    assert _apply(_dense(matrix), x) == pytest.approx(b, abs=1e-10)


def test_wrong_rhs_length():
    with pytest.raises(ValueError):
        _example().solve(B[:-1])


def test_mismatched_diagonals():
    with pytest.raises(ValueError):
        PentadiagonalMatrix(3, FUD, SUD[:-1], FDD, SDD)


def test_matrix_too_small_for_offset():
    zeros = [0.0] * 3
    with pytest.raises(ValueError):
        PentadiagonalMatrix(3, zeros, zeros, zeros, zeros)


def test_offset_must_be_positive():
    zeros = [0.0] * 4
    with pytest.raises(ValueError):
        PentadiagonalMatrix(0, zeros, zeros, zeros, zeros)