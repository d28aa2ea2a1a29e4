# calcmath

Classic numerical methods in plain Python. The package needs only the
standard library.

## What is inside

- `calcmath.basic_type` holds the shared data types.
  - `TableFunction(mesh, values)` is a function given by its values on a mesh.
    It raises `ValueError` when the two lengths differ.
  - `Matrix` and `MatrixType` describe a matrix stored as a diagonal plus
    optional triangles. `MatrixType` has the members `FULL`, `SYMMETRIC` and
    `DIAGONAL`.
  - `make_matrix(n, diagonal, upper_triangle=None, lower_triangle=None)` picks
    the type from the triangles you pass. With no triangles the matrix is
    diagonal. With only the upper triangle it is symmetric. With both it is
    full.
- `calcmath.integration` holds composite quadrature rules over a mesh.
  - `uniform_mesh(n, x_min, x_max)` returns `n` equally spaced points. It
    needs at least two.
  - The rules are `rectangle_left_integral`, `rectangle_right_integral`,
    `trapezoidal_integral`, `simpson_1_3_integral`, `simpson_3_8_integral`
    and `boole_integral`. Each takes `(function, mesh)` and applies the rule
    to every cell of the mesh.
  - `Integration(n, function, a=0.0, b=1.0)` builds a uniform mesh on
    `[a, b]`. It offers the same rules as the methods `rectangle_left()`,
    `rectangle_right()`, `trapezoidal()`, `simpson_1_3()`, `simpson_3_8()`
    and `boole()`.
- `calcmath.interpolation` provides `linear_interpolation(x, data)`, which
  interpolates a `TableFunction` piecewise linearly. It uses the cell
  `[mesh[i], mesh[i+1])` that contains `x`. If no cell contains `x`, including
  when `x` is the last mesh point, it raises `ValueError`.
- `calcmath.fourier` provides `dft(values, invert=False)`, the discrete
  Fourier transform computed by direct O(N²) summation.
  - The forward transform uses `exp(-2πijk/N)` and is scaled by `1/N`.
  - The inverse uses `exp(+2πijk/N)` and is not scaled, so the two undo each
    other.
- `calcmath.linear_solvers` solves small linear systems.
  - `diagonal_solve(matrix, b)` uses only the diagonal of a `Matrix`.
  - `direct_gauss_solve(matrix, b)` uses Gaussian elimination without
    pivoting on a list of rows. A zero pivot raises `ZeroDivisionError`. The
    inputs are not modified.
  - `format_system(matrix, b)` renders the augmented matrix `[A | b]` as text.
- `calcmath.pentadiagonal` solves banded systems that have ones on the main
  diagonal.
  - `PentadiagonalMatrix(k, first_up_diag, second_up_diag, first_down_diag,
    second_down_diag)` describes such a matrix. It has four off-diagonals at
    offsets `+1`, `+k`, `-1` and `-k`, and all four must have the same
    length. `k` must be at least 1, and the size must be at least `k + 1`.
  - `PentadiagonalMatrix.solve(b)` and `pentadiagonal_solve(matrix, b)` return
    the solution.
- `calcmath.matmul` covers square matrices.
  - `matmul_n3(a, b)` multiplies two square matrices with the triple loop.
  - `format_matrix(matrix)` renders a matrix as text.
  - `padded_size(n)` gives the size to which an `n`×`n` matrix would be padded
    for block multiplication.
- `calcmath.series` holds series experiments.
  - `euler_gamma_estimate(n)` computes the harmonic sum minus `ln n`.
  - `basel_sums(n)` sums `1/i²` in ascending and in descending order.
  - `power(x, n)` raises `x` to a power by repeated multiplication.
  - `factorial(n)` returns the exact factorial.
  - `exp_series(x, n)` sums the first `n` terms of the Taylor series of
    `exp(x)`.
  - `BigInteger` holds a non-negative integer as digits in any base. It
    supports `+`, `*`, `int()` and `str()`, and is built with
    `BigInteger.from_int(n, base=10)`.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Usage

Integrate over a uniform mesh:

```python
import math
from calcmath.integration import uniform_mesh, trapezoidal_integral, boole_integral

mesh = uniform_mesh(1000, 0.0, math.pi)
print(trapezoidal_integral(math.sin, mesh))  # close to 2
print(boole_integral(math.sin, mesh))
```

Use the class form:

```python
import math
from calcmath.integration import Integration

integral = Integration(1000, math.sin, 0.0, math.pi)
print(integral.simpson_1_3())
print(integral.simpson_3_8())
```

Interpolate a tabulated function:

```python
from calcmath.basic_type import TableFunction
from calcmath.integration import uniform_mesh
from calcmath.interpolation import linear_interpolation

mesh = uniform_mesh(100, 0.0, 1.0)
data = TableFunction(mesh, [x * x for x in mesh])
print(linear_interpolation(0.501, data))
```

Solve a dense system:

```python
from calcmath.linear_solvers import direct_gauss_solve

print(direct_gauss_solve([[2, 3, -1], [1, -2, 1], [1, 0, 2]], [9, 3, 2]))
```

Take the discrete Fourier transform of a sampled sine and invert it:

```python
import math
from calcmath.fourier import dft

samples = [math.sin(2 * math.pi * i / 10) for i in range(10)]
spectrum = dft(samples)
restored = dft(spectrum, invert=True)
```

## Command line

The package installs the `calcmath` command. It takes one of three
subcommands.

```
calcmath integrate [--function {sin,x,x2}] [--points N] [--a A] [--b B]
calcmath interpolate [--function {sin,x,x2}] [--points N] [--a A] [--b B] [--x X]
calcmath solve
```

- `integrate` prints the value of every quadrature rule on a uniform mesh. The
  defaults are `x` on `[0, 1]` with 100 points.
- `interpolate` tabulates the function on the mesh and prints its linear
  interpolation at `--x`. The default point is `0.501`.
- `solve` prints the solutions of a fixed 3×3 diagonal system and a fixed 3×3
  dense system.

## Limitations

- Gaussian elimination does no pivoting, so a zero pivot stops it.
- There is no tridiagonal or iterative (conjugate gradient) solver.
- `padded_size` only computes the padded size. There is no block
  (Strassen-style) multiplication.
- The command line offers only the fixed demonstrations above. It does not
  read data from files.