"""Command line demonstrations of quadrature, interpolation and linear solvers."""

from __future__ import annotations

import argparse
import math
from typing import Callable, Sequence

from calcmath.basic_type import TableFunction, make_matrix
from calcmath.integration import (
    boole_integral,
    rectangle_right_integral,
    simpson_1_3_integral,
    simpson_3_8_integral,
    trapezoidal_integral,
    uniform_mesh,
)
from calcmath.interpolation import linear_interpolation
from calcmath.linear_solvers import diagonal_solve, direct_gauss_solve

FUNCTIONS: dict[str, Callable[[float], float]] = {
    "x": lambda x: x,
    "x2": lambda x: x * x,
    "sin": math.sin,
}


def _integrate(args: argparse.Namespace) -> None:
    function = FUNCTIONS[args.function]
    mesh = uniform_mesh(args.points, args.a, args.b)
    rules = [
        ("Rectangle method", rectangle_right_integral),
        ("Trapezoidal rule", trapezoidal_integral),
        ("Simpson 1/3 rule", simpson_1_3_integral),
        ("Simpson 3/8 rule", simpson_3_8_integral),
        ("Boole rule      ", boole_integral),
    ]
    for label, rule in rules:
        print(f"{label} {rule(function, mesh):20.15f} ")


def _interpolate(args: argparse.Namespace) -> None:
    function = FUNCTIONS[args.function]
    mesh = uniform_mesh(args.points, args.a, args.b)
    data = TableFunction(mesh, [function(x) for x in mesh])
    print(f"Linear interpolation {linear_interpolation(args.x, data):20.15f} ")


def _solve(args: argparse.Namespace) -> None:
    diagonal = make_matrix(3, [1, 2, 3])
    x = diagonal_solve(diagonal, [1, 2, 3])
    print(", ".join(f"{v:f}" for v in x) + " ")

    matrix = [[2, 3, -1], [1, -2, 1], [1, 0, 2]]
    result = direct_gauss_solve(matrix, [9, 3, 2])
    print(", ".join(f"{v:f}" for v in result) + " ")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="calcmath", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("integrate", _integrate, "integrate a function with every quadrature rule"),
        ("interpolate", _interpolate, "interpolate a tabulated function at a point"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--function", choices=sorted(FUNCTIONS), default="x")
        sub.add_argument("--points", type=int, default=100)
        sub.add_argument("--a", type=float, default=0.0)
        sub.add_argument("--b", type=float, default=1.0)
        if name == "interpolate":
            sub.add_argument("--x", type=float, default=0.501)
        sub.set_defaults(handler=handler)

    solve = commands.add_parser("solve", help="solve sample diagonal and dense systems")
    solve.set_defaults(handler=_solve)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv`` and return the exit status."""
    parser = _parser()
    args = parser.parse_args(argv)
    try:
        args.handler(args)
    except ValueError as exc:
        parser.error(str(exc))
    return 0