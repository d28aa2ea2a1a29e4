"""Numerical methods: quadrature, interpolation, Fourier transform, linear solvers and series."""

__version__ = "0.1.0"