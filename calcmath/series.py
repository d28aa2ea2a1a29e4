"""Series experiments: harmonic and Basel sums, exponential series, big integers."""

from __future__ import annotations

import math
from dataclasses import dataclass

EULER_GAMMA = 0.577215664901532860606512090082


def euler_gamma_estimate(n: int) -> float:
    """Approximate Euler's constant as ``sum(1/k, k=1..n) - ln(n)``."""
    if n < 1:
        raise ValueError("n must be positive")
    return math.fsum(1.0 / i for i in range(n, 0, -1)) - math.log(n)


def basel_sums(n: int) -> tuple[float, float]:
    """Sum ``1/i**2`` for ``i`` in ``1..n`` in ascending and in descending order."""
    if n < 1:
        raise ValueError("n must be positive")
    ascending = 0.0
    for i in range(1, n + 1):
        ascending += 1.0 / (i * i)
    descending = 0.0
    for i in range(n, 0, -1):
        descending += 1.0 / (i * i)
    return ascending, descending


def power(x: float, n: int) -> float:
    """Raise ``x`` to a non-negative integer power by repeated multiplication."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = 1.0
    for _ in range(n):
        result *= x
    return result


def factorial(n: int) -> int:
    """Exact factorial of a non-negative integer."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def exp_series(x: float, n: int) -> float:
    """Partial sum of the Taylor series of ``exp(x)`` with ``n`` terms."""
    if n < 0:
        raise ValueError("number of terms must be non-negative")
    return sum((power(x, i) / factorial(i) for i in range(n)), 0.0)


@dataclass(frozen=True)
class BigInteger:
    """Non-negative integer held as digits in ``base``, least significant first."""

    digits: tuple[int, ...]
    base: int = 10

    def __post_init__(self) -> None:
        if self.base < 2:
            raise ValueError("base must be at least 2")
        digits = [int(d) for d in self.digits] or [0]
        if any(not 0 <= d < self.base for d in digits):
            raise ValueError(f"digits must lie in [0, {self.base})")
        while len(digits) > 1 and digits[-1] == 0:
            digits.pop()
        object.__setattr__(self, "digits", tuple(digits))

    @classmethod
    def from_int(cls, n: int, base: int = 10) -> BigInteger:
        """Split a non-negative integer into its digits in ``base``."""
        if n < 0:
            raise ValueError("only non-negative integers are supported")
        if base < 2:
            raise ValueError("base must be at least 2")
        digits = []
        while True:
            n, digit = divmod(n, base)
            digits.append(digit)
            if n == 0:
                break
        return cls(tuple(digits), base)

    def _check_base(self, other: BigInteger) -> None:
        if self.base != other.base:
            raise ValueError(f"cannot combine base {self.base} with base {other.base}")

    def __add__(self, other: object) -> BigInteger:
        if not isinstance(other, BigInteger):
            return NotImplemented
        self._check_base(other)
        size = max(len(self.digits), len(other.digits))
        a = self.digits + (0,) * (size - len(self.digits))
        b = other.digits + (0,) * (size - len(other.digits))
        result = []
        carry = 0
        for x, y in zip(a, b):
            carry, digit = divmod(x + y + carry, self.base)
            result.append(digit)
        result.append(carry)
        return BigInteger(tuple(result), self.base)

    def __mul__(self, other: object) -> BigInteger:
        if not isinstance(other, BigInteger):
            return NotImplemented
        self._check_base(other)
        result = [0] * (len(self.digits) + len(other.digits))
        for i, x in enumerate(self.digits):
            carry = 0
            for j, y in enumerate(other.digits):
                carry, result[i + j] = divmod(result[i + j] + x * y + carry, self.base)
            result[i + len(other.digits)] += carry
        return BigInteger(tuple(result), self.base)

    def __int__(self) -> int:
        value = 0
        for digit in reversed(self.digits):
            value = value * self.base + digit
        return value

    def __str__(self) -> str:
        return "".join(str(d) for d in reversed(self.digits))