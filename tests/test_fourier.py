import math

import pytest

from calcmath.fourier import dft


def _sine(n):
    return [math.sin(2 * math.pi * i / n) for i in range(n)]


def test_empty_input():
    assert dft([]) == []
    assert dft([], invert=True) == []


def test_constant_goes_to_zero_frequency():
    result = dft([2.0, 2.0, 2.0, 2.0])
    assert result[0] == pytest.approx(2.0)
    assert all(abs(c) == pytest.approx(0.0, abs=1e-12) for c in result[1:])


def test_sine_has_single_frequency_pair():
    result = dft(_sine(10))
    assert result[1] == pytest.approx(-0.5j, abs=1e-12)
    assert result[9] == pytest.approx(0.5j, abs=1e-12)
    assert all(abs(c) < 1e-12 for c in result[2:9])
    assert abs(result[0]) < 1e-12


@pytest.mark.parametrize("values", [_sine(10), [1, 2j, -3, 4 + 1j, 0.5], [7.0]])
def test_round_trip(values):
    restored = dft(dft(values), invert=True)
    assert restored == pytest.approx([complex(v) for v in values], abs=1e-12)


def test_inverse_then_forward_round_trip():
    values = [1 - 1j, 2, 0, -1j, 3]
    assert dft(dft(values, invert=True)) == pytest.approx(values, abs=1e-12)


def test_real_input_is_conjugate_symmetric():
    values = [0.3, -1.2, 4.0, 2.5, 0.0, 1.1]
    result = dft(values)
    n = len(values)
    for k in range(1, n):
        assert result[k] == pytest.approx(result[n - k].conjugate(), abs=1e-12)


def test_parseval():
    values = [0.3, -1.2j, 4.0, 2.5 + 1j, 0.0]
    result = dft(values)
    energy_time = sum(abs(v) ** 2 for v in values)
    energy_freq = len(values) * sum(abs(c) ** 2 for c in result)
    assert energy_freq == pytest.approx(energy_time)


def test_linearity():
    a = [1.0, 2.0, -1.0, 0.5]
    b = [0.0, 1j, 3.0, -2.0]
    combined = dft([x + 2 * y for x, y in zip(a, b)])
    expected = [x + 2 * y for x, y in zip(dft(a), dft(b))]
    assert combined == pytest.approx(expected, abs=1e-12)