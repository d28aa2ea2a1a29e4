import pytest

from calcmath.basic_type import TableFunction
from calcmath.integration import uniform_mesh
from calcmath.interpolation import linear_interpolation


def _table(function, n=100, a=0.0, b=1.0):
    mesh = uniform_mesh(n, a, b)
    return TableFunction(mesh, [function(x) for x in mesh])


def test_identity_reproduced():
    data = _table(lambda x: x)
    assert linear_interpolation(0.501, data) == pytest.approx(0.501)


def test_linear_function_reproduced():
    data = _table(lambda x: 2 * x + 1, n=10, a=-1.0, b=3.0)
    for x in (-1.0, -0.3, 0.0, 1.7, 2.99):
        assert linear_interpolation(x, data) == pytest.approx(2 * x + 1)


def test_value_at_node_is_table_value():
    data = TableFunction([0.0, 1.0, 2.0], [5.0, -3.0, 8.0])
    assert linear_interpolation(1.0, data) == -3.0


def test_value_between_nodes_lies_between_values():
    data = TableFunction([0.0, 1.0, 2.0], [5.0, -3.0, 8.0])
    y = linear_interpolation(1.25, data)
    assert -3.0 < y < 8.0


def test_right_end_is_outside():
    data = TableFunction([0.0, 1.0, 2.0], [5.0, -3.0, 8.0])
    with pytest.raises(ValueError):
        linear_interpolation(2.0, data)


@pytest.mark.parametrize("x", [-0.1, 2.5])
def test_out_of_range_raises(x):
    data = TableFunction([0.0, 1.0, 2.0], [5.0, -3.0, 8.0])
    with pytest.raises(ValueError):
        linear_interpolation(x, data)