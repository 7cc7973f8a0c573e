import math

import pytest

import arithmetic
from errors import ErrorKind
from results import Err, Ok


@pytest.mark.parametrize("a, b", [(2.0, 3.0), (-1.5, 0.25), (0.1, 0.2), (1e308, 1e308), (0.0, -0.0)])
def test_total_operations_follow_float_semantics(a, b):
    assert arithmetic.add(a, b) == a + b
    assert arithmetic.subtract(a, b) == a - b
    assert arithmetic.multiply(a, b) == a * b


def test_add_overflow_gives_infinity_not_error():
    assert math.isinf(arithmetic.add(1e308, 1e308))


@pytest.mark.parametrize("a", [0.0, 1.0, -7.5, 1e300])
def test_divide_by_zero_is_an_error(a):
    result = arithmetic.divide(a, 0)
    assert isinstance(result, Err)
    assert result.kind is ErrorKind.DIVISION_BY_ZERO


def test_divide_by_negative_zero_is_an_error():
    assert isinstance(arithmetic.divide(5.0, -0.0), Err)


def test_divide_returns_quotient():
    assert arithmetic.divide(10.0, 4.0) == Ok(2.5)


def test_divide_overflow_is_accepted_numeric_behavior():
    result = arithmetic.divide(1e308, 1e-308)
    assert isinstance(result, Ok)
    assert result.value == float("inf")
