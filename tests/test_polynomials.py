import pytest

from zkcommit.polynomials import (
    Polynomial,
    lagrange_interpolation,
    new_random_polynomial,
)

PRIME = 2**127 - 1


def test_get_value_small_example():
    assert Polynomial([1, 2, 3], 7).get_value(2) == 3


def test_value_at_zero_is_constant_term():
    poly = new_random_polynomial(4, PRIME)
    assert poly.get_value(0) == poly.coefficients[0]


def test_random_polynomial_shape():
    poly = new_random_polynomial(5, PRIME)
    assert poly.degree == 5
    assert len(poly.coefficients) == 6
    assert all(0 <= c < PRIME for c in poly.coefficients)


def test_set_coefficient():
    poly = new_random_polynomial(3, PRIME)
    poly.set_coefficient(0, 42)
    assert poly.coefficients[0] == 42
    assert poly.get_value(0) == 42


def test_get_values_keys_and_values():
    poly = new_random_polynomial(2, PRIME)
    points = [1, 2, 3, 10]
    values = poly.get_values(points)
    assert sorted(values) == points
    assert all(values[p] == poly.get_value(p) for p in points)


def test_negative_point_is_reduced():
    poly = Polynomial([0, 1], 11)
    assert poly.get_value(-1) == 10


@pytest.mark.parametrize("degree", [0, 1, 3, 6])
def test_interpolation_recovers_secret(degree):
    poly = new_random_polynomial(degree, PRIME)
    points = poly.get_values(range(1, degree + 2))
    assert lagrange_interpolation(0, points, PRIME) == poly.coefficients[0]


def test_interpolation_at_other_point():
    poly = new_random_polynomial(3, PRIME)
    points = poly.get_values([5, 9, 13, 21])
    assert lagrange_interpolation(100, points, PRIME) == poly.get_value(100)


def test_interpolation_with_duplicate_x_mod_prime_raises():
    with pytest.raises(ValueError):
        lagrange_interpolation(0, {1: 3, 8: 4}, 7)