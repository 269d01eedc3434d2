"""Polynomials over Z_p and Lagrange interpolation."""

from __future__ import annotations

from dataclasses import dataclass

from zkcommit.randomness import get_random_int

__all__ = ["Polynomial", "new_random_polynomial", "lagrange_interpolation"]


@dataclass
class Polynomial:
    """p(x) = a_0 + a_1 x + ... + a_d x^d with coefficients in Z_prime."""

    coefficients: list[int]
    prime: int

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def set_coefficient(self, index: int, coefficient: int) -> None:
        """Replace the coefficient at ``index``."""
        self.coefficients[index] = coefficient

    def get_values(self, points) -> dict[int, int]:
        """Values of the polynomial at each of the given points."""
        return {point: self.get_value(point) for point in points}

    def get_value(self, point: int) -> int:
        """Value of the polynomial at ``point`` modulo the prime."""
        total = sum(
            coeff * pow(point, i, self.prime)
            for i, coeff in enumerate(self.coefficients)
        )
        return total % self.prime


def new_random_polynomial(degree: int, prime: int) -> Polynomial:
    """Polynomial of the given degree with random coefficients below ``prime``."""
    return Polynomial([get_random_int(prime) for _ in range(degree + 1)], prime)


def lagrange_interpolation(a: int, points: dict[int, int], prime: int) -> int:
    """Evaluate at ``a`` the polynomial through ``points`` (x -> y) modulo ``prime``."""
    value = 0
    for key, val in points.items():
        numerator = 1
        denominator = 1
        for other in points:
            if other == key:
                continue
            numerator = numerator * (a - other) % prime
            denominator = denominator * (key - other) % prime
        basis = numerator * pow(denominator, -1, prime) % prime
        value += val * basis
    return value % prime