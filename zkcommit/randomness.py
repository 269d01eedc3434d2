"""Cryptographically secure random integers."""

from __future__ import annotations

import math
import secrets

__all__ = [
    "get_random_int",
    "get_random_int_also_neg",
    "get_random_int_from_range",
    "get_random_int_of_length",
    "get_random_zn_invertible_element",
]


def get_random_int(max_value: int) -> int:
    """Random integer from [0, max_value)."""
    if max_value <= 0:
        raise ValueError("max_value must be positive")
    return secrets.randbelow(max_value)


def get_random_int_also_neg(max_value: int) -> int:
    """Random integer from (-max_value, max_value)."""
    n = get_random_int(max_value)
    if get_random_int(2) == 0:
        n = -n
    return n


def get_random_int_from_range(min_value: int, max_value: int) -> int:
    """Random integer from [min_value, max_value)."""
    if min_value >= max_value:
        raise ValueError("max has to be bigger than min")
    return min_value + get_random_int(max_value - min_value)


def get_random_int_of_length(bit_length: int) -> int:
    """Random integer r with 2^(bit_length-1) < r < 2^bit_length."""
    low = 1 << (bit_length - 1)
    r = low + get_random_int(low)
    if not (low < r < (1 << bit_length)):
        raise ValueError("parameter not properly chosen")
    return r


def get_random_zn_invertible_element(n: int) -> int:
    """Random element of Z_n*."""
    while True:
        r = get_random_int(n)
        if math.gcd(r, n) == 1:
            return r