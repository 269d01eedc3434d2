"""Basic number helpers: byte concatenation, hashing, modular arithmetic."""

from __future__ import annotations

import hashlib
import math
from dataclasses import dataclass

__all__ = [
    "Pair",
    "Triple",
    "concatenate_numbers",
    "hash_into_bytes",
    "hash_numbers",
    "exponentiate",
    "lcm",
    "contains",
]


@dataclass
class Pair:
    """Two integers kept together."""

    a: int
    b: int


@dataclass
class Triple:
    """Three integers kept together."""

    a: int
    b: int
    c: int


def _to_bytes(n: int) -> bytes:
    """Big-endian bytes of the absolute value of ``n``; zero gives no bytes."""
    n = abs(n)
    return n.to_bytes((n.bit_length() + 7) // 8, "big")


def concatenate_numbers(*numbers: int) -> bytes:
    """Concatenate the big-endian byte forms of the given numbers."""
    return b"".join(_to_bytes(n) for n in numbers)


def hash_into_bytes(*numbers: int) -> bytes:
    """SHA-512 digest of the concatenated numbers."""
    return hashlib.sha512(concatenate_numbers(*numbers)).digest()


def hash_numbers(*numbers: int) -> int:
    """SHA-512 digest of the concatenated numbers, read as an integer."""
    return int.from_bytes(hash_into_bytes(*numbers), "big")


def exponentiate(x: int, y: int, m: int) -> int:
    """Compute x^y mod m; a negative y uses the modular inverse."""
    if y >= 0:
        return pow(x, y, m)
    return pow(pow(x, -y, m), -1, m)


def lcm(x: int, y: int) -> int:
    """Least common multiple of x and y."""
    return (x * y) // math.gcd(x, y)


def contains(arr, el) -> bool:
    """Whether ``el`` occurs in ``arr``."""
    return el in arr