"""Lipmaa's decomposition of a non-negative integer into four squares."""

from __future__ import annotations

from math import isqrt

from zkcommit.primes import is_probable_prime
from zkcommit.randomness import get_random_int

__all__ = [
    "lipmaa_decompose",
    "lipmaa_decomposition",
    "sqrt_of_minus_one",
    "decompose_prime_to_two_squares",
]


def _special_decomposition(n: int) -> tuple[int, int, int, int] | None:
    """Checks the argument and handles the special cases 0, 1 and 2."""
    if n < 0:
        raise ValueError("n cannot be negative")
    if n == 0:
        return (0, 0, 0, 0)
    if n == 1:
        return (1, 0, 0, 0)
    if n == 2:
        return (1, 1, 0, 0)
    return None


def lipmaa_decompose(n: int) -> tuple[int, int, int, int]:
    """Four non-negative roots whose squares sum up to exactly ``n``.

    Raises ValueError when ``n`` is negative.
    """
    special = _special_decomposition(n)
    if special is not None:
        return special

    # n = 2^t * (2k + 1); t is the index of the lowest set bit
    t = (n & -n).bit_length() - 1
    k = n >> (t + 1)

    if t == 1:
        p, w1, w2 = _find_prime_and_two_roots(n)
        w3, w4 = decompose_prime_to_two_squares(sqrt_of_minus_one(p), p)
        roots = [w1, w2, w3, w4]
    elif t % 2 == 1:
        # represent m = n / 2^(t-1) and scale by s = 2^((t-1)/2)
        shift = (t - 1) // 2
        roots = [w << shift for w in lipmaa_decompose(n >> (t - 1))]
    else:
        # represent m = 2(2k+1), then pair roots of equal parity
        w = list(lipmaa_decompose(4 * k + 2))
        parity = w[0] & 1
        j = next(i for i in (1, 2, 3) if (w[i] & 1) == parity)
        w[1], w[j] = w[j], w[1]
        combined = [w[0] + w[1], w[0] - w[1], w[2] + w[3], w[2] - w[3]]
        if t >= 2:
            scale = 1 << (t // 2 - 1)
            roots = [x * scale for x in combined]
        else:
            roots = [x // 2 for x in combined]

    return tuple(abs(x) for x in roots)  # type: ignore[return-value]


def lipmaa_decomposition(n: int) -> list[int]:
    """The non-zero roots of the four-square decomposition of ``n``."""
    return [root for root in lipmaa_decompose(n) if root != 0]


def _find_prime_and_two_roots(n: int) -> tuple[int, int, int]:
    """Random w1, w2 of different parity such that p = n - w1^2 - w2^2 is prime."""
    w1_upper = isqrt(n)
    while True:
        w1 = get_random_int(w1_upper)
        w2 = get_random_int(isqrt(n - w1 * w1))
        if (w1 & 1) == (w2 & 1):
            w1 -= 1
            if w1 <= 0:
                continue
        p = n - w1 * w1 - w2 * w2
        if is_probable_prime(p, 20):
            return p, w1, w2


def decompose_prime_to_two_squares(u: int, p: int) -> tuple[int, int]:
    """x, y with x^2 + y^2 = p, from a square root ``u`` of -1 modulo prime ``p``.

    Runs the Euclidean algorithm on (u, p) and returns the first two
    remainders not greater than sqrt(p).
    """
    a, b = u, p
    r = a % b
    x, y = a, r
    sqrt_p = isqrt(p)
    while x > sqrt_p or x == y:
        x, y = a, r
        r = a % b
        a, b = b, r
    return x, y


def sqrt_of_minus_one(p: int) -> int:
    """A square root of -1 modulo the prime ``p``."""
    if p == 1:
        return 0
    if p == 2:
        return 1
    if p % 4 != 1:
        raise ValueError("-1 has no square root modulo p")

    u = p - 1
    s = (u & -u).bit_length() - 1
    q = u >> s
    k = (q - 1) >> 1

    r = pow(u, k, p)
    n = r * r % p * u % p
    r = r * u % p
    if n == 1:
        return r

    z = 2
    while pow(z, (p - 1) // 2, p) == 1:
        z += 1
    c = pow(z, q, p)

    while n > 1:
        m = n
        t = s
        s = 0
        while m != 1:
            m = m * m % p
            s += 1
        t -= s
        c = pow(c, 1 << (t - 1), p)
        r = r * c % p
        c = c * c % p
        n = n * c % p
    return r