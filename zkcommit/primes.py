"""Primality testing and generation of Sophie Germain and safe primes."""

from __future__ import annotations

import secrets

__all__ = ["is_probable_prime", "get_germain_prime", "get_safe_prime"]

_SIEVE_PRIMES = (3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53)
_SIEVE_PRODUCT = 16294579238595022365

_TRIAL_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
)


def _miller_rabin_round(n: int, d: int, s: int, base: int) -> bool:
    x = pow(base, d, n)
    if x in (1, n - 1):
        return True
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def is_probable_prime(n: int, rounds: int = 20) -> bool:
    """Miller-Rabin test with base 2 and ``rounds`` random bases."""
    if n < 2:
        return False
    for p in _TRIAL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    if not _miller_rabin_round(n, d, s, 2):
        return False
    return all(
        _miller_rabin_round(n, d, s, secrets.randbelow(n - 3) + 2)
        for _ in range(rounds)
    )


def _sieve_rejects(m: int, bits: int) -> bool:
    """Whether m or 2m+1 has one of the sieve primes as a proper factor."""
    m1 = (2 * m + 1) % _SIEVE_PRODUCT
    for prime in _SIEVE_PRIMES:
        if m % prime == 0 and (bits > 6 or m != prime):
            return True
        if m1 % prime == 0 and (bits > 6 or m1 != prime):
            return True
    return False


def _candidate(bits: int) -> int | None:
    top = bits % 8 or 8
    buf = bytearray(secrets.token_bytes((bits + 7) // 8))
    buf[0] &= (1 << top) - 1
    if top >= 2:
        buf[0] |= 3 << (top - 2)
    else:
        buf[0] |= 1
        if len(buf) > 1:
            buf[1] |= 0x80
    buf[-1] |= 1
    p = int.from_bytes(buf, "big")
    mod = p % _SIEVE_PRODUCT
    for delta in range(0, 1 << 20, 2):
        if not _sieve_rejects(mod + delta, bits):
            return p + delta
    return None


def get_germain_prime(bits: int) -> int:
    """A prime p of exactly ``bits`` bits such that 2p + 1 is prime too."""
    if bits < 2:
        raise ValueError("prime size must be at least 2-bit")
    while True:
        p = _candidate(bits)
        if p is None or p.bit_length() != bits:
            continue
        if is_probable_prime(p) and is_probable_prime(2 * p + 1):
            return p


def get_safe_prime(bits: int) -> int:
    """A safe prime p = 2q + 1 of exactly ``bits`` bits where q is prime."""
    p = 2 * get_germain_prime(bits - 1) + 1
    if p.bit_length() != bits:
        raise ValueError("bit length not correct")
    return p