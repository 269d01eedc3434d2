"""Damgard-Fujisaki integer commitments in special RSA groups.

The scheme is statistically hiding and works in a group of hidden order
(the quadratic residues modulo a product of two safe primes). Any integer
can be committed to; a bound ``T`` is needed only for the associated proofs.
"""

from __future__ import annotations

from dataclasses import dataclass

from zkcommit.common import exponentiate
from zkcommit.primes import get_safe_prime, is_probable_prime
from zkcommit.randomness import get_random_int, get_random_zn_invertible_element

__all__ = ["SpecialRSAPrimes", "SpecialRSAGroup", "Committer", "Receiver"]


@dataclass(frozen=True)
class SpecialRSAPrimes:
    """Safe primes p = 2*p1 + 1 and q = 2*q1 + 1 behind a special RSA modulus."""

    p: int
    q: int
    p1: int
    q1: int


class SpecialRSAGroup:
    """Group of quadratic residues modulo n = p*q where p and q are safe primes.

    A group built from its modulus alone supports arithmetic but knows
    neither its order nor its primes.
    """

    def __init__(self, n: int, primes: SpecialRSAPrimes | None = None) -> None:
        self.n = n
        self._primes = primes

    @classmethod
    def generate(cls, safe_prime_bits: int) -> SpecialRSAGroup:
        """New group whose modulus is a product of two fresh safe primes."""
        p = get_safe_prime(safe_prime_bits)
        q = get_safe_prime(safe_prime_bits)
        while q == p:
            q = get_safe_prime(safe_prime_bits)
        return cls.from_primes(SpecialRSAPrimes(p, q, (p - 1) // 2, (q - 1) // 2))

    @classmethod
    def from_primes(cls, primes: SpecialRSAPrimes) -> SpecialRSAGroup:
        """Group built from known safe primes; raises ValueError if they are not."""
        if primes.p != 2 * primes.p1 + 1 or primes.q != 2 * primes.q1 + 1:
            raise ValueError("p and q must be of the form 2*p1 + 1 and 2*q1 + 1")
        if primes.p == primes.q:
            raise ValueError("p and q must differ")
        if not all(
            is_probable_prime(x) for x in (primes.p, primes.q, primes.p1, primes.q1)
        ):
            raise ValueError("p, q, p1 and q1 must all be prime")
        return cls(primes.p * primes.q, primes)

    @classmethod
    def public(cls, n: int) -> SpecialRSAGroup:
        """Group known only by its modulus."""
        return cls(n)

    @property
    def order(self) -> int | None:
        """Order p1*q1 of the group, or None when the primes are unknown."""
        if self._primes is None:
            return None
        return self._primes.p1 * self._primes.q1

    def exp(self, base: int, exponent: int) -> int:
        """base^exponent mod n; negative exponents use the inverse."""
        return exponentiate(base, exponent, self.n)

    def mul(self, x: int, y: int) -> int:
        """x*y mod n."""
        return x * y % self.n

    def inv(self, x: int) -> int:
        """Inverse of x modulo n."""
        return pow(x, -1, self.n)

    def get_random_generator(self) -> int:
        """Random generator of the group of quadratic residues."""
        primes = self.get_primes()
        while True:
            g = pow(get_random_zn_invertible_element(self.n), 2, self.n)
            if g == 1:
                continue
            if pow(g, primes.p1, self.n) == 1 or pow(g, primes.q1, self.n) == 1:
                continue
            return g

    def get_primes(self) -> SpecialRSAPrimes:
        """The primes behind the modulus; raises ValueError for a public group."""
        if self._primes is None:
            raise ValueError("group primes are not known")
        return self._primes


def _commit_value(group: SpecialRSAGroup, g: int, h: int, a: int, r: int) -> int:
    return group.mul(group.exp(g, a), group.exp(h, r))


class Committer:
    """Commits to integers in (-T, T) and remembers how to open the commitment."""

    def __init__(self, n: int, g: int, h: int, t: int, k: int) -> None:
        self.group = SpecialRSAGroup.public(n)
        self.g = g
        self.h = h
        self.k = k
        self.b = n.bit_length() - 2  # 2^B estimates the group order from above
        self.t = t
        self._value: int | None = None
        self._r: int | None = None

    def compute_commit(self, a: int, r: int) -> int:
        """G^a * H^r mod n for the given a and r."""
        return _commit_value(self.group, self.g, self.h, a, r)

    def _check_range(self, a: int) -> None:
        if abs(a) >= self.t:
            raise ValueError("committed value needs to be in (-T, T)")

    def commit(self, a: int) -> int:
        """Commit to ``a`` with r random from [0, 2^(B + k))."""
        self._check_range(a)
        r = get_random_int(1 << (self.b + self.k))
        commitment = self.compute_commit(a, r)
        self._value, self._r = a, r
        return commitment

    def commit_with_r(self, a: int, r: int) -> int:
        """Commit to ``a`` with the given randomness ``r``."""
        self._check_range(a)
        commitment = self.compute_commit(a, r)
        self._value, self._r = a, r
        return commitment

    def decommit(self) -> tuple[int, int]:
        """The committed value and the randomness used."""
        if self._value is None or self._r is None:
            raise ValueError("nothing has been committed")
        return self._value, self._r


class Receiver:
    """Holds the group trapdoor and checks openings of a received commitment."""

    def __init__(self, group: SpecialRSAGroup, g: int, h: int, k: int) -> None:
        self.group = group
        self.g = g
        self.h = h
        self.k = k
        self.commitment: int | None = None

    @classmethod
    def generate(cls, safe_prime_bits: int, k: int) -> Receiver:
        """Receiver over a fresh group, with G = H^alpha for a secret alpha."""
        group = SpecialRSAGroup.generate(safe_prime_bits)
        h = group.get_random_generator()
        alpha = get_random_int(group.order)
        return cls(group, group.exp(h, alpha), h, k)

    @classmethod
    def from_params(
        cls, primes: SpecialRSAPrimes, g: int, h: int, k: int
    ) -> Receiver:
        """Receiver over the group given by ``primes`` with the given bases."""
        return cls(SpecialRSAGroup.from_primes(primes), g, h, k)

    def compute_commit(self, a: int, r: int) -> int:
        """G^a * H^r mod n for the given a and r."""
        return _commit_value(self.group, self.g, self.h, a, r)

    def set_commitment(self, c: int) -> None:
        """Store the received commitment."""
        self.commitment = c

    def check_decommitment(self, r: int, a: int) -> bool:
        """Whether (a, r) opens the stored commitment."""
        return self.compute_commit(a, r) == self.commitment