"""Sigma protocol proving that a committed value is the product of two others.

For c1 = G^x1 * H^r1, c2 = G^x2 * H^r2 and c3 = G^x3 * H^r3 it proves
x3 = x1 * x2 by three parallel opening proofs, the third one seeing
c3 = c1^x2 * H^(r3 - r1*x2) with c1 as the base in place of G.
"""

from __future__ import annotations

from dataclasses import dataclass

from zkcommit.commitment import Committer, Receiver
from zkcommit.randomness import get_random_int

__all__ = ["MultiplicationProver", "MultiplicationProof", "MultiplicationVerifier"]


class MultiplicationProver:
    """Proves that the value in the third commitment is the product of the others."""

    def __init__(
        self,
        committer1: Committer,
        committer2: Committer,
        committer3: Committer,
        challenge_space_size: int,
    ) -> None:
        self.committer1 = committer1
        self.committer2 = committer2
        self.committer3 = committer3
        self.challenge_space_size = challenge_space_size
        self._randoms: tuple[int, int, int, int, int] | None = None

    def proof_random_data(self) -> tuple[int, int, int]:
        """First messages d1 = G^y1 * H^s1, d2 = G^y * H^s2, d3 = c1^y * H^s3."""
        committer = self.committer1
        n_len = committer.group.n.bit_length()
        bound1 = committer.t << (n_len + self.challenge_space_size)
        bound2 = 1 << (committer.b + 2 * n_len + self.challenge_space_size)

        y1 = get_random_int(bound1)
        y = get_random_int(bound1)
        s1 = get_random_int(bound2)
        s2 = get_random_int(bound2)
        s3 = get_random_int(bound2)
        self._randoms = (y1, y, s1, s2, s3)

        d1 = committer.compute_commit(y1, s1)
        d2 = committer.compute_commit(y, s2)
        a1, r1 = committer.decommit()
        c1 = committer.compute_commit(a1, r1)
        group = committer.group
        d3 = group.mul(group.exp(c1, y), group.exp(committer.h, s3))
        return d1, d2, d3

    def proof_data(self, challenge: int) -> tuple[int, int, int, int, int]:
        """Responses u1, u, v1, v2, v3 computed over the integers."""
        if self._randoms is None:
            raise ValueError("proof random data has not been generated")
        y1, y, s1, s2, s3 = self._randoms
        a1, r1 = self.committer1.decommit()
        a2, r2 = self.committer2.decommit()
        _, r3 = self.committer3.decommit()

        u1 = y1 + challenge * a1
        u = y + challenge * a2
        v1 = s1 + challenge * r1
        v2 = s2 + challenge * r2
        v3 = s3 + challenge * (r3 - a2 * r1)
        return u1, u, v1, v2, v3


@dataclass
class MultiplicationProof:
    """Messages of the protocol, for use with Fiat-Shamir."""

    proof_random_data1: int
    proof_random_data2: int
    challenge: int
    proof_data_u1: int
    proof_data_u: int
    proof_data_v1: int
    proof_data_v2: int
    proof_data_v3: int


class MultiplicationVerifier:
    """Checks a multiplication proof against three receivers' commitments."""

    def __init__(
        self,
        receiver1: Receiver,
        receiver2: Receiver,
        receiver3: Receiver,
        challenge_space_size: int,
    ) -> None:
        self.receiver1 = receiver1
        self.receiver2 = receiver2
        self.receiver3 = receiver3
        self.challenge_space_size = challenge_space_size
        self.challenge: int | None = None
        self._d: tuple[int, int, int] | None = None

    def set_proof_random_data(self, d1: int, d2: int, d3: int) -> None:
        self._d = (d1, d2, d3)

    def get_challenge(self) -> int:
        """Random challenge from [0, 2^challenge_space_size)."""
        self.challenge = get_random_int(1 << self.challenge_space_size)
        return self.challenge

    def set_challenge(self, challenge: int) -> None:
        """Use a challenge computed by the prover (Fiat-Shamir)."""
        self.challenge = challenge

    def verify(self, u1: int, u: int, v1: int, v2: int, v3: int) -> bool:
        """Whether G^u1 H^v1 = d1 c1^e, G^u H^v2 = d2 c2^e and c1^u H^v3 = d3 c3^e."""
        if self.challenge is None or self._d is None:
            raise ValueError("challenge and proof random data must be set")
        d1, d2, d3 = self._d
        e = self.challenge
        group1 = self.receiver1.group
        group3 = self.receiver3.group

        left1 = self.receiver1.compute_commit(u1, v1)
        right1 = group1.mul(d1, group1.exp(self.receiver1.commitment, e))

        left2 = self.receiver1.compute_commit(u, v2)
        right2 = group1.mul(d2, group1.exp(self.receiver2.commitment, e))

        left3 = group3.mul(
            group3.exp(self.receiver1.commitment, u),
            group3.exp(self.receiver3.h, v3),
        )
        right3 = group1.mul(d3, group1.exp(self.receiver3.commitment, e))

        return left1 == right1 and left2 == right2 and left3 == right3