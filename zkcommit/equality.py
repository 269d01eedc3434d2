"""Sigma protocol proving that two commitments hide the same value."""

from __future__ import annotations

from dataclasses import dataclass

from zkcommit.commitment import Committer, Receiver
from zkcommit.randomness import get_random_int

__all__ = ["EqualityProver", "EqualityProof", "EqualityVerifier"]


class EqualityProver:
    """Proves c1 = G1^x * H1^r1 and c2 = G2^x * H2^r2 hide the same x."""

    def __init__(
        self, committer1: Committer, committer2: Committer, challenge_space_size: int
    ) -> None:
        self.committer1 = committer1
        self.committer2 = committer2
        self.challenge_space_size = challenge_space_size
        self._r1: int | None = None
        self._r21: int | None = None
        self._r22: int | None = None

    def proof_random_data(self) -> tuple[int, int]:
        """First messages G1^r1 * H1^r21 and G2^r1 * H2^r22."""
        n_len = self.committer1.group.n.bit_length()
        # r1 from [0, T * 2^(NLength + ChallengeSpaceSize))
        self._r1 = get_random_int(
            self.committer1.t << (n_len + self.challenge_space_size)
        )
        # r21, r22 from [0, 2^(B + 2*NLength + ChallengeSpaceSize))
        bound = 1 << (self.committer1.b + 2 * n_len + self.challenge_space_size)
        self._r21 = get_random_int(bound)
        self._r22 = get_random_int(bound)
        t1 = self.committer1.compute_commit(self._r1, self._r21)
        t2 = self.committer2.compute_commit(self._r1, self._r22)
        return t1, t2

    def proof_data(self, challenge: int) -> tuple[int, int, int]:
        """Responses s1 = r1 + c*a, s21 = r21 + c*rr1, s22 = r22 + c*rr2."""
        if self._r1 is None or self._r21 is None or self._r22 is None:
            raise ValueError("proof random data has not been generated")
        a, rr1 = self.committer1.decommit()
        _, rr2 = self.committer2.decommit()
        return (
            self._r1 + challenge * a,
            self._r21 + challenge * rr1,
            self._r22 + challenge * rr2,
        )


@dataclass
class EqualityProof:
    """All messages of the protocol, for use with Fiat-Shamir."""

    proof_random_data1: int
    proof_random_data2: int
    challenge: int
    proof_data1: int
    proof_data21: int
    proof_data22: int


class EqualityVerifier:
    """Checks an equality proof against two receivers' commitments."""

    def __init__(
        self, receiver1: Receiver, receiver2: Receiver, challenge_space_size: int
    ) -> None:
        self.receiver1 = receiver1
        self.receiver2 = receiver2
        self.challenge_space_size = challenge_space_size
        self.challenge: int | None = None
        self.proof_random_data1: int | None = None
        self.proof_random_data2: int | None = None

    def set_proof_random_data(
        self, proof_random_data1: int, proof_random_data2: int
    ) -> None:
        self.proof_random_data1 = proof_random_data1
        self.proof_random_data2 = proof_random_data2

    def get_challenge(self) -> int:
        """Random challenge from [0, 2^challenge_space_size)."""
        self.challenge = get_random_int(1 << self.challenge_space_size)
        return self.challenge

    def set_challenge(self, challenge: int) -> None:
        """Use a challenge computed by the prover (Fiat-Shamir)."""
        self.challenge = challenge

    def verify(self, s1: int, s21: int, s22: int) -> bool:
        """Whether both commitment equations hold for the responses."""
        if (
            self.challenge is None
            or self.proof_random_data1 is None
            or self.proof_random_data2 is None
        ):
            raise ValueError("challenge and proof random data must be set")
        g1 = self.receiver1.group
        left1 = g1.mul(
            self.proof_random_data1,
            g1.exp(self.receiver1.commitment, self.challenge),
        )
        right1 = self.receiver1.compute_commit(s1, s21)

        g2 = self.receiver2.group
        left2 = g2.mul(
            self.proof_random_data2,
            g2.exp(self.receiver2.commitment, self.challenge),
        )
        right2 = self.receiver2.compute_commit(s1, s22)
        return left1 == right1 and left2 == right2