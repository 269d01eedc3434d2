"""Sigma protocol proving knowledge of how to open a commitment."""

from __future__ import annotations

from dataclasses import dataclass

from zkcommit.commitment import Committer, Receiver
from zkcommit.randomness import get_random_int

__all__ = ["OpeningProver", "OpeningProof", "OpeningVerifier"]


class OpeningProver:
    """Proves knowledge of (a, r) such that c = G^a * H^r mod n."""

    def __init__(self, committer: Committer, challenge_space_size: int) -> None:
        self.committer = committer
        self.challenge_space_size = challenge_space_size
        self._r1: int | None = None
        self._r2: int | None = None

    def proof_random_data(self) -> int:
        """First message G^r1 * H^r2 with fresh random r1 and r2."""
        n_len = self.committer.group.n.bit_length()
        # r1 from [0, T * 2^(NLength + ChallengeSpaceSize))
        self._r1 = get_random_int(
            self.committer.t << (n_len + self.challenge_space_size)
        )
        # r2 from [0, 2^(B + 2*NLength + ChallengeSpaceSize))
        self._r2 = get_random_int(
            1 << (self.committer.b + 2 * n_len + self.challenge_space_size)
        )
        return self.committer.compute_commit(self._r1, self._r2)

    def proof_data(self, challenge: int) -> tuple[int, int]:
        """Responses s1 = r1 + challenge*a and s2 = r2 + challenge*r."""
        if self._r1 is None or self._r2 is None:
            raise ValueError("proof random data has not been generated")
        a, r = self.committer.decommit()
        return self._r1 + challenge * a, self._r2 + challenge * r


@dataclass
class OpeningProof:
    """All three messages of the protocol, for use with Fiat-Shamir."""

    proof_random_data: int
    challenge: int
    proof_data1: int
    proof_data2: int


class OpeningVerifier:
    """Checks an opening proof against the receiver's commitment."""

    def __init__(self, receiver: Receiver, challenge_space_size: int) -> None:
        self.receiver = receiver
        self.challenge_space_size = challenge_space_size
        self.challenge: int | None = None
        self.proof_random_data: int | None = None

    def set_proof_random_data(self, proof_random_data: int) -> None:
        self.proof_random_data = proof_random_data

    def get_challenge(self) -> int:
        """Random challenge from [0, 2^challenge_space_size)."""
        self.challenge = get_random_int(1 << self.challenge_space_size)
        return self.challenge

    def set_challenge(self, challenge: int) -> None:
        """Use a challenge computed by the prover (Fiat-Shamir)."""
        self.challenge = challenge

    def verify(self, s1: int, s2: int) -> bool:
        """Whether proofRandomData * c^challenge == G^s1 * H^s2 mod n."""
        if self.challenge is None or self.proof_random_data is None:
            raise ValueError("challenge and proof random data must be set")
        group = self.receiver.group
        left = group.mul(
            self.proof_random_data,
            group.exp(self.receiver.commitment, self.challenge),
        )
        return left == self.receiver.compute_commit(s1, s2)