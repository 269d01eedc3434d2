"""Proof that a commitment hides a number within [a, b].

It runs two positivity proofs: one for b - x, with commitment G^b / c, and
one for x - a, with commitment c / G^a.
"""

from __future__ import annotations

from dataclasses import dataclass

from zkcommit.commitment import Committer, Receiver
from zkcommit.positive import PositiveProver, PositiveVerifier

__all__ = ["RangeProver", "RangeProof", "RangeVerifier"]


class RangeProver:
    """Proves that c = G^x * H^r mod n with a <= x <= b."""

    def __init__(
        self, committer: Committer, x: int, a: int, b: int, challenge_space_size: int
    ) -> None:
        _, r = committer.decommit()
        try:
            # G^b / (G^x * H^r) = G^(b-x) * H^(-r)
            self._upper = PositiveProver(committer, b - x, -r, challenge_space_size)
            self._lower = PositiveProver(committer, x - a, r, challenge_space_size)
        except ValueError as exc:
            raise ValueError("error in instantiating PositiveProver") from exc

    def proof_random_data(self) -> tuple[list[int], list[int]]:
        """First messages of both positivity proofs."""
        return self._upper.proof_random_data(), self._lower.proof_random_data()

    def proof_data(self, challenges1, challenges2) -> tuple[list[int], list[int]]:
        """Responses of both positivity proofs."""
        return self._upper.proof_data(challenges1), self._lower.proof_data(challenges2)

    def verifier_initialization_data(
        self,
    ) -> tuple[list[int], list[int], list[int], list[int]]:
        """Small and big commitments of both positivity proofs."""
        return (
            self._upper.small_commitments,
            self._upper.big_commitments,
            self._lower.small_commitments,
            self._lower.big_commitments,
        )


@dataclass
class RangeProof:
    """All messages of the protocol, for use with Fiat-Shamir."""

    proof_random_data1: list[int]
    proof_random_data2: list[int]
    challenges1: list[int]
    challenges2: list[int]
    proof_data1: list[int]
    proof_data2: list[int]


class RangeVerifier:
    """Checks a range proof against the receiver's commitment."""

    def __init__(
        self,
        receiver: Receiver,
        a: int,
        b: int,
        small_commitments1,
        big_commitments1,
        small_commitments2,
        big_commitments2,
        challenge_space_size: int,
    ) -> None:
        group = receiver.group
        upper_commitment = group.mul(
            group.exp(receiver.g, b), group.inv(receiver.commitment)
        )
        lower_commitment = group.mul(
            receiver.commitment, group.inv(group.exp(receiver.g, a))
        )
        try:
            self._upper = PositiveVerifier(
                receiver, upper_commitment, small_commitments1, big_commitments1,
                challenge_space_size,
            )
            self._lower = PositiveVerifier(
                receiver, lower_commitment, small_commitments2, big_commitments2,
                challenge_space_size,
            )
        except ValueError as exc:
            raise ValueError("error in instantiating PositiveVerifier") from exc

    def get_challenges(self) -> tuple[list[int], list[int]]:
        """Random challenges for both positivity proofs."""
        return self._upper.get_challenges(), self._lower.get_challenges()

    def set_proof_random_data(self, proof_random_data1, proof_random_data2) -> None:
        """Store first messages; raises ValueError if either has the wrong length."""
        self._upper.set_proof_random_data(proof_random_data1)
        self._lower.set_proof_random_data(proof_random_data2)

    def set_challenges(self, challenges1, challenges2) -> None:
        """Use challenges computed by the prover (Fiat-Shamir)."""
        self._upper.set_challenges(challenges1)
        self._lower.set_challenges(challenges2)

    def verify(self, proof_data1, proof_data2) -> bool:
        """Whether both positivity proofs hold."""
        return self._upper.verify(proof_data1) and self._lower.verify(proof_data2)