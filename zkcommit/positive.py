"""Proof that a commitment hides a non-negative number.

A non-negative x is written as x0^2 + x1^2 + x2^2 + x3^2. The prover splits
the randomness r into parts summing to r, commits to each square with one of
the parts, and proves each of these commitments hides a square. The verifier
checks that the product of the commitments is the original commitment.
"""

from __future__ import annotations

from dataclasses import dataclass

from zkcommit.commitment import Committer, Receiver
from zkcommit.lipmaa import lipmaa_decomposition
from zkcommit.randomness import get_random_int
from zkcommit.square import SquareProver, SquareVerifier

__all__ = ["PositiveProver", "PositiveProof", "PositiveVerifier"]


def _commit_randoms(r: int, count: int) -> list[int]:
    """``count`` integers of the sign of ``r`` that sum up to ``r``."""
    boundary = abs(r)
    parts = []
    for i in range(count):
        if i < count - 1:
            part = get_random_int(boundary)
            parts.append(part)
            boundary -= part
        else:
            parts.append(boundary)
    if r < 0:
        parts = [-part for part in parts]
    return parts


class PositiveProver:
    """Proves that c = G^x * H^r mod n with x >= 0."""

    def __init__(
        self, committer: Committer, x: int, r: int, challenge_space_size: int
    ) -> None:
        try:
            roots = lipmaa_decomposition(x)
        except ValueError as exc:
            raise ValueError("error when doing Lipmaa decomposition") from exc

        self.big_commitments: list[int] = []
        self.small_commitments: list[int] = []
        self._square_provers: list[SquareProver] = []
        for root, part in zip(roots, _commit_randoms(r, len(roots))):
            square_committer = Committer(
                committer.group.n, committer.g, committer.h, committer.t, committer.k
            )
            self.big_commitments.append(square_committer.commit_with_r(root * root, part))
            prover = SquareProver(square_committer, root, challenge_space_size)
            self.small_commitments.append(prover.small_commitment)
            self._square_provers.append(prover)

    def proof_random_data(self) -> list[int]:
        """First messages of all square proofs, two per root."""
        data: list[int] = []
        for prover in self._square_provers:
            data.extend(prover.proof_random_data())
        return data

    def proof_data(self, challenges) -> list[int]:
        """Responses of all square proofs, three per root."""
        data: list[int] = []
        for prover, challenge in zip(self._square_provers, challenges):
            data.extend(prover.proof_data(challenge))
        return data

    def verifier_initialization_data(self) -> tuple[list[int], list[int]]:
        """The small and big commitments the verifier needs."""
        return self.small_commitments, self.big_commitments


@dataclass
class PositiveProof:
    """All messages of the protocol, for use with Fiat-Shamir."""

    proof_random_data: list[int]
    challenges: list[int]
    proof_data: list[int]


class PositiveVerifier:
    """Checks a positivity proof for ``receiver_commitment``."""

    def __init__(
        self,
        receiver: Receiver,
        receiver_commitment: int,
        small_commitments,
        big_commitments,
        challenge_space_size: int,
    ) -> None:
        group = receiver.group
        count = len(small_commitments)
        check = 1
        for commitment in big_commitments[:count]:
            check = group.mul(check, commitment)
        if check != receiver_commitment:
            raise ValueError("square provers are not properly instantiated")

        primes = group.get_primes()
        self._square_verifiers: list[SquareVerifier] = []
        for commitment, small in zip(big_commitments, small_commitments):
            square_receiver = Receiver.from_params(
                primes, receiver.g, receiver.h, receiver.k
            )
            square_receiver.set_commitment(commitment)
            self._square_verifiers.append(
                SquareVerifier(square_receiver, small, challenge_space_size)
            )

    def get_challenges(self) -> list[int]:
        """One random challenge per square proof."""
        return [verifier.get_challenge() for verifier in self._square_verifiers]

    def set_challenges(self, challenges) -> None:
        """Use challenges computed by the prover (Fiat-Shamir)."""
        for verifier, challenge in zip(self._square_verifiers, challenges):
            verifier.set_challenge(challenge)

    def set_proof_random_data(self, proof_random_data) -> None:
        """Store the first messages; raises ValueError unless there are eight."""
        if len(proof_random_data) != 8:
            raise ValueError("the length of proofRandomData is not correct")
        for i, verifier in enumerate(self._square_verifiers):
            verifier.set_proof_random_data(
                proof_random_data[2 * i], proof_random_data[2 * i + 1]
            )

    def verify(self, proof_data) -> bool:
        """Whether all square proofs hold; False unless there are twelve responses."""
        if len(proof_data) != 12:
            return False
        return all(
            verifier.verify(*proof_data[3 * i : 3 * i + 3])
            for i, verifier in enumerate(self._square_verifiers)
        )