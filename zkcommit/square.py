"""Proof that a commitment hides a square.

Given c, the prover shows that c = G^(x^2) * H^r mod n for some x. It commits
to x as c1 = G^x * H^r1 and shows that c1 (under bases G, H) and c (under bases
c1, H) hide the same value x. This works because
c = c1^x * H^(r - r1*x).
"""

from __future__ import annotations

from zkcommit.commitment import Committer, Receiver
from zkcommit.equality import EqualityProver, EqualityVerifier

__all__ = ["SquareProver", "SquareVerifier"]


class SquareProver(EqualityProver):
    """Proves that the committer's commitment hides the square of ``x``."""

    def __init__(self, committer: Committer, x: int, challenge_space_size: int) -> None:
        n = committer.group.n
        small_committer = Committer(n, committer.g, committer.h, committer.t, committer.k)
        small_commitment = small_committer.commit(x)

        base_committer = Committer(
            n, small_commitment, committer.h, committer.t, committer.k
        )
        _, r = committer.decommit()
        _, r1 = small_committer.decommit()
        # The commitment itself is already known; this only records x and r2.
        base_committer.commit_with_r(x, r - r1 * x)

        super().__init__(small_committer, base_committer, challenge_space_size)
        self.small_commitment = small_commitment


class SquareVerifier(EqualityVerifier):
    """Checks a square proof given the prover's small commitment ``c1``."""

    def __init__(self, receiver: Receiver, c1: int, challenge_space_size: int) -> None:
        primes = receiver.group.get_primes()

        small_receiver = Receiver.from_params(primes, receiver.g, receiver.h, receiver.k)
        small_receiver.set_commitment(c1)

        base_receiver = Receiver.from_params(primes, c1, receiver.h, receiver.k)
        base_receiver.set_commitment(receiver.commitment)

        super().__init__(small_receiver, base_receiver, challenge_space_size)