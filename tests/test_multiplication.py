import pytest

from zkcommit.commitment import Committer, Receiver
from zkcommit.common import hash_numbers
from zkcommit.multiplication import (
    MultiplicationProof,
    MultiplicationProver,
    MultiplicationVerifier,
)
from zkcommit.randomness import get_random_int

CHALLENGE_SPACE = 80


@pytest.fixture(scope="module")
def base_receiver():
    return Receiver.generate(128, 80)


def _setup(base_receiver, x1, x2, x3):
    n = base_receiver.group.n
    t = n * n
    primes = base_receiver.group.get_primes()
    receivers = [
        Receiver.from_params(primes, base_receiver.g, base_receiver.h, base_receiver.k)
        for _ in range(3)
    ]
    committers = [
        Committer(r.group.n, r.g, r.h, t, r.k) for r in receivers
    ]
    for receiver, committer, x in zip(receivers, committers, (x1, x2, x3)):
        receiver.set_commitment(committer.commit(x))
    prover = MultiplicationProver(*committers, CHALLENGE_SPACE)
    verifier = MultiplicationVerifier(*receivers, CHALLENGE_SPACE)
    return prover, verifier


def _random_factors(receiver):
    n = receiver.group.n
    x1 = -get_random_int(n)  # negative on purpose
    x2 = get_random_int(n)
    return x1, x2


def test_multiplication_proof(base_receiver):
    x1, x2 = _random_factors(base_receiver)
    prover, verifier = _setup(base_receiver, x1, x2, x1 * x2)

    d1, d2, d3 = prover.proof_random_data()
    verifier.set_proof_random_data(d1, d2, d3)
    challenge = verifier.get_challenge()
    assert 0 <= challenge < 2**CHALLENGE_SPACE
    u1, u, v1, v2, v3 = prover.proof_data(challenge)
    assert verifier.verify(u1, u, v1, v2, v3) is True


def test_wrong_product_is_rejected(base_receiver):
    x1, x2 = _random_factors(base_receiver)
    prover, verifier = _setup(base_receiver, x1, x2, x1 * x2 + 1)

    verifier.set_proof_random_data(*prover.proof_random_data())
    challenge = verifier.get_challenge()
    while challenge == 0:
        challenge = verifier.get_challenge()
    assert verifier.verify(*prover.proof_data(challenge)) is False


def test_fiat_shamir_challenge(base_receiver):
    x1, x2 = _random_factors(base_receiver)
    prover, verifier = _setup(base_receiver, x1, x2, x1 * x2)

    d1, d2, d3 = prover.proof_random_data()
    challenge = hash_numbers(d1, d2, d3)
    data = prover.proof_data(challenge)
    proof = MultiplicationProof(d1, d2, challenge, *data)

    verifier.set_proof_random_data(d1, d2, d3)
    verifier.set_challenge(proof.challenge)
    assert verifier.verify(
        proof.proof_data_u1,
        proof.proof_data_u,
        proof.proof_data_v1,
        proof.proof_data_v2,
        proof.proof_data_v3,
    ) is True


def test_tampered_response_is_rejected(base_receiver):
    x1, x2 = _random_factors(base_receiver)
    prover, verifier = _setup(base_receiver, x1, x2, x1 * x2)

    verifier.set_proof_random_data(*prover.proof_random_data())
    u1, u, v1, v2, v3 = prover.proof_data(verifier.get_challenge())
    assert verifier.verify(u1 + 1, u, v1, v2, v3) is False


def test_proof_data_before_random_data_raises(base_receiver):
    x1, x2 = _random_factors(base_receiver)
    prover, _ = _setup(base_receiver, x1, x2, x1 * x2)
    with pytest.raises(ValueError):
        prover.proof_data(5)


def test_verify_without_challenge_raises(base_receiver):
    x1, x2 = _random_factors(base_receiver)
    prover, verifier = _setup(base_receiver, x1, x2, x1 * x2)
    verifier.set_proof_random_data(*prover.proof_random_data())
    with pytest.raises(ValueError):
        verifier.verify(1, 1, 1, 1, 1)