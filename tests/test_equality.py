import pytest

from zkcommit.commitment import Committer, Receiver
from zkcommit.common import hash_numbers
from zkcommit.equality import EqualityProof, EqualityProver, EqualityVerifier
from zkcommit.randomness import get_random_int


@pytest.fixture(scope="module")
def receivers():
    return Receiver.generate(128, 80), Receiver.generate(128, 80)


def _committers(receivers):
    receiver1, receiver2 = receivers
    t = receiver1.group.n * receiver1.group.n
    committer1 = Committer(receiver1.group.n, receiver1.g, receiver1.h, t, receiver1.k)
    committer2 = Committer(receiver2.group.n, receiver2.g, receiver2.h, t, receiver2.k)
    return committer1, committer2


def test_equality_proof(receivers):
    receiver1, receiver2 = receivers
    committer1, committer2 = _committers(receivers)
    x = get_random_int(committer1.t)
    receiver1.set_commitment(committer1.commit(x))
    receiver2.set_commitment(committer2.commit(x))

    prover = EqualityProver(committer1, committer2, 80)
    verifier = EqualityVerifier(receiver1, receiver2, 80)
    verifier.set_proof_random_data(*prover.proof_random_data())
    challenge = verifier.get_challenge()
    s1, s21, s22 = prover.proof_data(challenge)
    assert verifier.verify(s1, s21, s22) is True


def test_different_values_fail(receivers):
    receiver1, receiver2 = receivers
    committer1, committer2 = _committers(receivers)
    receiver1.set_commitment(committer1.commit(1000))
    receiver2.set_commitment(committer2.commit(1001))

    prover = EqualityProver(committer1, committer2, 80)
    verifier = EqualityVerifier(receiver1, receiver2, 80)
    verifier.set_proof_random_data(*prover.proof_random_data())
    verifier.set_challenge(12345)
    s1, s21, s22 = prover.proof_data(12345)
    assert verifier.verify(s1, s21, s22) is False


def test_fiat_shamir_equality(receivers):
    receiver1, receiver2 = receivers
    committer1, committer2 = _committers(receivers)
    x = get_random_int(committer1.t)
    receiver1.set_commitment(committer1.commit(x))
    receiver2.set_commitment(committer2.commit(x))

    prover = EqualityProver(committer1, committer2, 80)
    t1, t2 = prover.proof_random_data()
    challenge = hash_numbers(receiver1.commitment, receiver2.commitment, t1, t2)
    proof = EqualityProof(t1, t2, challenge, *prover.proof_data(challenge))

    verifier = EqualityVerifier(receiver1, receiver2, 80)
    verifier.set_proof_random_data(proof.proof_random_data1, proof.proof_random_data2)
    verifier.set_challenge(proof.challenge)
    assert verifier.verify(proof.proof_data1, proof.proof_data21, proof.proof_data22)


def test_verify_without_setup_raises(receivers):
    verifier = EqualityVerifier(*receivers, 80)
    with pytest.raises(ValueError):
        verifier.verify(1, 2, 3)


def test_proof_data_before_random_data_raises(receivers):
    committer1, committer2 = _committers(receivers)
    committer1.commit(1)
    committer2.commit(1)
    prover = EqualityProver(committer1, committer2, 80)
    with pytest.raises(ValueError):
        prover.proof_data(1)