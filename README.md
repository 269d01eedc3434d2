# zkcommit

Integer commitments in groups of hidden order (Damgard-Fujisaki), the
sigma-protocol proofs built on them, and the attribute bookkeeping used when
anonymous credentials are issued.

## What is inside

- `zkcommit.common`: hashing of integer lists (SHA-512) with
  `concatenate_numbers`, `hash_into_bytes` and `hash_numbers`; modular
  exponentiation with negative exponents (`exponentiate`); `lcm`;
  `contains`; and the small `Pair` and `Triple` records.
- `zkcommit.randomness`: cryptographically secure random integers below a
  bound, in `(-max, max)`, in `[min, max)`, of an exact bit length, or
  invertible modulo `n`.
- `zkcommit.primes`: `get_germain_prime`, `get_safe_prime` and a
  Miller-Rabin test, `is_probable_prime`.
- `zkcommit.polynomials`: `Polynomial` over `Z_p`,
  `new_random_polynomial` and `lagrange_interpolation`.
- `zkcommit.commitment`: `SpecialRSAGroup` (quadratic residues modulo a
  product of two safe primes), `SpecialRSAPrimes`, `Committer` and
  `Receiver`.
- `zkcommit.opening`, `zkcommit.equality`, `zkcommit.multiplication`,
  `zkcommit.square`, `zkcommit.positive`, `zkcommit.range_proof`:
  provers and verifiers for knowledge of an opening, equality of committed
  values, a product of committed values, a committed square, a committed
  non-negative number, and a committed number inside `[a, b]`. Each also
  has a proof record (`OpeningProof`, `EqualityProof`, and so on) holding
  all messages of the protocol.
- `zkcommit.lipmaa`: writing a non-negative integer as a sum of four squares
  (`lipmaa_decompose`, `lipmaa_decomposition`), with the helpers
  `sqrt_of_minus_one` and `decompose_prime_to_two_squares`.
- `zkcommit.attributes`, `zkcommit.raw_credential`, `zkcommit.params`:
  credential attributes (`Int64Attr`, `StrAttr`, `parse_attrs`), the
  `RawCred` that holds them, and the default parameter sizes
  (`default_params`).

## Installing

```
pip install .
```

No third-party libraries are needed at run time.

## Committing and opening

```python
from zkcommit.commitment import Committer, Receiver
from zkcommit.randomness import get_random_int

receiver = Receiver.generate(128, 80)
n = receiver.group.n
committer = Committer(n, receiver.g, receiver.h, n, receiver.k)

value = get_random_int(n)
c = committer.commit(value)
receiver.set_commitment(c)

committed, r = committer.decommit()
assert receiver.check_decommitment(r, committed)
```

`commit` and `commit_with_r` raise `ValueError` when the value lies outside
`(-T, T)`; `decommit` raises `ValueError` before anything was committed.

## Proving knowledge of an opening

```python
from zkcommit.opening import OpeningProver, OpeningVerifier

prover = OpeningProver(committer, 80)
verifier = OpeningVerifier(receiver, 80)

verifier.set_proof_random_data(prover.proof_random_data())
challenge = verifier.get_challenge()
s1, s2 = prover.proof_data(challenge)
assert verifier.verify(s1, s2)
```

The other proofs follow the same three steps: the prover sends random data,
the verifier picks a challenge (or `set_challenge` is used with a challenge
derived by hashing, for example with `hash_numbers`), and the prover
answers.

## Range proofs

```python
from zkcommit.range_proof import RangeProver, RangeVerifier

x = 1000
a, b = x - 10, x + 10
receiver.set_commitment(committer.commit(x))

prover = RangeProver(committer, x, a, b, 80)
verifier = RangeVerifier(receiver, a, b, *prover.verifier_initialization_data(), 80)

data1, data2 = prover.proof_random_data()
challenges1, challenges2 = verifier.get_challenges()
verifier.set_proof_random_data(data1, data2)
assert verifier.verify(*prover.proof_data(challenges1, challenges2))
```

The positivity verifier expects eight first messages and twelve responses,
that is, a four-square decomposition with four non-zero roots: its
`set_proof_random_data` raises `ValueError` otherwise, and `verify` returns
`False`.

## Credential attributes

```python
from zkcommit.attributes import AttrCount
from zkcommit.raw_credential import RawCred

cred = RawCred(AttrCount(known=2, committed=1, hidden=0))
cred.add_str_attr("Name", "Jack", True)
cred.add_int64_attr("DateMin", 22342345, True)
cred.add_int64_attr("Age", 25, False)

cred.known_values()      # internal integer values of the known attributes
cred.committed_values()  # and of the committed ones
```

Adding more attributes than the count allows, an empty name, or a
duplicate name raises `ValueError`; asking for an unknown attribute raises
`KeyError`. `check_complete` raises `ValueError` naming the first attribute
without a value.

## What the package does not do

It provides the commitment proofs and the attribute bookkeeping, but not the
issuing side of anonymous credentials: there is no key generation for an
issuing organization, no credential request, issuance, update or
presentation protocol, no storage of receiver records, and no server or
command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```