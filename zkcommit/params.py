"""Parameter sizes an issuing organization sets for the credential scheme."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Params", "default_params"]


@dataclass
class Params:
    """Bit lengths and counts used by the credential scheme."""

    rho_bit_len: int  # bit length of the order of the commitment group
    n_length: int  # bit length of the RSA modulus
    known_attrs_num: int  # attributes known to both issuer and receiver
    committed_attrs_num: int  # attributes of which the issuer knows only commitments
    hidden_attrs_num: int  # attributes known only to the receiver
    attr_bit_len: int  # bit length of an attribute
    hash_bit_len: int  # bit length of the hash used for Fiat-Shamir
    sec_param: int  # security parameter
    e_bit_len: int  # size of the e values of certificates
    e1_bit_len: int  # size of the interval the e values are taken from
    v_bit_len: int  # size of the v values of certificates
    challenge_space: int  # bit length of challenges in commitment proofs


def default_params() -> Params:
    """Default sizes; the modulus length is small and suits testing only."""
    return Params(
        rho_bit_len=256,
        n_length=256,
        known_attrs_num=5,
        committed_attrs_num=1,
        hidden_attrs_num=0,
        attr_bit_len=256,
        hash_bit_len=512,
        sec_param=80,
        e_bit_len=597,
        e1_bit_len=120,
        v_bit_len=2724,
        challenge_space=80,
    )