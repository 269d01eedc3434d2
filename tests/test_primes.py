import pytest

from zkcommit.primes import get_germain_prime, get_safe_prime, is_probable_prime


def test_get_germain_prime():
    p = get_germain_prime(512)
    assert is_probable_prime(p, 20)
    assert is_probable_prime(2 * p + 1, 20)


def test_get_safe_prime():
    p = get_safe_prime(512)
    q = (p - 1) // 2
    assert is_probable_prime(p, 20)
    assert is_probable_prime(q, 20)
    assert p.bit_length() == 512


@pytest.mark.parametrize("n", [2, 3, 5, 97, 101, 7919, 2**61 - 1, 2**127 - 1])
def test_primes_recognised(n):
    assert is_probable_prime(n, 20) is True


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 100, 561, 1105, 7917, 2**64 + 1])
def test_composites_rejected(n):
    assert is_probable_prime(n, 20) is False


def test_germain_prime_smallest_size():
    assert get_germain_prime(2) == 3


def test_safe_prime_smallest_size():
    assert get_safe_prime(3) == 7


@pytest.mark.parametrize("bits", [16, 64])
def test_germain_prime_bit_length(bits):
    p = get_germain_prime(bits)
    assert p.bit_length() == bits
    assert is_probable_prime(p, 20)
    assert is_probable_prime(2 * p + 1, 20)


def test_germain_prime_too_small_raises():
    with pytest.raises(ValueError):
        get_germain_prime(1)