import pytest

from zkcommit.lipmaa import (
    decompose_prime_to_two_squares,
    lipmaa_decompose,
    lipmaa_decomposition,
    sqrt_of_minus_one,
)

LARGE = int(
    "16714772973240639959372252262788596420406994288943442724185217359247384753656472"
    "30904976095297664413685833323301592258309968712819532194721268477906319087533297"
    "06792910855431101467294396650704187507653301929612901614741332799605931493070374"
    "55272278582955789954847238104228800942225108143276152223829168166008095539967222"
    "36307056569779600856352994837478141918119512601891835080563988162593750322489584"
    "00819598486778686035678246113448981531855767404454115650940678751339689466778615"
    "28581074542082733743513314354002186235230287355796577107626422168586230066573268"
    "163712626444511811717579062108697723640288393001520781671"
)


def _square_sum(roots):
    return sum(root * root for root in roots)


def test_negative_raises():
    with pytest.raises(ValueError):
        lipmaa_decompose(-1)


def test_small_integers():
    for i in range(10001):
        roots = lipmaa_decompose(i)
        assert _square_sum(roots) == i, i


def test_large_integer():
    roots = lipmaa_decompose(LARGE)
    assert _square_sum(roots) == LARGE


@pytest.mark.parametrize(
    "n, expected_len",
    [(0, 0), (1, 1), (5, 2), (24, 3), (7, 4)],
)
def test_decomposition_filters_zero_roots(n, expected_len):
    assert len(lipmaa_decomposition(n)) == expected_len


def test_roots_are_four_and_non_negative():
    for n in (3, 6, 12, 63, 96, 1000, 4097):
        roots = lipmaa_decompose(n)
        assert len(roots) == 4
        assert all(root >= 0 for root in roots)
        assert _square_sum(roots) == n


@pytest.mark.parametrize("n, expected", [(0, (0, 0, 0, 0)), (1, (1, 0, 0, 0)), (2, (1, 1, 0, 0))])
def test_special_cases(n, expected):
    assert lipmaa_decompose(n) == expected


@pytest.mark.parametrize("p", [5, 13, 17, 29, 37, 41, 101, 1009, 65537])
def test_sqrt_of_minus_one(p):
    root = sqrt_of_minus_one(p)
    assert root * root % p == p - 1


def test_sqrt_of_minus_one_small_moduli():
    assert sqrt_of_minus_one(1) == 0
    assert sqrt_of_minus_one(2) == 1


def test_sqrt_of_minus_one_without_root():
    with pytest.raises(ValueError):
        sqrt_of_minus_one(7)


@pytest.mark.parametrize("p", [5, 13, 17, 29, 37, 41, 101, 1009, 65537])
def test_decompose_prime_to_two_squares(p):
    x, y = decompose_prime_to_two_squares(sqrt_of_minus_one(p), p)
    assert x * x + y * y == p


def test_decompose_five():
    assert decompose_prime_to_two_squares(2, 5) == (2, 1)
    assert decompose_prime_to_two_squares(3, 5) == (2, 1)