import pickle
import random
from fractions import Fraction

import pytest

gmpy2 = pytest.importorskip("gmpy2")

from mpq import Rational, Division_By_Zero, Format_Error
from mpq.integers import FMT_HEX, FMT_SHOWBASE
from mpq.gmp import GMP, GMP_Backend, MPQ


def test_backend_values_are_mpz():
    q = MPQ(6, -4)
    assert isinstance(q.numerator, type(gmpy2.mpz(0)))
    assert isinstance(q.denominator, type(gmpy2.mpz(0)))
    assert q.components() == (-3, 2)


def test_backend_divide_truncates():
    assert GMP.divide(gmpy2.mpz(-7), gmpy2.mpz(2)) == -3
    assert GMP.divide(gmpy2.mpz(7), gmpy2.mpz(-2)) == -3


def test_backend_strings():
    assert GMP.from_string("-0x1f") == -31
    assert GMP.to_string(gmpy2.mpz(-31)) == "-31"
    assert GMP.to_string(gmpy2.mpz(255), flags=FMT_HEX | FMT_SHOWBASE) == \
        "0xff"
    with pytest.raises(Format_Error):
        GMP.from_string("12z")


def test_reference_arithmetic():
    a = MPQ(7, 3)
    b = MPQ("5/6")
    assert str(a + b) == "19/6"
    assert str(a - b) == "3/2"
    assert str(a * b) == "35/18"
    assert str(a / b) == "14/5"
    assert type(a + b) is MPQ


def test_scalars():
    q = MPQ(7, 3)
    assert q + 2 == MPQ(13, 3)
    assert q * gmpy2.mpz(3) == 7
    assert 1 / q == MPQ(3, 7)
    assert q - 0.5 == MPQ(11, 6)
    with pytest.raises(Division_By_Zero):
        q / 0
    with pytest.raises(Division_By_Zero):
        q / MPQ()


def test_agrees_with_int_backend():
    rng = random.Random(17)
    for _ in range(200):
        n1, n2 = rng.randrange(-2 ** 90, 2 ** 90), rng.randrange(-50, 50)
        d1, d2 = rng.randrange(1, 2 ** 90), rng.randrange(1, 50)
        for op in ("__add__", "__sub__", "__mul__"):
            g = getattr(MPQ(n1, d1), op)(MPQ(n2, d2))
            p = getattr(Rational(n1, d1), op)(Rational(n2, d2))
            assert g.as_integer_ratio() == p.as_integer_ratio()
        if n2 != 0:
            g = MPQ(n1, d1) / MPQ(n2, d2)
            assert g.as_integer_ratio() == \
                (Rational(n1, d1) / Rational(n2, d2)).as_integer_ratio()
        assert str(MPQ(n1, d1)) == str(Rational(n1, d1))


def test_float_round_trip():
    for f in (0.1, -2.5e-310, 1e300, 3.0):
        q = MPQ(f)
        assert Fraction(*q.as_integer_ratio()) == Fraction(f)
        assert float(q) == f


def test_conversions():
    q = MPQ(-7, 2)
    assert int(q) == -3
    assert q.convert_to(Fraction) == Fraction(-7, 2)
    assert q.convert_to(gmpy2.mpq) == gmpy2.mpq(-7, 2)
    assert q.convert_to(Rational) == Rational(-7, 2)
    assert Rational(-7, 2).convert_to(MPQ) == q


def test_backends_do_not_mix():
    with pytest.raises(AssertionError):
        MPQ(1, 2) + Rational(1, 2)


def test_pickle():
    q = MPQ(-22, 7)
    assert pickle.loads(pickle.dumps(q)) == q


def test_separate_backend_instances_are_compatible():
    class Other_MPQ(MPQ):
        backend = GMP_Backend()

    assert Other_MPQ(1, 2).compatible(MPQ(1, 2))
    assert Other_MPQ(1, 2) + MPQ(1, 2) == 1


def test_round_trip_large_operands():
    q = MPQ(10 ** 5000 + 1, 3)
    assert MPQ(str(q)) == q
    assert str(q) == str(Rational(10 ** 5000 + 1, 3))
    assert repr(MPQ(10 ** 5000)) == "MPQ(1" + "0" * 5000 + ")"
