import random

import pytest

from mpq import (Rational, Format_Error, Division_By_Zero,
                 FMT_HEX, FMT_SHOWBASE, FMT_SHOWPOS, FMT_UPPERCASE)


@pytest.mark.parametrize("text, expected", [
    ("12/34",     (6, 17)),
    ("-5",        (-5, 1)),
    ("+5/-10",    (-1, 2)),
    ("-6/-4",     (3, 2)),
    ("0/-17",     (0, 1)),
    ("007/014",   (1, 2)),
    ("0x1f/0x10", (31, 16)),
    ("-0X1F/0x1", (-31, 1)),
    ("0xff",      (255, 1)),
    ("0x1f/10",   (31, 10)),
    ("123456789012345678901234567890/10",
     (12345678901234567890123456789, 1)),
])
def test_parse(text, expected):
    q = Rational(text)
    assert q.components() == expected
    assert Rational.from_string(text).components() == expected


@pytest.mark.parametrize("text", [
    "12/34x",
    "12/34 ",
    " 12/34",
    "",
    "/3",
    "3/",
    "1.5",
    "abc",
    "1/2/3",
    "1-2",
    "ff",
    "0x",
    "1e5",
])
def test_parse_rejects(text):
    with pytest.raises(Format_Error):
        Rational(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        Rational("12/34x")


def test_parse_zero_denominator():
    with pytest.raises(Division_By_Zero):
        Rational("1/0")


def test_format():
    assert str(Rational(6, 17)) == "6/17"
    assert str(Rational(-5)) == "-5"
    assert str(Rational()) == "0"
    q = Rational(-31, 16)
    assert q.to_string() == "-31/16"
    assert q.to_string(flags=FMT_HEX) == "-1f/10"
    assert q.to_string(flags=FMT_HEX | FMT_SHOWBASE) == "-0x1f/0x10"
    assert q.to_string(flags=FMT_HEX | FMT_SHOWBASE | FMT_UPPERCASE) == \
        "-0X1F/0X10"
    assert q.to_string(20) == "-31/16"


def test_format_integral_omits_denominator():
    assert Rational(4).to_string(flags=FMT_HEX | FMT_SHOWBASE) == "0x4"
    assert Rational(4).to_string(flags=FMT_SHOWPOS) == "+4"


def test_format_showpos():
    assert Rational(3, 4).to_string(flags=FMT_SHOWPOS) == "+3/+4"
    assert Rational(-3, 4).to_string(flags=FMT_SHOWPOS) == "-3/+4"
    assert Rational(0).to_string(flags=FMT_SHOWPOS) == "+0"


def test_round_trip():
    rng = random.Random(11)
    for _ in range(200):
        q = Rational(rng.randrange(-2 ** 100, 2 ** 100),
                     rng.randrange(1, 2 ** 100))
        assert Rational(str(q)) == q
        for flags in (FMT_SHOWPOS,
                      FMT_HEX | FMT_SHOWBASE,
                      FMT_HEX | FMT_SHOWBASE | FMT_UPPERCASE):
            assert Rational(q.to_string(flags=flags)) == q


def test_round_trip_large_operands():
    q = Rational(10 ** 5000 + 1, 3)
    text = str(q)
    assert text.endswith("/3")
    assert len(text) == 5003
    assert Rational(text) == q
    for flags in (FMT_SHOWPOS, FMT_HEX | FMT_SHOWBASE):
        assert Rational(q.to_string(flags=flags)) == q


def test_repr_large_operands():
    assert repr(Rational(10 ** 5000)) == "Rational(1" + "0" * 5000 + ")"
    assert repr(Rational(-1, 10 ** 4400)) == \
        "Rational(-1, 1" + "0" * 4400 + ")"


def test_parse_long_decimal_components():
    q = Rational("1" * 5000 + "/7")
    assert q.components() == ((10 ** 5000 - 1) // 9, 7)
    q = Rational("-" + "9" * 4500 + "/" + "3" * 4500)
    assert q.components() == (-3, 1)
