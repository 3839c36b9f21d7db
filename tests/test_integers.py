import pytest

from mpq import Integer_Backend, Python_Int_Backend, PYTHON_INT, Format_Error
from mpq.integers import FMT_HEX, FMT_SHOWBASE, FMT_UPPERCASE


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        Integer_Backend()


def test_constants():
    assert PYTHON_INT.zero == 0
    assert PYTHON_INT.one == 1
    assert PYTHON_INT.is_one(1)
    assert not PYTHON_INT.is_one(-1)


@pytest.mark.parametrize("a, b, q", [
    (7, 2, 3),
    (-7, 2, -3),
    (7, -2, -3),
    (-7, -2, 3),
    (6, 3, 2),
    (0, -5, 0),
])
def test_divide_truncates(a, b, q):
    assert PYTHON_INT.divide(a, b) == q


def test_arithmetic():
    I = Python_Int_Backend()
    assert I.add(2, 3) == 5
    assert I.subtract(2, 3) == -1
    assert I.multiply(-4, 3) == -12
    assert I.negate(5) == -5
    assert I.left_shift(3, 4) == 48
    assert I.gcd(-12, 18) == 6
    assert I.gcd(0, 7) == 7
    assert I.compare(1, 2) == -1
    assert I.compare(2, 2) == 0
    assert I.compare(3, 2) == 1
    assert I.sign(-9) == -1
    assert I.sign(0) == 0
    assert I.is_zero(0)
    assert not I.is_zero(1)


@pytest.mark.parametrize("text, value", [
    ("0", 0),
    ("42", 42),
    ("+42", 42),
    ("-42", -42),
    ("007", 7),
    ("0x2a", 42),
    ("-0X2A", -42),
])
def test_from_string(text, value):
    assert PYTHON_INT.from_string(text) == value


@pytest.mark.parametrize("text", ["", "-", "0x", "1_000", " 1", "2a",
                                  "0x2g", "--1", "+-1", "1x"])
def test_from_string_rejects(text):
    with pytest.raises(Format_Error):
        PYTHON_INT.from_string(text)


def test_to_string():
    I = PYTHON_INT
    assert I.to_string(-255) == "-255"
    assert I.to_string(-255, flags=FMT_HEX) == "-ff"
    assert I.to_string(255, flags=FMT_HEX | FMT_SHOWBASE) == "0xff"
    assert I.to_string(255, flags=FMT_HEX | FMT_UPPERCASE) == "FF"
    assert I.to_string(10 ** 30) == "1" + "0" * 30


def test_long_decimal_strings():
    I = PYTHON_INT
    value = 7 * 10 ** 6000 + 123
    text = "7" + "0" * 5997 + "123"
    assert I.to_string(value) == text
    assert I.to_string(-value) == "-" + text
    assert I.from_string(text) == value
    assert I.from_string("-" + text) == -value
