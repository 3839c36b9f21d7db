#!/usr/bin/env python3
##############################################################################
##                                                                          ##
##                                PYMPQ                                     ##
##                                                                          ##
##              Copyright (C) 2026,      The PyMPQ developers               ##
##                                                                          ##
##  This file is part of PyMPQ.                                             ##
##                                                                          ##
##  PyMPQ is free software: you can redistribute it and/or modify           ##
##  it under the terms of the GNU General Public License as published by    ##
##  the Free Software Foundation, either version 3 of the License, or       ##
##  (at your option) any later version.                                     ##
##                                                                          ##
##  PyMPQ is distributed in the hope that it will be useful,                ##
##  but WITHOUT ANY WARRANTY; without even the implied warranty of          ##
##  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the           ##
##  GNU General Public License for more details.                            ##
##                                                                          ##
##  You should have received a copy of the GNU General Public License       ##
##  along with PyMPQ. If not, see <http://www.gnu.org/licenses/>.           ##
##                                                                          ##
##############################################################################

"""
This module defines the Rational number type and the functions that
keep it in canonical form.

A :class:`Rational` is a numerator / denominator pair of integers
taken from an :class:`.Integer_Backend`. After every operation the
pair is in canonical form: no common factor, a positive denominator,
and 0 is always 0/1. All the arithmetic is exact.

>>> a = Rational(7, 3)
>>> b = Rational("5/6")
>>> print(a + b, a - b, a * b, a / b)
19/6 3/2 35/18 14/5
>>> Rational(0.375)
Rational(3, 8)
>>> Rational("12/34x")
Traceback (most recent call last):
  ...
mpq.errors.Format_Error: could not parse '34x' as an integer

The type is generic over its integer backend: a subclass that sets
the class attribute *backend* gets exactly the same behaviour on top
of a different integer implementation (see :mod:`mpq.gmp`).
"""

import math
import operator
import sys

from .errors import Format_Error, Division_By_Zero
from .integers import PYTHON_INT, FMT_DEC

FLOAT_DIGITS = sys.float_info.mant_dig

SCAN_ALWAYS = frozenset("+-0123456789xX")
SCAN_HEX    = frozenset("abcdefABCDEF")

##############################################################################
# Normalisation
##############################################################################

def q_reduce(I, n, d):
    """Reduce a pair by its greatest common divisor

    Returns the pair (*n*, *d*) divided by gcd(*n*, *d*). If the gcd
    is already 1 the original values are returned and no division is
    performed.
    """
    g = I.gcd(n, d)
    if I.is_one(g):
        return n, d
    else:
        return I.divide(n, g), I.divide(d, g)

def q_fix_sign(I, n, d):
    """Move the sign of a negative denominator onto the numerator"""
    if I.sign(d) < 0:
        return I.negate(n), I.negate(d)
    else:
        return n, d

def q_canonical(I, n, d):
    """Canonical form of an arbitrary pair

    Raises :class:`.Division_By_Zero` if *d* is zero.
    """
    if I.is_zero(d):
        raise Division_By_Zero("denominator is zero")
    n, d = q_fix_sign(I, n, d)
    return q_reduce(I, n, d)

def q_new(cls, n, d):
    """Build a rational of type *cls* from an already canonical pair"""
    rv = cls()
    rv.n = n
    rv.d = d
    return rv

##############################################################################
# Lifting floats and strings
##############################################################################

def q_components_from_float(I, f):
    """Exact canonical pair for a finite float

    Splits *f* into an integer significand and a binary exponent
    with frexp, then pushes the power of two into the numerator or
    the denominator.
    """
    assert isinstance(f, float)
    if not math.isfinite(f):
        raise ValueError("cannot convert %r to a rational" % f)

    m, e = math.frexp(f)
    m    = math.ldexp(m, FLOAT_DIGITS)
    e   -= FLOAT_DIGITS

    n = I.from_int(int(m))
    d = I.one
    if e > 0:
        n = I.left_shift(n, e)
    elif e < 0:
        d = I.left_shift(d, -e)
    return q_reduce(I, n, d)

def q_scan(text, pos, have_hex):
    """Scan one integer component starting at *pos*

    Returns the component, the position of the first character not
    consumed, and whether a hex prefix has been seen so far (which
    carries over into the denominator).
    """
    start = pos
    while pos < len(text):
        c = text[pos]
        if c in "xX":
            have_hex = True
        elif c not in SCAN_ALWAYS and not (have_hex and c in SCAN_HEX):
            break
        pos += 1
    return text[start:pos], pos, have_hex

def q_components_from_string(I, text):
    """Canonical pair for a string ``numerator[/denominator]``

    Raises :class:`.Format_Error` if characters are left over, or if
    the backend rejects either component.
    """
    assert isinstance(text, str)

    num, pos, have_hex = q_scan(text, 0, False)
    if pos < len(text) and text[pos] == "/":
        den, pos, have_hex = q_scan(text, pos + 1, have_hex)
    else:
        den = None

    if pos != len(text):
        raise Format_Error("could not parse the string %r as a valid "
                           "rational number" % text)

    n = I.from_string(num)
    if den is None:
        d = I.one
    else:
        d = I.from_string(den)
    return q_canonical(I, n, d)

##############################################################################
# Arithmetic
##############################################################################

def q_add_sub(a, b, is_add):
    """Sum or difference of two rationals"""
    assert a.compatible(b)
    I = a.backend

    t1 = I.multiply(a.n, b.d)
    t2 = I.multiply(a.d, b.n)
    if is_add:
        n = I.add(t1, t2)
    else:
        n = I.subtract(t1, t2)
    d = I.multiply(a.d, b.d)

    return q_new(a.__class__, *q_reduce(I, n, d))

def q_add_sub_scalar(a, s, is_add):
    """Sum or difference of a rational and a backend integer

    The scalar has an implicit denominator of 1, so only a.d needs to
    be considered when reducing.
    """
    I = a.backend
    assert I.is_native(s)

    t = I.multiply(a.d, s)
    if is_add:
        n = I.add(a.n, t)
    else:
        n = I.subtract(a.n, t)

    n, d = q_reduce(I, n, a.d)
    # only reachable with a.d < 0 after direct component writes
    return q_new(a.__class__, *q_fix_sign(I, n, d))

def q_mul_div(a, b, is_mul):
    """Product or quotient of two rationals

    Raises :class:`.Division_By_Zero` when dividing by zero.
    """
    assert a.compatible(b)
    I = a.backend

    if is_mul:
        t1 = I.multiply(a.n, b.n)
        t2 = I.multiply(a.d, b.d)
    else:
        if I.is_zero(b.n):
            raise Division_By_Zero("division by zero")
        t1 = I.multiply(a.n, b.d)
        t2 = I.multiply(a.d, b.n)

    n, d = q_reduce(I, t1, t2)
    return q_new(a.__class__, *q_fix_sign(I, n, d))

def q_mul_scalar(a, s):
    """Product of a rational and a backend integer"""
    I = a.backend
    assert I.is_native(s)

    n, d = q_reduce(I, I.multiply(a.n, s), a.d)
    return q_new(a.__class__, *q_fix_sign(I, n, d))

def q_div_scalar(a, s):
    """Quotient of a rational and a backend integer

    Raises :class:`.Division_By_Zero` if *s* is zero.
    """
    I = a.backend
    assert I.is_native(s)

    t = I.multiply(a.d, s)
    if I.is_zero(t):
        raise Division_By_Zero("division by zero")

    n, d = q_reduce(I, a.n, t)
    return q_new(a.__class__, *q_fix_sign(I, n, d))

def q_ipow(I, base, exponent):
    """Integer power by repeated squaring"""
    assert exponent >= 0
    rv = I.one
    while exponent:
        if exponent & 1:
            rv = I.multiply(rv, base)
        exponent >>= 1
        if exponent:
            base = I.multiply(base, base)
    return rv

##############################################################################
# Comparison
##############################################################################

def q_compare(a, b):
    """Three-way comparison of two rationals"""
    assert a.compatible(b)
    I = a.backend
    return I.compare(I.multiply(a.n, b.d),
                     I.multiply(a.d, b.n))

def q_compare_scalar(a, s):
    """Three-way comparison of a rational and a backend integer"""
    I = a.backend
    assert I.is_native(s)
    return I.compare(a.n, I.multiply(a.d, s))

##############################################################################
# Extraction and rounding
##############################################################################

def q_numerator(q):
    return q.n

def q_denominator(q):
    return q.d

def q_floor(q):
    """Largest backend integer not greater than *q*"""
    I = q.backend
    i = I.divide(q.n, q.d)
    if I.sign(q.n) < 0 and not q.isIntegral():
        i = I.subtract(i, I.one)
    return i

def q_round_to_nearest(q, tiebreak):
    """Round to nearest integer

    Calls the *tiebreak*(lower, upper) function with the two
    alternatives if *q* is precisely between two integers. Returns a
    backend integer.
    """
    I     = q.backend
    lower = q_floor(q)
    upper = I.add(lower, I.one)

    # twice the distance to lower, in units of 1/q.d
    twice = I.multiply(I.subtract(q.n, I.multiply(lower, q.d)),
                       I.from_int(2))
    c = I.compare(twice, q.d)
    if c < 0:
        return lower
    elif c > 0:
        return upper
    else:
        return tiebreak(lower, upper)

def q_round_rne(q):
    """Round to nearest integer, ties to even"""
    I = q.backend
    two = I.from_int(2)
    def tiebreak(lower, upper):
        if I.is_zero(I.subtract(lower, I.multiply(I.divide(lower, two),
                                                  two))):
            return lower
        else:
            return upper
    return q_round_to_nearest(q, tiebreak)

##############################################################################
# Rational numbers
##############################################################################

class Rational:
    """Rational number

    *n* is the numerator, *d* the (optional) denominator.

    With a single argument, *n* may be an integer (a Python int or
    the backend's own type), a float (converted exactly), a string
    of the form ``[sign]digits[/[sign]digits]``, or another rational
    (copied). With two arguments both must be integers and the pair
    is brought into canonical form:

    >>> Rational(6, -4)
    Rational(-3, 2)
    >>> Rational("0x10/0x18")
    Rational(2, 3)

    Rationals are mutable (the in-place operators, the component
    setters and :func:`swap` modify the receiver) and therefore not
    hashable. Do not share one instance between threads without
    external locking.
    """

    backend = PYTHON_INT

    def __init__(self, n=0, d=None):
        I = self.backend
        if d is not None:
            self.n, self.d = q_canonical(I,
                                         self.integer(n),
                                         self.integer(d))
        elif isinstance(n, Rational):
            assert self.compatible(n)
            self.n = n.n
            self.d = n.d
        elif isinstance(n, str):
            self.n, self.d = q_components_from_string(I, n)
        elif isinstance(n, float):
            self.n, self.d = q_components_from_float(I, n)
        else:
            self.n = self.integer(n)
            self.d = I.one

    @classmethod
    def from_float(cls, f):
        """Exact rational for a finite float"""
        return cls(float(f))

    @classmethod
    def from_string(cls, text):
        """Parse a rational, raises :class:`.Format_Error` on failure"""
        return cls(str(text))

    ######################################################################
    # Internal utilities

    def compatible(self, other):
        """Test if another rational uses the same kind of backend"""
        return type(self.backend) is type(other.backend)

    def scalar(self, value):
        """Backend integer for an integer scalar, or None"""
        I = self.backend
        if I.is_native(value):
            return value
        elif isinstance(value, int):
            return I.from_int(value)
        else:
            return None

    def integer(self, value):
        """Backend integer for an integer scalar, or TypeError"""
        rv = self.scalar(value)
        if rv is None:
            raise TypeError("cannot use %r as an integer for %s" %
                            (value, self.__class__.__name__))
        return rv

    def lift(self, value):
        """Rational for a scalar, or None if *value* is not a number"""
        if isinstance(value, Rational):
            return value
        elif isinstance(value, float) or self.scalar(value) is not None:
            return self.__class__(value)
        else:
            return None

    ######################################################################
    # Components

    @property
    def numerator(self):
        return self.n

    @numerator.setter
    def numerator(self, value):
        self.n = self.integer(value)

    @property
    def denominator(self):
        return self.d

    @denominator.setter
    def denominator(self, value):
        self.d = self.integer(value)

    def components(self):
        """The (numerator, denominator) pair"""
        return (self.n, self.d)

    def normalise(self):
        """Restore canonical form after direct component writes

        >>> q = Rational()
        >>> q.numerator, q.denominator = 10, -4
        >>> q.normalise()
        >>> q
        Rational(-5, 2)
        """
        self.n, self.d = q_canonical(self.backend, self.n, self.d)

    def swap(self, other):
        """Exchange values with another rational"""
        assert self.compatible(other)
        self.n, other.n = other.n, self.n
        self.d, other.d = other.d, self.d

    def __reduce__(self):
        return (self.__class__, (self.n, self.d))

    ######################################################################
    # Arithmetic

    def __add__(self, other):
        """Addition"""
        if isinstance(other, Rational):
            return q_add_sub(self, other, True)
        elif isinstance(other, float):
            return q_add_sub(self, self.__class__(other), True)
        s = self.scalar(other)
        if s is None:
            return NotImplemented
        return q_add_sub_scalar(self, s, True)

    def __sub__(self, other):
        """Subtraction"""
        if isinstance(other, Rational):
            return q_add_sub(self, other, False)
        elif isinstance(other, float):
            return q_add_sub(self, self.__class__(other), False)
        s = self.scalar(other)
        if s is None:
            return NotImplemented
        return q_add_sub_scalar(self, s, False)

    def __mul__(self, other):
        """Multiplication"""
        if isinstance(other, Rational):
            return q_mul_div(self, other, True)
        elif isinstance(other, float):
            return q_mul_div(self, self.__class__(other), True)
        s = self.scalar(other)
        if s is None:
            return NotImplemented
        return q_mul_scalar(self, s)

    def __truediv__(self, other):
        """Division

        Raises :class:`.Division_By_Zero` if *other* is zero.
        """
        if isinstance(other, Rational):
            return q_mul_div(self, other, False)
        elif isinstance(other, float):
            return q_mul_div(self, self.__class__(other), False)
        s = self.scalar(other)
        if s is None:
            return NotImplemented
        return q_div_scalar(self, s)

    __radd__ = __add__
    __rmul__ = __mul__

    def __rsub__(self, other):
        rv = self.__sub__(other)
        if rv is NotImplemented:
            return rv
        return -rv

    def __rtruediv__(self, other):
        lhs = self.lift(other)
        if lhs is None:
            return NotImplemented
        return q_mul_div(lhs, self, False)

    def inplace(self, rv):
        if rv is NotImplemented:
            return rv
        self.swap(rv)
        return self

    def __iadd__(self, other):
        return self.inplace(self.__add__(other))

    def __isub__(self, other):
        return self.inplace(self.__sub__(other))

    def __imul__(self, other):
        return self.inplace(self.__mul__(other))

    def __itruediv__(self, other):
        return self.inplace(self.__truediv__(other))

    def __pow__(self, other):
        """Exponentiation

        Only integer exponents are supported. Raises
        :class:`.Division_By_Zero` for zero to a negative power.
        """
        if not isinstance(other, int):
            return NotImplemented
        I = self.backend
        if other < 0:
            if self.isZero():
                raise Division_By_Zero("zero to a negative power")
            n, d = q_fix_sign(I, self.d, self.n)
            other = -other
        else:
            n, d = self.n, self.d

        # powers of coprime integers are coprime
        return q_new(self.__class__,
                     q_ipow(I, n, other),
                     q_ipow(I, d, other))

    def __abs__(self):
        """Absolute value"""
        if self.isNegative():
            return -self
        else:
            return q_new(self.__class__, self.n, self.d)

    def __neg__(self):
        """Negation"""
        return q_new(self.__class__, self.backend.negate(self.n), self.d)

    def __pos__(self):
        return q_new(self.__class__, self.n, self.d)

    ######################################################################
    # Comparison

    def compare(self, other):
        """Three-way comparison

        Returns -1, 0 or 1. *other* may be a rational, an integer or a
        finite float.
        """
        if isinstance(other, Rational):
            return q_compare(self, other)
        elif isinstance(other, float):
            return q_compare(self, self.__class__(other))
        return q_compare_scalar(self, self.integer(other))

    def richcmp(self, other, op):
        if isinstance(other, float) and not math.isfinite(other):
            # a finite value relates to inf and NaN exactly as 0 does
            return op(0.0, other)
        elif (not isinstance(other, (Rational, float)) and
              self.scalar(other) is None):
            return NotImplemented
        return op(self.compare(other), 0)

    def __lt__(self, other):
        return self.richcmp(other, operator.lt)

    def __le__(self, other):
        return self.richcmp(other, operator.le)

    def __eq__(self, other):
        return self.richcmp(other, operator.eq)

    def __ne__(self, other):
        return self.richcmp(other, operator.ne)

    def __gt__(self, other):
        return self.richcmp(other, operator.gt)

    def __ge__(self, other):
        return self.richcmp(other, operator.ge)

    __hash__ = None

    ######################################################################
    # Queries

    def isZero(self):
        """Test if zero"""
        return self.backend.is_zero(self.n)

    def isNegative(self):
        """Test if negative

        Returns false for 0.
        """
        return self.backend.sign(self.n) < 0

    def isIntegral(self):
        """Test if integral"""
        return self.backend.is_one(self.d)

    def sign(self):
        """Returns -1, 0 or 1"""
        return self.backend.sign(self.n)

    def __bool__(self):
        return not self.isZero()

    ######################################################################
    # Conversion

    def to_python_int(self):
        """Convert to python int, truncating towards zero"""
        I = self.backend
        return I.to_int(I.divide(self.n, self.d))

    def to_python_float(self):
        """Convert to python float

        The result is correctly rounded; OverflowError is raised if
        the value is out of range for a float.
        """
        I = self.backend
        return I.to_int(self.n) / I.to_int(self.d)

    def as_integer_ratio(self):
        """Numerator and denominator as python ints"""
        I = self.backend
        return (I.to_int(self.n), I.to_int(self.d))

    def convert_to(self, target):
        """Convert to another numeric type

        *target* is int, float, or any type constructible from an int
        that supports true division, for example
        :class:`fractions.Fraction`:

        >>> from fractions import Fraction
        >>> Rational(-7, 2).convert_to(Fraction)
        Fraction(-7, 2)
        >>> Rational(-7, 2).convert_to(int)
        -3
        """
        if target is int:
            return self.to_python_int()
        elif target is float:
            return self.to_python_float()
        n, d = self.as_integer_ratio()
        return target(n) / target(d)

    __int__   = to_python_int
    __trunc__ = to_python_int
    __float__ = to_python_float

    def __floor__(self):
        return self.backend.to_int(q_floor(self))

    def __ceil__(self):
        return -math.floor(-self)

    def __round__(self, ndigits=None):
        """Round to nearest, ties to even"""
        I = self.backend
        if ndigits is None:
            return I.to_int(q_round_rne(self))
        shift = q_ipow(I, I.from_int(10), abs(ndigits))
        if ndigits > 0:
            return q_new(self.__class__,
                         q_round_rne(q_mul_scalar(self, shift)),
                         I.one) / shift
        else:
            return q_new(self.__class__,
                         I.multiply(q_round_rne(q_div_scalar(self, shift)),
                                    shift),
                         I.one)

    ######################################################################
    # Formatting

    def to_string(self, digits=0, flags=FMT_DEC):
        """Convert to string

        Numerator and denominator are formatted by the backend with
        the same *digits* and *flags*. The denominator is omitted if
        it is 1, even when the flags would print it as ``0x1``.

        >>> Rational(-31, 16).to_string()
        '-31/16'
        >>> from mpq.integers import FMT_HEX, FMT_SHOWBASE
        >>> Rational(-31, 16).to_string(flags=FMT_HEX | FMT_SHOWBASE)
        '-0x1f/0x10'
        """
        I  = self.backend
        rv = I.to_string(self.n, digits, flags)
        if not I.is_one(self.d):
            rv += "/" + I.to_string(self.d, digits, flags)
        return rv

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        I = self.backend
        if I.is_one(self.d):
            return "%s(%s)" % (self.__class__.__name__,
                               I.to_string(self.n))
        else:
            return "%s(%s, %s)" % (self.__class__.__name__,
                                   I.to_string(self.n),
                                   I.to_string(self.d))
