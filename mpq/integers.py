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
This module defines what the rational core needs from an integer
type, and provides the default implementation on top of Python's
built-in :class:`int`.

Any arbitrary precision signed integer can be used as the numerator
and denominator of a :class:`.Rational`, as long as someone writes an
:class:`Integer_Backend` for it. The rational code never looks at the
integers directly, it only ever calls the backend.

>>> I = Python_Int_Backend()
>>> I.to_string(I.from_string("-0x1f"))
'-31'
>>> I.to_string(255, flags=FMT_HEX | FMT_SHOWBASE)
'0xff'
"""

import abc
import decimal
import math
import string

from .errors import Format_Error

##############################################################################
# Formatting flags
##############################################################################

FMT_DEC       = 0
FMT_HEX       = 1
FMT_SHOWBASE  = 2
FMT_SHOWPOS   = 4
FMT_UPPERCASE = 8

FMT_ALL = FMT_HEX | FMT_SHOWBASE | FMT_SHOWPOS | FMT_UPPERCASE

DIGITS = {10 : frozenset(string.digits),
          16 : frozenset(string.hexdigits)}

##############################################################################
# Backend interface
##############################################################################

class Integer_Backend(abc.ABC):
    """Capabilities of an arbitrary precision signed integer

    Values are whatever the backend likes (Python ints, gmpy2 mpz,
    ...); they are treated as immutable. Every operation returns a
    fresh value and never modifies its arguments.
    """

    name = None

    def __init__(self):
        self.zero = self.from_int(0)
        self.one  = self.from_int(1)

    def __repr__(self):
        return "%s()" % self.__class__.__name__

    ######################################################################
    # Construction

    @abc.abstractmethod
    def is_native(self, value):
        """Test if *value* already is of the backend's integer type"""
        pass

    @abc.abstractmethod
    def from_int(self, value):
        """Create from a Python int"""
        pass

    @abc.abstractmethod
    def from_digits(self, text, base):
        """Create from a validated, unsigned digit string in *base*"""
        pass

    def from_string(self, text):
        """Create from a string

        The accepted syntax is an optional sign, an optional hex
        prefix (``0x`` or ``0X``), and a non-empty sequence of digits
        valid for the base. Raises :class:`.Format_Error` for anything
        else.
        """
        assert isinstance(text, str)

        body     = text
        negative = False
        if body[:1] in ("+", "-"):
            negative = body[0] == "-"
            body     = body[1:]

        if body[:2] in ("0x", "0X"):
            base = 16
            body = body[2:]
        else:
            base = 10

        if not body or not DIGITS[base].issuperset(body):
            raise Format_Error("could not parse %r as an integer" % text)

        value = self.from_digits(body, base)
        if negative:
            return self.negate(value)
        else:
            return value

    ######################################################################
    # Arithmetic

    @abc.abstractmethod
    def add(self, a, b):
        pass

    @abc.abstractmethod
    def subtract(self, a, b):
        pass

    @abc.abstractmethod
    def multiply(self, a, b):
        pass

    @abc.abstractmethod
    def divide(self, a, b):
        """Division, truncating towards zero"""
        pass

    @abc.abstractmethod
    def negate(self, a):
        pass

    @abc.abstractmethod
    def left_shift(self, a, bits):
        """Multiply *a* by 2 ** *bits*"""
        pass

    @abc.abstractmethod
    def gcd(self, a, b):
        """Greatest common divisor, never negative"""
        pass

    ######################################################################
    # Queries

    @abc.abstractmethod
    def compare(self, a, b):
        """Three-way comparison, returns -1, 0 or 1"""
        pass

    @abc.abstractmethod
    def sign(self, a):
        """Returns -1, 0 or 1"""
        pass

    @abc.abstractmethod
    def is_zero(self, a):
        pass

    def is_one(self, a):
        return self.compare(a, self.one) == 0

    ######################################################################
    # Conversion

    @abc.abstractmethod
    def to_int(self, a):
        """Convert to Python int"""
        pass

    @abc.abstractmethod
    def digits(self, magnitude, base):
        """Digits of a non-negative value in *base*, without prefix"""
        pass

    def to_string(self, a, digits=0, flags=FMT_DEC):
        """Convert to string

        *flags* is a combination of the ``FMT_*`` constants. *digits*
        is a precision hint; integers always print every digit so it
        is ignored here, but backends for other number kinds may use
        it.
        """
        assert isinstance(digits, int) and digits >= 0
        assert flags & ~FMT_ALL == 0

        base = (16 if flags & FMT_HEX else 10)
        if self.sign(a) < 0:
            prefix = "-"
            text   = self.digits(self.negate(a), base)
        else:
            prefix = ("+" if flags & FMT_SHOWPOS else "")
            text   = self.digits(a, base)

        if base == 16 and flags & FMT_SHOWBASE:
            prefix += "0x"
        if flags & FMT_UPPERCASE:
            return prefix.upper() + text.upper()
        else:
            return prefix + text

##############################################################################
# Python int backend
##############################################################################

class Python_Int_Backend(Integer_Backend):
    """Integer backend using Python's built-in int"""

    name = "int"

    def is_native(self, value):
        return isinstance(value, int)

    def from_int(self, value):
        assert isinstance(value, int)
        return int(value)

    def from_digits(self, text, base):
        if base == 10:
            # Decimal is exact and not bound by the int/str digit limit
            return int(decimal.Decimal(text))
        else:
            return int(text, base)

    def add(self, a, b):
        return a + b

    def subtract(self, a, b):
        return a - b

    def multiply(self, a, b):
        return a * b

    def divide(self, a, b):
        # Python's // floors, we need to truncate
        q = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            return -q
        else:
            return q

    def negate(self, a):
        return -a

    def left_shift(self, a, bits):
        assert bits >= 0
        return a << bits

    def gcd(self, a, b):
        return math.gcd(a, b)

    def compare(self, a, b):
        return (a > b) - (a < b)

    def sign(self, a):
        return (a > 0) - (a < 0)

    def is_zero(self, a):
        return a == 0

    def to_int(self, a):
        return int(a)

    def digits(self, magnitude, base):
        assert magnitude >= 0
        if base == 16:
            return format(magnitude, "x")
        else:
            return str(decimal.Decimal(magnitude))

PYTHON_INT = Python_Int_Backend()
