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
Rationals on top of GMP integers, via gmpy2.

>>> q = MPQ("7/3") + MPQ(5, 6)
>>> q
MPQ(19, 6)
>>> type(q.numerator).__name__
'mpz'
"""

import gmpy2

from .integers import Integer_Backend
from .rationals import Rational

class GMP_Backend(Integer_Backend):
    """Integer backend using gmpy2.mpz"""

    name = "gmp"

    def is_native(self, value):
        return isinstance(value, gmpy2.mpz)

    def from_int(self, value):
        assert isinstance(value, int)
        return gmpy2.mpz(value)

    def from_digits(self, text, base):
        return gmpy2.mpz(text, base)

    def add(self, a, b):
        return a + b

    def subtract(self, a, b):
        return a - b

    def multiply(self, a, b):
        return a * b

    def divide(self, a, b):
        return gmpy2.t_div(a, b)

    def negate(self, a):
        return -a

    def left_shift(self, a, bits):
        assert bits >= 0
        return a << bits

    def gcd(self, a, b):
        return gmpy2.gcd(a, b)

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
        return format(magnitude, "x" if base == 16 else "d")

GMP = GMP_Backend()

class MPQ(Rational):
    """Rational number with gmpy2.mpz numerator and denominator"""

    backend = GMP
