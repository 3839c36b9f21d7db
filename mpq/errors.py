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
Exceptions raised by the rational number core.

Both derive from the builtin exception a caller would expect for the
same failure on Python's own numbers, so ``except ValueError`` and
``except ZeroDivisionError`` keep working.
"""

class Rational_Error(Exception):
    pass

class Format_Error(Rational_Error, ValueError):
    """A string could not be parsed as a rational (or integer)"""
    pass

class Division_By_Zero(Rational_Error, ZeroDivisionError):
    """The effective divisor of an operation is zero"""
    pass
