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

from .errors import Rational_Error, Format_Error, Division_By_Zero
from .integers import (Integer_Backend, Python_Int_Backend, PYTHON_INT,
                       FMT_DEC, FMT_HEX, FMT_SHOWBASE, FMT_SHOWPOS,
                       FMT_UPPERCASE)
from .rationals import Rational
