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

# Here we evaluate rational expressions using a single function,
# q_eval_function(FUNCTION, ARGS...), or q_eval_predicate for the
# boolean ones. The same table drives the mpq-eval command line tool:
#
#    $ mpq-eval q.add 7/3 5/6
#    19/6

import argparse
import logging
import sys

from .errors import Rational_Error
from .integers import FMT_DEC, FMT_HEX, FMT_SHOWBASE
from .rationals import Rational

log = logging.getLogger("mpq.evaluator")

TYP_BOOL     = "boolean"
TYP_INT      = "integer"
TYP_FLOAT    = "float"
TYP_RATIONAL = "rational"

Q_OPS = {
    "q.abs"        : {"arity"  : 1,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_RATIONAL},
    "q.neg"        : {"arity"  : 1,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_RATIONAL},
    "q.add"        : {"arity"  : 2,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_RATIONAL},
    "q.sub"        : {"arity"  : 2,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_RATIONAL},
    "q.mul"        : {"arity"  : 2,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_RATIONAL},
    "q.div"        : {"arity"  : 2,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_RATIONAL},
    "q.pow"        : {"arity"  : 2,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_RATIONAL},
    "q.isZero"     : {"arity"  : 1,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_BOOL},
    "q.isNegative" : {"arity"  : 1,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_BOOL},
    "q.isIntegral" : {"arity"  : 1,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_BOOL},
    "q.eq"         : {"arity"  : 2,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_BOOL},
    "q.lt"         : {"arity"  : 2,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_BOOL},
    "q.gt"         : {"arity"  : 2,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_BOOL},
    "q.leq"        : {"arity"  : 2,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_BOOL},
    "q.geq"        : {"arity"  : 2,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_BOOL},
    # Conversions
    "q.to_int"     : {"arity"  : 1,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_INT},
    "q.to_float"   : {"arity"  : 1,
                      "args"   : TYP_RATIONAL,
                      "result" : TYP_FLOAT},
}

def all_ops_where(arity = None, args = None, result = None):
    rv = set()
    for op in Q_OPS:
        if arity is not None and arity != Q_OPS[op]["arity"]:
            continue
        if args is not None and args != Q_OPS[op]["args"]:
            continue
        if result is not None and result != Q_OPS[op]["result"]:
            continue
        rv.add(op)
    return rv

def q_pow(base, exponent):
    if not exponent.isIntegral():
        raise ValueError("exponent %s is not an integer" % exponent)
    return base ** exponent.to_python_int()

##############################################################################
# Evaluation
##############################################################################

def q_eval_predicate(q_op, *args):
    assert q_op in Q_OPS
    assert Q_OPS[q_op]["result"] == TYP_BOOL
    assert Q_OPS[q_op]["arity"] == len(args)

    q_fn = {
        "q.isZero"     : lambda x: x.isZero(),
        "q.isNegative" : lambda x: x.isNegative(),
        "q.isIntegral" : lambda x: x.isIntegral(),
        "q.eq"         : lambda x, y: x == y,
        "q.lt"         : lambda x, y: x < y,
        "q.gt"         : lambda x, y: x > y,
        "q.leq"        : lambda x, y: x <= y,
        "q.geq"        : lambda x, y: x >= y,
    }[q_op]

    return q_fn(*args)

def q_eval_function(q_op, *args):
    assert q_op in Q_OPS
    assert Q_OPS[q_op]["result"] != TYP_BOOL
    assert Q_OPS[q_op]["arity"] == len(args)
    for arg in args[1:]:
        assert args[0].compatible(arg)

    q_fn = {
        "q.abs"      : lambda x: abs(x),
        "q.neg"      : lambda x: -x,
        "q.add"      : lambda x, y: x + y,
        "q.sub"      : lambda x, y: x - y,
        "q.mul"      : lambda x, y: x * y,
        "q.div"      : lambda x, y: x / y,
        "q.pow"      : q_pow,
        "q.to_int"   : lambda x: x.to_python_int(),
        "q.to_float" : lambda x: x.to_python_float(),
    }[q_op]

    return q_fn(*args)

def q_eval(q_op, *args):
    if Q_OPS[q_op]["result"] == TYP_BOOL:
        return q_eval_predicate(q_op, *args)
    else:
        return q_eval_function(q_op, *args)

##############################################################################
# Command line
##############################################################################

def get_rational_class(backend):
    if backend == "gmp":
        from .gmp import MPQ
        return MPQ
    else:
        assert backend == "int"
        return Rational

def main(argv=None):
    ap = argparse.ArgumentParser(
        prog="mpq-eval",
        description="Evaluate an operation on exact rationals.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    ap.add_argument("op",
                    choices=sorted(Q_OPS),
                    help="Operation to evaluate.")
    ap.add_argument("args", metavar="ARG", nargs="*",
                    help="Operands, e.g. 7/3 or -0x1f/0x10.")
    ap.add_argument("--backend",
                    default="int",
                    choices=["int", "gmp"],
                    help="Integer backend for numerator and denominator.")
    ap.add_argument("--hex",
                    default=False,
                    action="store_true",
                    help="Print rational results in hexadecimal.")
    ap.add_argument("--showbase",
                    default=False,
                    action="store_true",
                    help="Prefix hexadecimal output with 0x.")
    ap.add_argument("--verbose",
                    default=False,
                    action="store_true",
                    help="Log operands and backend.")
    options = ap.parse_args(argv)

    logging.basicConfig(
        format="%(name)s: %(levelname)s: %(message)s",
        level=logging.DEBUG if options.verbose else logging.WARNING)

    if Q_OPS[options.op]["arity"] != len(options.args):
        ap.error("%s expects %u operand(s), got %u" %
                 (options.op, Q_OPS[options.op]["arity"], len(options.args)))

    cls = get_rational_class(options.backend)
    log.debug("using %s with backend %r", cls.__name__, cls.backend)

    flags = FMT_DEC
    if options.hex:
        flags |= FMT_HEX
    if options.showbase:
        flags |= FMT_SHOWBASE

    try:
        args = [cls(arg) for arg in options.args]
        for text, q in zip(options.args, args):
            log.debug("operand %r parsed as %r", text, q)
        result = q_eval(options.op, *args)
    except (Rational_Error, ValueError, OverflowError) as err:
        print("mpq-eval: error: %s" % err, file=sys.stderr)
        return 1

    if isinstance(result, Rational):
        print(result.to_string(flags=flags))
    elif isinstance(result, bool):
        print("true" if result else "false")
    else:
        print(result)
    return 0

if __name__ == "__main__":
    sys.exit(main())
