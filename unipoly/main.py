#!/usr/bin/env python

"""
Command-line polynomial calculator. Run with --help for options.
"""

import argparse
import sys

from unipoly import common
from unipoly import logging
from unipoly import opts
from unipoly.coefficients import ring_named
from unipoly.display import format
from unipoly.errors import PolynomialError
from unipoly.parse import parse, parse_scalar

def _step(op):
    return lambda text: (op, text)

def run(argv=None):
    """Entry point for the unipoly executable.

    This procedure reads sys.argv (or `argv`), applies the requested
    operations left to right and prints the resulting polynomial.
    """

    parser = argparse.ArgumentParser(description='Univariate polynomial calculator.')
    parser.add_argument("--ring", metavar="NAME", default=None,
                        help="Coefficient ring: integers, rationals, reals, complex or modN (default: inferred from the input)")

    ops = parser.add_argument_group("Operations (applied in the order given)")
    ops.add_argument("--plus", metavar="EXPR", dest="steps", action="append", type=_step("+"), help="Add a polynomial")
    ops.add_argument("--minus", metavar="EXPR", dest="steps", action="append", type=_step("-"), help="Subtract a polynomial")
    ops.add_argument("--times", metavar="EXPR", dest="steps", action="append", type=_step("*"), help="Multiply by a polynomial")
    ops.add_argument("--divide", metavar="EXPR", dest="steps", action="append", type=_step("//"), help="Replace with the quotient of long division")
    ops.add_argument("--mod", metavar="EXPR", dest="steps", action="append", type=_step("%"), help="Replace with the remainder of long division")
    ops.add_argument("--derivative", dest="steps", action="append_const", const=("d", None), help="Differentiate")
    parser.add_argument("--at", metavar="VALUE", default=None, help="Print the value at VALUE instead of the polynomial")

    internal_opts = parser.add_argument_group("Formatting and diagnostics")
    opts.setup(internal_opts)

    parser.add_argument("expr", nargs="?", default="-", help="Polynomial (omit or use '-' to read stdin)")
    args = parser.parse_args(argv)
    opts.read(args)

    try:
        ring = ring_named(args.ring) if args.ring is not None else None
    except ValueError as e:
        parser.error(str(e))

    if args.expr == "-":
        with common.open_maybe_stdin("-") as f:
            args.expr = f.read()

    try:
        result = parse(args.expr, ring=ring)
        for op, text in args.steps or ():
            with logging.task("apply", op=op, operand=text):
                if op == "d":
                    result = result.derivative()
                    continue
                operand = parse(text, ring=ring)
                if op == "+":
                    result = result + operand
                elif op == "-":
                    result = result - operand
                elif op == "*":
                    result = result * operand
                elif op == "//":
                    result = result // operand
                elif op == "%":
                    result = result % operand
        if args.at is not None:
            print(result(parse_scalar(args.at)))
        else:
            print(format(result))
    except (PolynomialError, ValueError, OverflowError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    run()
