"""Command-line entry point: steps a single λ-term given as an argument, or starts the interactive stepper. Uses the
error handling context manager. Called from the lambdastep console script.
"""

import argparse
import logging
import sys

from lambdastep.lang.error import ErrorHandler, LambdaSyntaxError
from lambdastep.lang.session import Session
from lambdastep.lang.shell import Shell
from lambdastep.pure.printer import print_term


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="lambdastep", description="Normal-order β-reduction, one step at a time.")
    parser.add_argument("expression", help="λ-term to reduce (if empty, goes to interactive mode)", nargs="?")
    parser.add_argument("-n", "--steps", type=int, default=1,
                        help="number of steps to print, stops early on a normal form (default: 1)")
    parser.add_argument("-d", "--define", action="append", default=[], metavar="NAME:=TERM",
                        help="named expression to expand in the λ-term, may be repeated")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every contraction and renaming")
    return parser.parse_args(argv)


def define_all(sess, definitions):
    """Saves every NAME:=TERM definition given on the command line. Raises LambdaSyntaxError on the first bad one."""
    for definition in definitions:
        if not Session.is_definition(definition):
            raise LambdaSyntaxError(f"'{definition}' is not a NAME{Session.DECLARE}TERM definition")
        name, __, expr = definition.partition(Session.DECLARE)
        sess.define(name, expr)


def main(argv=None):
    """Runs the stepper. Called from the lambdastep console script."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    sess = Session()

    # a bad definition always exits, even before the interactive stepper
    with ErrorHandler():
        define_all(sess, args.define)

    if args.expression is None:
        with ErrorHandler(fatal=False) as error_handler:
            Shell(sess, error_handler).cmdloop()
        return

    with ErrorHandler():
        sess.load(args.expression)
        for __ in range(args.steps):
            step = sess.step()
            if step is None:
                if not sess.history:
                    print(print_term(sess.current))  # already in normal form
                break
            print(print_term(step.after))


if __name__ == "__main__":
    sys.exit(main())
