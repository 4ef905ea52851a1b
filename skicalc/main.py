"""Runs the named skicalc programs from the command line. Also uses error handling context manager. Called from the
skicalc console script.
"""

import argparse

from termcolor import colored

from skicalc.interpreter import recursion_limit, run
from skicalc.lang.error import ErrorHandler
from skicalc.lang.programs import PROGRAMS, build, describe
from skicalc.render import source


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="skicalc", description="SKI combinator calculus with foreign primitives")
    parser.add_argument("program", help="program to run (see --list)", nargs="?")
    parser.add_argument("argument", help="numeric argument passed to the program", nargs="?", type=float, default=0.0)
    parser.add_argument("--list", help="list the available programs and exit", action="store_true")
    parser.add_argument("--source", help="print the program as Python source instead of running it",
                        action="store_true")
    parser.add_argument("--recursion-limit", help="raise Python's recursion limit for deep reductions", type=int,
                        default=None, metavar="N")
    args = parser.parse_args(argv)

    if not args.list and args.program is None:
        parser.error("a program is required unless --list is given")
    return args


def main(argv=None):
    """Runs skicalc. Called from the skicalc console script."""
    with ErrorHandler() as error_handler:
        args = parse_args(argv)

        if args.list:
            for name in PROGRAMS:
                print(f"{colored(name, attrs=['bold'])}: {describe(name)}")
            return

        term, arguments = build(args.program, args.argument)

        if args.source:
            print(source(term))
            for argument in arguments:
                print(f"  .apply({source(argument)})")
            return

        error_handler.register(args.program, term)
        with recursion_limit(args.recursion_limit):
            result = run(term, *arguments)
        error_handler.remove()

        print(result)


if __name__ == "__main__":
    main()
