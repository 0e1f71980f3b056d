"""Runs the Arith interpreter on a file or in command-line mode. Also uses error handling context manager. Called from
the arith console script.

Python version must be >=3.6, because error handling requires that dicts are insertion-ordered.
"""

import argparse
import sys

from arith.lang.error import ErrorHandler
from arith.lang.session import Session
from arith.lang.shell import Shell


def main(argv=None):
    """Runs Arith interpreter. Called from arith console script."""
    assert sys.version_info >= (3, 6), "arith cannot be run with python < 3.6"

    parser = argparse.ArgumentParser(prog="arith", description="Interpreter for the Arith language")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--trace", help="print every reduction step", action="store_true")
    parser.add_argument("--no-color", help="do not color error messages", action="store_true")
    args = parser.parse_args(argv)

    with ErrorHandler(color=not args.no_color, trace=args.trace) as error_handler:
        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False)
            sess.run()

            for result in sess.results:
                print(result)

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
