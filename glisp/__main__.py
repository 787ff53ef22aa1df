"""CLI: python -m glisp [-v] <program.gl>"""

import logging
import sys
from pathlib import Path

from .analyzer import process_program
from .diagnostics import CompileError
from .encoding import dumps, encode_diagnostic, encode_tree
from .parser import parse


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = "-v" in args
    if verbose:
        args.remove("-v")
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if len(args) != 1:
        print("Usage: python -m glisp [-v] <program.gl>", file=sys.stderr)
        return 2

    src = Path(args[0]).read_text()
    try:
        tree = parse(src)
        process_program(tree)
    except CompileError as e:
        print(dumps(encode_diagnostic(e.diagnostic)))
        return 1

    print(dumps(encode_tree(tree)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
