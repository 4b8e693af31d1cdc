"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parse import ParseError, parse_arguments
from pushswap.sort import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; on bad input print ``Error`` to stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_arguments(args)
    except ParseError:
        print("Error", file=sys.stderr)
        return 1
    for operation in solve(values):
        print(operation)
    return 0


if __name__ == "__main__":
    sys.exit(main())