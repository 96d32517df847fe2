"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.algorithm import sort_stacks
from pushswap.parsing import InputError, parse_values, split_words
from pushswap.stack import Machine


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read integers from the arguments and write sorting operations to stdout."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    words = split_words(args[0], " ") if len(args) == 1 else args
    try:
        values = parse_values(words)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    machine = Machine(values, output=sys.stdout)
    sort_stacks(machine)
    return 0


if __name__ == "__main__":
    sys.exit(main())