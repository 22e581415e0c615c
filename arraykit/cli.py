"""Command line entry point reading problem input from standard input."""

import argparse
import sys
from collections.abc import Sequence

from arraykit.grid import max_hourglass_sum, parse_grid
from arraykit.sums import two_sum


def _two_sum(text: str) -> str:
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected a count and a target")
    count, target = int(tokens[0]), int(tokens[1])
    values = tokens[2 : 2 + count]
    if count < 0 or len(values) < count:
        raise ValueError(f"expected {count} values, got {len(values)}")
    indices = two_sum([int(value) for value in values], target)
    return " ".join(map(str, indices))


def _hourglass(text: str) -> str:
    return str(max_hourglass_sum(parse_grid(text)))


_COMMANDS = {"two-sum": _two_sum, "hourglass": _hourglass}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command over standard input and print its answer."""
    parser = argparse.ArgumentParser(prog="arraykit")
    parser.add_argument(
        "command",
        choices=sorted(_COMMANDS),
        help="two-sum: count, target, then values; hourglass: a 6x6 grid",
    )
    args = parser.parse_args(argv)
    try:
        answer = _COMMANDS[args.command](sys.stdin.read())
    except ValueError as error:
        print(f"arraykit: {error}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())