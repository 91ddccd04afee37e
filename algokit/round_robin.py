"""Round-robin tournament schedule for 2^k players by divide and conquer."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

SEPARATOR = "-" * 48


def match_table(k: int) -> list[list[int]]:
    """Schedule for ``2**k`` players numbered from 1.

    Row i lists player i+1 followed by that player's opponent on each day.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    players = 2**k
    table = [[0] * (players + 1) for _ in range(players + 1)]
    table[1][1:] = range(1, players + 1)
    begin = 1
    blocks = players
    for _ in range(k):
        blocks //= 2
        for flag in range(1, blocks + 1):
            offset = (flag - 1) * begin * 2
            for i in range(begin + 1, 2 * begin + 1):
                for j in range(begin + 1, 2 * begin + 1):
                    table[i][j + offset] = table[i - begin][j + offset - begin]
                    table[i][j + offset - begin] = table[i - begin][j + offset]
        begin *= 2
    return [row[1:] for row in table[1:]]


def _tokens(args: Sequence[str]) -> Iterator[str]:
    yield from args
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read k and print the schedule table."""
    tokens = _tokens(sys.argv[1:] if argv is None else argv)
    print("---------------- Round-robin schedule ----------------")
    print("Enter k (k >= 0) for a tournament of n = 2^k players")
    try:
        k = int(next(tokens))
    except (StopIteration, ValueError):
        k = -1
    if k < 0:
        print("Invalid k!", file=sys.stderr)
        return 1
    print(SEPARATOR)
    for row in match_table(k):
        print("".join(f"{cell}\t" for cell in row))
    print(SEPARATOR)
    return 0