"""Number of cells in the order-n von Neumann neighbourhood."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence


def neumann_formula(n: int) -> int:
    """Closed form 2n^2 + 2n + 1."""
    return 2 * n * n + 2 * n + 1


def neumann_recursive(n: int) -> int:
    """Recurrence a(0) = 1, a(n) = a(n - 1) + 4n."""
    if n < 0:
        raise ValueError("order must not be negative")
    cells = 1
    for order in range(1, n + 1):
        cells += 4 * order
    return cells


def _tokens(args: Sequence[str]) -> Iterator[str]:
    yield from args
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read n and print the cell count by both methods."""
    tokens = _tokens(sys.argv[1:] if argv is None else argv)
    print("------ Von Neumann neighbourhood ------")
    print("Known:")
    print(" order 0 has 1 cell")
    print(" order 1 has 5 cells")
    print(" order 2 has 13 cells")
    print("Find the number of cells of order n")
    print("----------------------------")
    print("Enter n")
    try:
        n = int(next(tokens))
        recursive = neumann_recursive(n)
    except (StopIteration, ValueError):
        print("Invalid n!", file=sys.stderr)
        return 1
    print("------------ formula -------------")
    print(f" order {n} has {neumann_formula(n)} cells")
    print("------------ recurrence -------------")
    print(f" order {n} has {recursive} cells")
    return 0