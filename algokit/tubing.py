"""Place a main pipeline to minimise total spur length to a row of wells."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

SEPARATOR = "-" * 48


@dataclass(frozen=True)
class PipelinePlacement:
    """Optimal y range for the pipeline and the resulting total spur length.

    For an odd number of wells ``low == high``.
    """

    low: float
    high: float
    total_distance: float


def optimal_pipeline(ys: Iterable[float]) -> PipelinePlacement:
    """Median placement of a horizontal pipeline for wells at the given y."""
    ordered = sorted(ys)
    if not ordered:
        raise ValueError("at least one well is needed")
    count = len(ordered)
    middle = ordered[count // 2]
    total = sum(abs(y - middle) for y in ordered)
    low = middle if count % 2 else ordered[count // 2 - 1]
    return PipelinePlacement(low, middle, total)


def _tokens(args: Sequence[str]) -> Iterator[str]:
    yield from args
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read the wells' y coordinates and print the optimal placement."""
    tokens = _tokens(sys.argv[1:] if argv is None else argv)
    print("---------------- Pipeline placement ----------------")
    print("Enter the number of wells n (n >= 0)")
    try:
        count = int(next(tokens))
    except (StopIteration, ValueError):
        count = -1
    if count < 0:
        print("Invalid n!", file=sys.stderr)
        return 1
    print(f"Enter the y coordinates of the {count} wells (separated by spaces)")
    try:
        ys = [float(next(tokens)) for _ in range(count)]
        placement = optimal_pipeline(ys)
    except (StopIteration, ValueError):
        print("Invalid y coordinates!", file=sys.stderr)
        return 1
    print(SEPARATOR)
    if count % 2:
        print(f"Optimal pipeline position: y = {placement.high:g}")
    else:
        print(f"Optimal pipeline position: y = [{placement.low:g},{placement.high:g}]")
    print(f"Total length of pipes from the wells: {placement.total_distance:g}")
    print(SEPARATOR)
    return 0