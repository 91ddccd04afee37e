"""0/1 knapsack by dynamic programming and by recursion."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache

SEPARATOR = "-" * 48


def _validate(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> tuple[list[int], list[int]]:
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w in weights) or any(v < 0 for v in values):
        raise ValueError("weights and values must not be negative")
    return weights, values


def knapsack_table(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> list[list[int]]:
    """The DP table: row i, column j is the best value of the first i items within j."""
    weights, values = _validate(weights, values, capacity)
    table = [[0] * (capacity + 1)]
    for weight, value in zip(weights, values):
        previous = table[-1]
        row = [0] + [
            max(value + previous[j - weight], previous[j]) if weight <= j else previous[j]
            for j in range(1, capacity + 1)
        ]
        table.append(row)
    return table


def knapsack_iterative(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Maximum total value, read from the last cell of the DP table."""
    return knapsack_table(weights, values, capacity)[-1][-1]


def knapsack_recursive(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Maximum total value by the include/exclude recursion."""
    weights, values = _validate(weights, values, capacity)

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        weight, value = weights[count - 1], values[count - 1]
        if weight > room:
            return best(count - 1, room)
        return max(value + best(count - 1, room - weight), best(count - 1, room))

    return best(len(weights), capacity)


def format_table(table: Sequence[Sequence[int]]) -> str:
    """One line per row: the row number, then every cell, tab separated."""
    return "\n".join(
        f"{index}:\t" + "".join(f"{cell}\t" for cell in row) for index, row in enumerate(table)
    )


def _tokens(args: Sequence[str]) -> Iterator[str]:
    yield from args
    for line in sys.stdin:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    try:
        return int(next(tokens))
    except (StopIteration, ValueError):
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Read the items and capacity, then solve with the chosen method."""
    tokens = _tokens(sys.argv[1:] if argv is None else argv)
    print("---------------- Knapsack problem ----------------")
    print("Enter the number of items n (n >= 0)")
    count = _read_int(tokens)
    if count is None or count < 0:
        print("Invalid n!", file=sys.stderr)
        return 1
    print("Enter the knapsack capacity W (W >= 0)")
    capacity = _read_int(tokens)
    if capacity is None or capacity < 0:
        print("Invalid W!", file=sys.stderr)
        return 1
    weights: list[int] = []
    values: list[int] = []
    for number in range(1, count + 1):
        print(f"Enter the weight and value of item {number} (separated by a space)")
        weight = _read_int(tokens)
        value = _read_int(tokens)
        if weight is None or value is None or weight < 0 or value < 0:
            print("Invalid input!", file=sys.stderr)
            return 1
        weights.append(weight)
        values.append(value)
    print(SEPARATOR)
    print("Choose an algorithm:")
    print("[1] iterative")
    print("[2] recursive")
    print(SEPARATOR)
    choice = _read_int(tokens)
    if choice == 1:
        table = knapsack_table(weights, values, capacity)
        print(f"Maximum value that fits: {table[-1][-1]}")
        print(SEPARATOR)
        print(format_table(table))
    elif choice == 2:
        print(f"Maximum value that fits: {knapsack_recursive(weights, values, capacity)}")
    else:
        print("Invalid choice!", file=sys.stderr)
        return 1
    print(SEPARATOR)
    return 0