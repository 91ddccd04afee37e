import random
from itertools import combinations

import pytest

from algokit.knapsack import (
    format_table,
    knapsack_iterative,
    knapsack_recursive,
    knapsack_table,
    main,
)


def _brute_force(weights, values, capacity):
    items = list(zip(weights, values))
    best = 0
    for size in range(len(items) + 1):
        for chosen in combinations(items, size):
            if sum(w for w, _ in chosen) <= capacity:
                best = max(best, sum(v for _, v in chosen))
    return best


def test_table_shape_and_monotonicity():
    weights, values, capacity = [2, 3, 4, 5], [3, 4, 5, 6], 5
    table = knapsack_table(weights, values, capacity)
    assert len(table) == len(weights) + 1
    assert all(len(row) == capacity + 1 for row in table)
    assert table[0] == [0] * (capacity + 1)
    assert all(row[0] == 0 for row in table)
    for upper, lower in zip(table, table[1:]):
        assert all(a <= b for a, b in zip(upper, lower))
    for row in table:
        assert all(a <= b for a, b in zip(row, row[1:]))


def test_no_items_or_no_room():
    assert knapsack_iterative([], [], 10) == 0
    assert knapsack_recursive([3], [9], 0) == 0


def test_format_table_layout():
    text = format_table([[0, 0], [0, 5]])
    assert text.splitlines() == ["0:\t0\t0\t", "1:\t0\t5\t"]


@pytest.mark.parametrize(
    "weights,values,capacity",
    [([1, 2], [3], 5), ([1], [2], -1), ([-1], [2], 3), ([1], [-2], 3)],
)
def test_invalid_input_raises(weights, values, capacity):
    with pytest.raises(ValueError):
        knapsack_iterative(weights, values, capacity)
    with pytest.raises(ValueError):
        knapsack_recursive(weights, values, capacity)


def test_main_iterative_prints_value_and_table(capsys):
    assert main(["2", "3", "1", "2", "2", "3", "1"]) == 0
    out = capsys.readouterr().out
    assert f"Maximum value that fits: {knapsack_iterative([1, 2], [2, 3], 3)}" in out
    assert format_table(knapsack_table([1, 2], [2, 3], 3)) in out


def test_main_recursive(capsys):
    assert main(["2", "3", "1", "2", "2", "3", "2"]) == 0
    out = capsys.readouterr().out
    assert f"Maximum value that fits: {knapsack_recursive([1, 2], [2, 3], 3)}" in out
    assert "0:\t" not in out


def test_main_rejects_bad_choice(capsys):
    assert main(["1", "1", "1", "1", "9"]) == 1
    assert "Invalid choice" in capsys.readouterr().err


def test_main_rejects_negative_count(capsys):
    assert main(["-1"]) == 1
    assert "Invalid n" in capsys.readouterr().err