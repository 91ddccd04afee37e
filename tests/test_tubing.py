import random

import pytest

from algokit.tubing import PipelinePlacement, main, optimal_pipeline


def _total(ys, position):
    return sum(abs(y - position) for y in ys)


def test_small_odd_example():
    assert optimal_pipeline([3, 1, 2]) == PipelinePlacement(2, 2, 2)


def test_single_well():
    placement = optimal_pipeline([4.5])
    assert (placement.low, placement.high, placement.total_distance) == (4.5, 4.5, 0)


@pytest.mark.parametrize("seed", range(6))
def test_placement_is_optimal(seed):
    rng = random.Random(seed)
    ys = [rng.randint(-50, 50) for _ in range(rng.randint(1, 15))]
    placement = optimal_pipeline(ys)
    assert placement.low <= placement.high
    assert placement.low in ys and placement.high in ys
    assert placement.total_distance == _total(ys, placement.high)
    assert _total(ys, placement.low) == placement.total_distance
    for candidate in range(-60, 61):
        assert placement.total_distance <= _total(ys, candidate)


def test_odd_count_gives_single_point_and_even_gives_range():
    odd = optimal_pipeline([5, 1, 9, 7, 3])
    assert odd.low == odd.high == sorted([5, 1, 9, 7, 3])[2]
    even = optimal_pipeline([8, 2, 6, 4])
    assert (even.low, even.high) == (sorted([8, 2, 6, 4])[1], sorted([8, 2, 6, 4])[2])


def test_order_does_not_matter():
    ys = [7.5, -2.0, 3.25, 10.0, 0.5]
    assert optimal_pipeline(ys) == optimal_pipeline(sorted(ys, reverse=True))


def test_no_wells_raises():
    with pytest.raises(ValueError):
        optimal_pipeline([])


def test_main_odd(capsys):
    assert main(["3", "1", "2", "3"]) == 0
    out = capsys.readouterr().out
    assert "y = 2\n" in out
    assert f"Total length of pipes from the wells: {_total([1, 2, 3], 2):g}" in out


def test_main_even(capsys):
    assert main(["2", "1.5", "4"]) == 0
    assert "y = [1.5,4]" in capsys.readouterr().out


def test_main_rejects_bad_coordinate(capsys):
    assert main(["2", "1", "abc"]) == 1
    assert "Invalid y coordinates" in capsys.readouterr().err