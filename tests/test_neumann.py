import pytest

from algokit.neumann import main, neumann_formula, neumann_recursive


@pytest.mark.parametrize("n,cells", [(0, 1), (1, 5), (2, 13)])
def test_known_orders(n, cells):
    assert neumann_formula(n) == cells
    assert neumann_recursive(n) == cells


@pytest.mark.parametrize("n", range(0, 60))
def test_methods_agree(n):
    assert neumann_formula(n) == neumann_recursive(n)


def test_recurrence_step():
    for n in range(1, 30):
        assert neumann_formula(n) - neumann_formula(n - 1) == 4 * n


def test_recursive_rejects_negative():
    with pytest.raises(ValueError):
        neumann_recursive(-1)


def test_main_prints_both_results(capsys):
    assert main(["2"]) == 0
    out = capsys.readouterr().out
    assert out.count(" order 2 has 13 cells") == 3


def test_main_rejects_negative(capsys):
    assert main(["-3"]) == 1
    assert "Invalid n" in capsys.readouterr().err