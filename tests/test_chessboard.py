from collections import defaultdict

import pytest

from algokit.chessboard import cover_board, main


def test_single_square_board():
    assert cover_board(0, 0, 0) == [[0]]


def test_two_by_two_board():
    assert cover_board(1, 0, 0) == [[0, 1], [1, 1]]


@pytest.mark.parametrize(
    "k,row,column", [(1, 1, 1), (2, 0, 3), (2, 2, 1), (3, 5, 6), (4, 0, 0), (4, 15, 9)]
)
def test_every_tile_is_an_l_tromino(k, row, column):
    board = cover_board(k, row, column)
    size = 2**k
    assert len(board) == size
    assert all(len(line) == size for line in board)
    cells = defaultdict(list)
    for r, line in enumerate(board):
        for c, tile in enumerate(line):
            cells[tile].append((r, c))
    assert cells[0] == [(row, column)]
    tiles = sorted(t for t in cells if t != 0)
    assert tiles == list(range(1, len(tiles) + 1))
    assert 3 * len(tiles) + 1 == size * size
    for tile in tiles:
        positions = cells[tile]
        assert len(positions) == 3
        rows = {r for r, _ in positions}
        columns = {c for _, c in positions}
        assert max(rows) - min(rows) == 1
        assert max(columns) - min(columns) == 1


@pytest.mark.parametrize("k,row,column", [(-1, 0, 0), (2, 4, 0), (2, 0, -1)])
def test_invalid_input_raises(k, row, column):
    with pytest.raises(ValueError):
        cover_board(k, row, column)


def test_main_prints_board(capsys):
    assert main(["1", "1", "0"]) == 0
    out = capsys.readouterr().out
    expected_rows = ["".join(f"{cell}\t" for cell in line) for line in cover_board(1, 1, 0)]
    for text in expected_rows:
        assert text in out.splitlines()


def test_main_rejects_negative_k(capsys):
    assert main(["-2"]) == 1
    assert "Invalid k" in capsys.readouterr().err


def test_main_rejects_bad_square(capsys):
    assert main(["1", "2", "0"]) == 1
    assert "Invalid row or column" in capsys.readouterr().err