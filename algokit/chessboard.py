"""Cover a 2^k x 2^k board with one special square using L-shaped trominoes."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

SEPARATOR = "-" * 48


def cover_board(k: int, special_row: int, special_column: int) -> list[list[int]]:
    """Tile the board; each tromino gets a number, the special square 0.

    Tiles are numbered in the order the divide-and-conquer places them.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    size = 2**k
    if not (0 <= special_row < size and 0 <= special_column < size):
        raise ValueError("special square lies outside the board")
    board = [[0] * size for _ in range(size)]
    counter = 0

    def cover(top: int, left: int, row: int, column: int, span: int) -> None:
        nonlocal counter
        if span == 1:
            return
        counter += 1
        tile = counter
        half = span // 2
        quadrants = (
            (top, left, top + half - 1, left + half - 1),
            (top, left + half, top + half - 1, left + half),
            (top + half, left, top + half, left + half - 1),
            (top + half, left + half, top + half, left + half),
        )
        for q_top, q_left, corner_row, corner_column in quadrants:
            if q_top <= row < q_top + half and q_left <= column < q_left + half:
                cover(q_top, q_left, row, column, half)
            else:
                board[corner_row][corner_column] = tile
                cover(q_top, q_left, corner_row, corner_column, half)

    cover(0, 0, special_row, special_column, size)
    return board


def _tokens(args: Sequence[str]) -> Iterator[str]:
    yield from args
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read k and the special square, then print the covered board."""
    tokens = _tokens(sys.argv[1:] if argv is None else argv)
    print("---------------- Chessboard coverage ----------------")
    print("Enter k (k >= 0) for a (2^k)*(2^k) board")
    try:
        k = int(next(tokens))
    except (StopIteration, ValueError):
        k = -1
    if k < 0:
        print("Invalid k!", file=sys.stderr)
        return 1
    print("Enter the row and column of the special square (from 0, separated by a space)")
    try:
        row = int(next(tokens))
        column = int(next(tokens))
        board = cover_board(k, row, column)
    except (StopIteration, ValueError):
        print("Invalid row or column!", file=sys.stderr)
        return 1
    print(SEPARATOR)
    for line in board:
        print("".join(f"{cell}\t" for cell in line))
    print(SEPARATOR)
    return 0