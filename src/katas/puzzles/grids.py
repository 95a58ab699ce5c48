"""Two-dimensional grid puzzles: matrix product and tic-tac-toe."""

from __future__ import annotations

from typing import Sequence

Matrix = Sequence[Sequence[float]]
Board = Sequence[Sequence[str | None]]

PLAYERS = ("X", "0")

# every winning line on a 3x3 board as (row, col) coordinates, checked in order
_LINES: list[tuple[tuple[int, int], ...]] = (
    [tuple((r, c) for c in range(3)) for r in range(3)]
    + [tuple((r, c) for r in range(3)) for c in range(3)]
    + [((0, 0), (1, 1), (2, 2)), ((2, 0), (1, 1), (0, 2))]
)


def get_matrix_product(m1: Matrix, m2: Matrix) -> list[list[float]]:
    """Return the matrix product ``m1 x m2``.

    Raises ValueError if the column count of *m1* differs from the row
    count of *m2*.
    """
    if any(len(row) != len(m2) for row in m1):
        raise ValueError(
            f"cannot multiply: m1 has rows of width {[len(r) for r in m1]}, "
            f"m2 has {len(m2)} rows"
        )
    cols = len(m2[0]) if m2 else 0
    return [
        [sum(row[k] * m2[k][j] for k in range(len(m2))) for j in range(cols)]
        for row in m1
    ]


def evaluate_tic_tac_toe_position(position: Board) -> str | None:
    """Return the winner ('X' or '0') of a 3x3 board, or None.

    Empty cells may be None or ''. Rows are checked first, then columns,
    then the two diagonals.
    """
    for line in _LINES:
        values = {position[r][c] for r, c in line}
        if len(values) == 1:
            (value,) = values
            if value in PLAYERS:
                return value
    return None
