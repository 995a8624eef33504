"""
Grid geometry helpers: box origins, peers, units and solution checks.
"""

import numpy as np


def box_origin(row: int, col: int) -> tuple[int, int]:
    return 3 * (row // 3), 3 * (col // 3)


def box_cells(box_row: int, box_col: int) -> list[tuple[int, int]]:
    """Coordinates of the 9 cells of box (box_row, box_col), row-major."""
    r0, c0 = 3 * box_row, 3 * box_col
    return [(r0 + i, c0 + j) for i in range(3) for j in range(3)]


def peers(row: int, col: int) -> list[tuple[int, int]]:
    """
    Return the 20 cells sharing a row, column or box with (row, col).

    The cell itself is excluded.
    """
    result = [(row, c) for c in range(9) if c != col]
    result += [(r, col) for r in range(9) if r != row]

    r0, c0 = box_origin(row, col)
    for r in range(r0, r0 + 3):
        for c in range(c0, c0 + 3):
            if r != row and c != col:
                result.append((r, c))

    return result


def units() -> list[list[tuple[int, int]]]:
    """All 27 units: 9 rows, then 9 columns, then 9 boxes."""
    rows = [[(r, c) for c in range(9)] for r in range(9)]
    cols = [[(r, c) for r in range(9)] for c in range(9)]
    boxes = [box_cells(br, bc) for br in range(3) for bc in range(3)]
    return rows + cols + boxes


def find_empty(board: np.ndarray):
    positions = np.argwhere(board == 0)
    if positions.size == 0:
        return None
    r, c = positions[0]
    return int(r), int(c)


def is_valid_solution(board: np.ndarray) -> bool:
    """True if every row, column and box holds each of 1..9 exactly once."""
    board = np.asarray(board)
    if board.shape != (9, 9):
        return False

    expected = set(range(1, 10))
    for unit in units():
        if {int(board[r, c]) for r, c in unit} != expected:
            return False
    return True
