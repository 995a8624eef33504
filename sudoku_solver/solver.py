"""
Two-phase Sudoku solver: constraint propagation, then backtracking search.
"""

import numpy as np

from .candidates import candidate_values, initialize_candidates
from .grid import find_empty, is_valid_solution
from .propagation import propagate


def _is_valid(board: np.ndarray, row: int, col: int, val: int) -> bool:
    if val in board[row, :]:
        return False
    if val in board[:, col]:
        return False

    r0 = (row // 3) * 3
    c0 = (col // 3) * 3
    if val in board[r0:r0 + 3, c0:c0 + 3]:
        return False

    return True


def _validate_givens(board: np.ndarray) -> tuple[bool, str]:
    """Check for duplicate givens; a puzzle with any cannot be solved."""
    for i in range(9):
        row_vals = [v for v in board[i, :] if v != 0]
        if len(row_vals) != len(set(row_vals)):
            return False, f"Row {i+1} has duplicate given digit"

        col_vals = [v for v in board[:, i] if v != 0]
        if len(col_vals) != len(set(col_vals)):
            return False, f"Column {i+1} has duplicate given digit"

    for br in range(3):
        for bc in range(3):
            block = board[br*3:(br+1)*3, bc*3:(bc+1)*3].ravel()
            block_vals = [v for v in block if v != 0]
            if len(block_vals) != len(set(block_vals)):
                return False, f"3x3 block ({br+1},{bc+1}) has duplicate given digit"

    return True, ""


def search(board: np.ndarray, candidates: np.ndarray,
           step_counter: list[int] | None = None, max_steps: int | None = None) -> np.ndarray | None:
    """
    Depth-first backtracking over the remaining candidates.

    The first unknown cell in row-major order is tried with each of its
    candidates in ascending order. Every call works on its own copy of the
    board, so a failed branch leaves nothing behind for its siblings. The
    candidate snapshot is shared by all calls and never updated; the
    row/column/box check against placed values decides what is allowed.

    Returns the solved board, or None if no assignment works (or the step
    budget ran out).
    """
    if step_counter is None:
        step_counter = [0]
    if max_steps is not None and step_counter[0] > max_steps:
        return None

    empty = find_empty(board)
    if empty is None:
        return board

    r, c = empty
    working = board.copy()
    for val in candidate_values(candidates, r, c):
        if _is_valid(working, r, c, val):
            working[r, c] = val
            step_counter[0] += 1
            solved = search(working, candidates, step_counter, max_steps)
            if solved is not None:
                return solved
            working[r, c] = 0

    return None


def solve_puzzle(board, max_steps: int | None = None) -> tuple[np.ndarray | None, str]:
    """
    Return a solved copy of the board, or (None, reason) if it cannot be solved.

    The input (array or nested lists, 0 for unknown) is copied and never
    modified. max_steps optionally caps the number of tentative placements
    made by the search.
    """
    working = np.array(board, dtype=int)

    is_valid, reason = _validate_givens(working)
    if not is_valid:
        return None, reason

    candidates = initialize_candidates(working)
    passes = propagate(working, candidates)

    steps = [0]
    solved = search(working, candidates, steps, max_steps)
    if solved is not None and is_valid_solution(solved):
        return solved, f"Solved in {steps[0]} steps after {passes} propagation passes"
    if max_steps is not None and steps[0] > max_steps:
        return None, f"Stopped after {steps[0]} steps (limit {max_steps})"
    return None, "No solution found"
