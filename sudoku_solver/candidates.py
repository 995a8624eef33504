"""
Per-cell candidate sets.

Candidates are held in a boolean array of shape (9, 9, 10): ``cand[r, c, v]``
is True while value ``v`` is still possible for cell (r, c). Slot 0 is never
used, so values index the last axis directly. Assigned cells have an empty
candidate set.
"""

import numpy as np


def initialize_candidates(grid: np.ndarray) -> np.ndarray:
    """Every unknown cell starts with {1..9}; assigned cells start empty."""
    candidates = np.zeros((9, 9, 10), dtype=bool)
    candidates[grid == 0, 1:] = True
    return candidates


def eliminate(candidates: np.ndarray, row: int, col: int, value: int) -> bool:
    """Remove value from (row, col). Returns True if it was a candidate."""
    if not candidates[row, col, value]:
        return False
    candidates[row, col, value] = False
    return True


def candidate_values(candidates: np.ndarray, row: int, col: int) -> list[int]:
    return [int(v) for v in np.flatnonzero(candidates[row, col])]


def candidate_count(candidates: np.ndarray, row: int, col: int) -> int:
    return int(np.count_nonzero(candidates[row, col]))


def assign(grid: np.ndarray, candidates: np.ndarray, row: int, col: int, value: int) -> None:
    """Commit value to the grid and clear the cell's candidate set."""
    grid[row, col] = value
    candidates[row, col, :] = False
