"""
Constraint propagation: shrink candidate sets and commit forced values
until a full pass makes no further progress.

Two deductions are applied, box by box:

1. Peer elimination - an unknown cell loses every value already placed in
   its row, column or box. A cell left with a single candidate is filled
   (naked single), and the placement is pushed out to its peers at once.
2. Hidden single - within a 3x3 box, a value listed by exactly one unknown
   cell is placed there. Only boxes are scanned, rows and columns are not.

Cells whose candidate set becomes empty are left unknown; the backtracking
search runs into them and fails that branch.
"""

import numpy as np

from .candidates import assign, candidate_count, candidate_values, eliminate
from .grid import box_cells, peers


def _eliminate_from_peers(grid: np.ndarray, candidates: np.ndarray, row: int, col: int) -> None:
    for pr, pc in peers(row, col):
        value = int(grid[pr, pc])
        if value != 0:
            eliminate(candidates, row, col, value)


def _place(grid: np.ndarray, candidates: np.ndarray, row: int, col: int, value: int) -> None:
    """
    Assign a value and remove it from the peers of the cell.

    Peers reduced to a single candidate are placed in turn, so one placement
    can cascade across the whole grid.
    """
    pending = [(row, col, value)]
    while pending:
        r, c, v = pending.pop()
        # An earlier placement may have taken the value away meanwhile
        if grid[r, c] != 0 or not candidates[r, c, v]:
            continue
        assign(grid, candidates, r, c, v)
        for pr, pc in peers(r, c):
            if grid[pr, pc] != 0 or not eliminate(candidates, pr, pc, v):
                continue
            _eliminate_from_peers(grid, candidates, pr, pc)
            if candidate_count(candidates, pr, pc) == 1:
                pending.append((pr, pc, candidate_values(candidates, pr, pc)[0]))


def propagation_pass(grid: np.ndarray, candidates: np.ndarray) -> bool:
    """Run one pass over all nine boxes. Returns True if any cell was filled."""
    progress = False

    for box_row in range(3):
        for box_col in range(3):
            cells = box_cells(box_row, box_col)

            # Naked singles
            for r, c in cells:
                if grid[r, c] != 0:
                    continue
                _eliminate_from_peers(grid, candidates, r, c)
                if candidate_count(candidates, r, c) == 1:
                    _place(grid, candidates, r, c, candidate_values(candidates, r, c)[0])
                    progress = True

            # Hidden singles within this box
            for value in range(1, 10):
                holders = [(r, c) for r, c in cells if candidates[r, c, value]]
                if len(holders) == 1:
                    r, c = holders[0]
                    _place(grid, candidates, r, c, value)
                    progress = True

    return progress


def propagate(grid: np.ndarray, candidates: np.ndarray) -> int:
    """
    Apply propagation passes until a fixpoint is reached.

    Mutates grid and candidates in place and returns the number of passes,
    including the final pass that made no progress.
    """
    passes = 1
    while propagation_pass(grid, candidates):
        passes += 1
    return passes
