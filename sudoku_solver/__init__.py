"""
Sudoku Solver

Solves standard 9x9 Sudoku puzzles in two phases: constraint propagation
narrows the candidates of every cell, then backtracking search fills in
whatever is left.

This package contains modules for:
- Grid geometry (peers, units, solution checks)
- Candidate sets
- Constraint propagation
- Backtracking search
- Puzzle file input/output and display
"""

from .solver import solve_puzzle

__version__ = "1.0.0"
__all__ = ["solve_puzzle"]
