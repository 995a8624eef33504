"""Reading puzzle files and writing solved grids."""

import os
import re

import numpy as np


def parse_puzzle(text: str) -> np.ndarray:
    """
    Parse a 9x9 puzzle from CSV or white-space delimited text.

    Values are read row-major; 0 marks an unknown cell.

    Raises:
        ValueError: if the text does not hold exactly 81 integers in 0..9
    """
    tokens = [t for t in re.split(r"[,;\s]+", text.strip()) if t]
    if len(tokens) != 81:
        raise ValueError(f"Expected 81 values, found {len(tokens)}")

    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid puzzle value: {token!r}") from None

    board = np.array(values, dtype=int).reshape(9, 9)
    if board.min() < 0 or board.max() > 9:
        raise ValueError("Puzzle values must be between 0 and 9")
    return board


def read_puzzle(path: str) -> np.ndarray:
    """Load a puzzle file (.csv or white-space delimited)."""
    with open(path, "r", encoding="utf-8") as fp:
        return parse_puzzle(fp.read())


def write_solution(path: str, board: np.ndarray) -> None:
    """Save the grid as 9 lines of comma-separated digits."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    np.savetxt(path, np.asarray(board, dtype=int), fmt="%d", delimiter=",")
