"""
Console and image output for puzzles and solutions.
"""

import cv2
import numpy as np

GIVEN_COLOR = (0, 0, 0)
SOLVED_COLOR = (0, 160, 0)
GRID_COLOR = (80, 80, 80)


def format_board(board) -> str:
    """Render the 9x9 board as a human-friendly string ('.' for unknown)."""
    lines = []
    for r, row in enumerate(np.asarray(board)):
        parts = []
        for c, val in enumerate(row):
            parts.append(str(val) if val != 0 else ".")
            if c in {2, 5}:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if r in {2, 5}:
            lines.append("-" * len(line))
    return "\n".join(lines)


def render_solution(solved: np.ndarray, original: np.ndarray, cell_size: int = 50) -> np.ndarray:
    """
    Draw the solved grid on a white canvas.

    Givens (non-zero in original) are drawn in black, digits found by the
    solver in green. Box boundaries get thicker lines.

    Args:
        solved: 9x9 array of the solution
        original: 9x9 array of the input puzzle
        cell_size (int): Side of one cell in pixels

    Returns:
        BGR image of shape (9 * cell_size, 9 * cell_size, 3)
    """
    size = 9 * cell_size
    canvas = np.full((size, size, 3), 255, dtype=np.uint8)
    font = cv2.FONT_HERSHEY_SIMPLEX
    font_scale = cell_size / 55.0

    for i in range(10):
        thickness = 3 if i % 3 == 0 else 1
        pos = min(i * cell_size, size - 1)
        cv2.line(canvas, (0, pos), (size, pos), GRID_COLOR, thickness)
        cv2.line(canvas, (pos, 0), (pos, size), GRID_COLOR, thickness)

    for r in range(9):
        for c in range(9):
            val = int(solved[r, c])
            if val == 0:
                continue
            color = GIVEN_COLOR if original[r, c] != 0 else SOLVED_COLOR
            text = str(val)
            text_size, _ = cv2.getTextSize(text, font, font_scale, 2)
            x = c * cell_size + (cell_size - text_size[0]) // 2
            y = r * cell_size + (cell_size + text_size[1]) // 2
            cv2.putText(canvas, text, (x, y), font, font_scale, color, 2, cv2.LINE_AA)

    return canvas


def save_solution_image(path: str, solved: np.ndarray, original: np.ndarray, cell_size: int = 50) -> None:
    image = render_solution(np.asarray(solved), np.asarray(original), cell_size)
    if not cv2.imwrite(path, image):
        raise ValueError(f"Could not write image to {path}")
