"""
Sudoku Solver - Main Application Module
"""

import argparse
import os
import sys

import numpy as np

from .display import format_board, save_solution_image
from .puzzle_io import read_puzzle, write_solution
from .solver import solve_puzzle


class SudokuSolver:
    """
    Main class for the Sudoku Solver application.

    Loads a puzzle file, solves it, shows the input and the solution and
    writes the solution as CSV (and optionally as an image).
    """

    def __init__(self, max_steps=None, verbose=True):
        """
        Initialize the Sudoku Solver.

        Args:
            max_steps (int): Cap on search placements (default: unlimited)
            verbose (bool): Whether to print progress banners
        """
        self.max_steps = max_steps
        self.verbose = verbose

    def _log(self, message=""):
        if self.verbose:
            print(message)

    def process_puzzle(self, input_path, output_path, image_path=None):
        """
        Run a puzzle file through the full pipeline.

        Pipeline steps:
        1. Load the puzzle
        2. Solve (propagation, then backtracking)
        3. Display input and solution
        4. Save the solution

        Args:
            input_path (str): CSV or white-space delimited puzzle file
            output_path (str): Destination CSV file for the solution
            image_path (str): Optional destination for a rendered solution image

        Returns:
            dict: Puzzle, solution and solver message, or None if unsolvable
        """
        self._log(f"\n{'='*60}")
        self._log(f"Processing: {os.path.basename(input_path)}")
        self._log(f"{'='*60}")

        self._log("\n[1/4] Loading puzzle...")
        puzzle = read_puzzle(input_path)
        self._log(f"      Givens: {np.count_nonzero(puzzle)}")

        self._log("\n[2/4] Solving...")
        solution, message = solve_puzzle(puzzle, max_steps=self.max_steps)

        print("\nInput Puzzle:\n")
        print(format_board(puzzle))

        if solution is None:
            print(f"\n      ✗ Could not solve: {message}")
            return None

        self._log(f"      ✓ {message}")

        self._log("\n[3/4] Solution")
        print("\nSolved Puzzle:\n")
        print(format_board(solution))

        self._log("\n[4/4] Saving results...")
        write_solution(output_path, solution)
        self._log(f"      Solution written to: {output_path}")
        if image_path:
            save_solution_image(image_path, solution, puzzle)
            self._log(f"      Solution image written to: {image_path}")

        self._log(f"\n{'='*60}\n")

        return {
            'puzzle': puzzle,
            'solution': solution,
            'message': message,
            'output_path': output_path,
            'image_path': image_path,
        }


def main(argv=None):
    """
    Main entry point for the Sudoku Solver application.

    Handles command-line arguments and solves one puzzle file.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Solver - constraint propagation with backtracking',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve a puzzle:
    python -m sudoku_solver puzzles/easy.csv solved.csv

  Also render the solution as an image:
    python -m sudoku_solver puzzles/hard.txt solved.csv --image solved.png
        """
    )

    parser.add_argument('input', help='Puzzle file (CSV or white-space delimited, 0 = empty)')
    parser.add_argument('output', help='Output CSV file for the solved puzzle')
    parser.add_argument('--image', default=None,
                        help='Also save the solution as an image (e.g. solved.png)')
    parser.add_argument('--max-steps', type=int, default=None,
                        help='Give up after this many search placements (default: unlimited)')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Only print the puzzle and the solution')

    args = parser.parse_args(argv)

    # Check if puzzle exists
    if not os.path.exists(args.input):
        print(f"Error: Puzzle file not found: {args.input}")
        sys.exit(1)

    solver = SudokuSolver(max_steps=args.max_steps, verbose=not args.quiet)

    try:
        result = solver.process_puzzle(args.input, args.output, args.image)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"\nError during processing: {str(e)}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

    if result is None:
        print("\nNo solution found. Please check the puzzle and try again.")
        sys.exit(1)


if __name__ == '__main__':
    main()
