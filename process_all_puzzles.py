#!/usr/bin/env python3
"""
Solve every puzzle file in a directory and print a summary.
"""

import sys
import os
import glob

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku_solver.app import SudokuSolver


def main(puzzle_dir="puzzles", output_dir="output"):
    """Solve all .csv and .txt puzzles in puzzle_dir."""
    puzzle_files = sorted(glob.glob(os.path.join(puzzle_dir, "*.csv")) +
                          glob.glob(os.path.join(puzzle_dir, "*.txt")))

    if not puzzle_files:
        print(f"No puzzle files found in {puzzle_dir}/!")
        return None

    print(f"Found {len(puzzle_files)} puzzles to solve")
    print("=" * 60)

    solver = SudokuSolver(verbose=False)

    results = {
        'solved': [],
        'unsolved': [],
        'error': []
    }

    for i, puzzle_path in enumerate(puzzle_files, 1):
        print(f"\n[{i}/{len(puzzle_files)}] Solving {puzzle_path}...")

        base_name = os.path.splitext(os.path.basename(puzzle_path))[0]
        output_path = os.path.join(output_dir, f"{base_name}_solved.csv")

        try:
            result = solver.process_puzzle(puzzle_path, output_path)
            if result:
                results['solved'].append(puzzle_path)
            else:
                results['unsolved'].append(puzzle_path)
        except ValueError as e:
            print(f"Error reading {puzzle_path}: {e}")
            results['error'].append(puzzle_path)

    # Print summary
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Solved:    {len(results['solved'])}/{len(puzzle_files)}")
    print(f"❌ Unsolved:  {len(results['unsolved'])}/{len(puzzle_files)}")
    print(f"⚠️  Errors:    {len(results['error'])}/{len(puzzle_files)}")

    if results['solved']:
        print(f"\nSolutions saved to: {output_dir}/")

    return results


if __name__ == '__main__':
    main(*sys.argv[1:3])
