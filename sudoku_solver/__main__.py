"""
Entry point for running sudoku_solver as a package.

Usage:
    python -m sudoku_solver <input_file> <output_file>
"""

from .app import main

if __name__ == '__main__':
    main()
