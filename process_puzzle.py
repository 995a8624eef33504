#!/usr/bin/env python3
"""
Convenience script to solve a Sudoku puzzle file.

Usage:
    python process_puzzle.py puzzles/easy.csv solved.csv
    python process_puzzle.py puzzles/hard.csv solved.csv --image solved.png
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku_solver.app import main

if __name__ == '__main__':
    main()
