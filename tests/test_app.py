import numpy as np
import pytest

from sudoku_solver.app import SudokuSolver, main
from sudoku_solver.puzzle_io import read_puzzle


def test_process_puzzle_writes_solution(tmp_path, puzzle_dir, easy_solution, capsys):
    out = tmp_path / "solved.csv"
    result = SudokuSolver().process_puzzle(str(puzzle_dir / "easy.csv"), str(out))

    assert np.array_equal(result['solution'], easy_solution)
    assert np.array_equal(read_puzzle(str(out)), easy_solution)
    captured = capsys.readouterr().out
    assert "Input Puzzle:" in captured
    assert "Solved Puzzle:" in captured
    assert "[4/4] Saving results..." in captured


def test_quiet_hides_stage_banners(tmp_path, puzzle_dir, capsys):
    SudokuSolver(verbose=False).process_puzzle(str(puzzle_dir / "easy.csv"), str(tmp_path / "s.csv"))
    captured = capsys.readouterr().out
    assert "[1/4]" not in captured
    assert "Solved Puzzle:" in captured


def test_main_with_image(tmp_path, puzzle_dir):
    out = tmp_path / "solved.csv"
    image = tmp_path / "solved.png"
    main([str(puzzle_dir / "medium.txt"), str(out), "--image", str(image), "--quiet"])
    assert out.exists()
    assert image.exists()


def test_main_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.csv"), str(tmp_path / "out.csv")])
    assert exc.value.code == 1
    assert "Puzzle file not found" in capsys.readouterr().out


def test_main_malformed_file(tmp_path, capsys):
    bad = tmp_path / "bad.csv"
    bad.write_text("1,2,3\n")
    with pytest.raises(SystemExit) as exc:
        main([str(bad), str(tmp_path / "out.csv")])
    assert exc.value.code == 1
    assert "Expected 81 values" in capsys.readouterr().out


def test_main_unsolvable(tmp_path, capsys):
    puzzle = tmp_path / "dup.csv"
    rows = [[0] * 9 for _ in range(9)]
    rows[0][0] = rows[0][1] = 7
    puzzle.write_text("\n".join(",".join(map(str, r)) for r in rows))
    out = tmp_path / "out.csv"

    with pytest.raises(SystemExit) as exc:
        main([str(puzzle), str(out)])
    assert exc.value.code == 1
    assert "Row 1 has duplicate given digit" in capsys.readouterr().out
    assert not out.exists()
