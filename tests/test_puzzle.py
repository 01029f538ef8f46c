import pytest

from board import DAY_CELLS, MONTH_CELLS
from puzzle import CalendarPuzzle, InvalidDate, solve_for_date


class Recorder:
    def __init__(self):
        self.grids = []

    def __call__(self, grid):
        self.grids.append(grid)


@pytest.fixture(scope="module")
def new_year():
    recorder = Recorder()
    puzzle = CalendarPuzzle(recorder)
    count = puzzle.solve_for(1, 1, render=True)
    return puzzle, count, recorder.grids


def test_new_year_is_solvable(new_year):
    _, count, grids = new_year
    assert count > 0
    assert len(grids) == count


def test_every_solution_uses_all_eight_pieces(new_year):
    _, _, grids = new_year
    for grid in grids:
        interior = [v for row in grid[1:-1] for v in row[1:-1]]
        assert 0 not in interior
        assert sorted(set(v for v in interior if v > 0)) == list(range(1, 9))


def test_date_cells_stay_blocked_after_solve(new_year):
    puzzle, _, grids = new_year
    for row, col in (MONTH_CELLS[1], DAY_CELLS[1]):
        assert puzzle.board.cells[row][col] == -1
        assert all(grid[row][col] == -1 for grid in grids)


def test_pieces_available_after_solve(new_year):
    puzzle, _, _ = new_year
    assert all(p.available for p in puzzle.pieces)
    assert puzzle.board.fillable_count() == 41


def test_fresh_instances_agree(new_year):
    _, count, grids = new_year
    recorder = Recorder()
    assert solve_for_date(1, 1, render=True, renderer=recorder) == count
    assert recorder.grids == grids


@pytest.mark.parametrize("month, day", [(1, 32), (1, 0), (0, 1), (13, 5), (-1, -1)])
def test_invalid_date_fails_before_search(month, day):
    recorder = Recorder()
    puzzle = CalendarPuzzle(recorder)
    before = puzzle.board.snapshot()
    with pytest.raises(InvalidDate):
        puzzle.solve_for(month, day, render=True)
    assert puzzle.board.cells == before
    assert puzzle.solver.solutions == 0
    assert recorder.grids == []


def test_invalid_date_is_value_error():
    with pytest.raises(ValueError):
        solve_for_date(2, 32)


def test_puzzle_maps_every_date():
    puzzle = CalendarPuzzle()
    assert sorted(puzzle.month_cells) == list(range(1, 13))
    assert sorted(puzzle.day_cells) == list(range(1, 32))
    assert len(puzzle.pieces) == 8
    assert puzzle.solver.board is puzzle.board
