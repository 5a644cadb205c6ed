from pathlib import Path

from grid_solver.src.core.grid import Grid
from grid_solver.src.core.neighbors import Adjacency
from grid_solver.src.core.position import Position
from grid_solver.src.data import load_digit_grid
from grid_solver.src.segment import flood_fill, region_positions, region_size

DATA = Path(__file__).parent / "data"


def _not_nine(v):
    return v if v != 9 else None


def test_fill_records_transformed_values():
    grid = Grid.from_rows([[1, 2, 9], [9, 3, 9], [4, 9, 5]])
    filled = flood_fill(grid, Position(0, 0), lambda v: v * 10 if v != 9 else None)
    assert filled.to_list() == [
        [10, 20, None],
        [None, 30, None],
        [None, None, None],
    ]
    assert region_size(filled) == 3


def test_fill_does_not_cross_diagonals_by_default():
    grid = Grid.from_rows([[0, 9], [9, 0]])
    assert region_size(flood_fill(grid, Position(0, 0), _not_nine)) == 1
    assert region_size(flood_fill(grid, Position(0, 0), _not_nine, Adjacency.FULL)) == 2


def test_excluded_start_gives_empty_region():
    grid = Grid.from_rows([[9, 1], [1, 1]])
    filled = flood_fill(grid, Position(0, 0), _not_nine)
    assert region_size(filled) == 0
    assert filled == Grid.filled(2, 2, None)


def test_zero_values_are_included():
    grid = Grid.filled(3, 3, 0)
    filled = flood_fill(grid, Position(1, 1), _not_nine)
    assert region_size(filled) == 9
    assert all(v == 0 for v in filled.cells)


def test_fill_is_idempotent():
    grid = load_digit_grid(DATA / "heightmap_5x10.txt")
    first = flood_fill(grid, Position(2, 2), _not_nine)
    second = flood_fill(grid, Position(2, 2), _not_nine)
    assert first == second
    assert region_size(first) == 14


def test_transform_called_once_per_cell():
    grid = Grid.filled(4, 4, 1)
    calls = []

    def transform(v):
        calls.append(v)
        return v

    flood_fill(grid, Position(0, 0), transform)
    assert len(calls) == 16


def test_fill_leaves_source_untouched():
    grid = load_digit_grid(DATA / "heightmap_5x10.txt")
    before = grid.copy()
    flood_fill(grid, Position(0, 9), _not_nine)
    assert grid == before


def test_region_positions_row_major():
    grid = Grid.from_rows([[1, 9, 1], [1, 1, 9]])
    filled = flood_fill(grid, Position(0, 0), _not_nine)
    assert region_positions(filled) == [Position(0, 0), Position(1, 0), Position(1, 1)]
