import numpy as np
import pytest

from grid_solver.src.core.grid import Grid
from grid_solver.src.core.position import Position, PositionOutOfBounds


def test_filled_grid_has_fill_everywhere():
    grid = Grid.filled(2, 3, 7)
    assert grid.shape() == (2, 3)
    assert all(grid.get(p) == 7 for p in grid.indices())


def test_from_rows_and_to_list():
    data = [[1, 2, 3], [4, 5, 6]]
    grid = Grid.from_rows(data)
    assert grid.to_list() == data
    assert grid.get(Position(1, 0)) == 4


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Grid.from_rows([[1, 2], [3]])


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        Grid.from_rows([])
    with pytest.raises(ValueError):
        Grid(0, 3, [])


def test_cell_count_must_match_shape():
    with pytest.raises(ValueError):
        Grid(2, 2, [1, 2, 3])


def test_set_overwrites_in_place():
    grid = Grid.filled(2, 2, 0)
    grid.set(Position(1, 1), 9)
    grid.set(Position(0, 1), 4)
    assert grid.to_list() == [[0, 4], [0, 9]]


def test_out_of_bounds_access_fails_loudly():
    grid = Grid.filled(2, 3, 0)
    with pytest.raises(PositionOutOfBounds):
        grid.get(Position(2, 0))
    with pytest.raises(PositionOutOfBounds):
        grid.set(Position(0, 3), 1)
    with pytest.raises(IndexError):
        grid.position(5, 5)


def test_negative_position_rejected():
    with pytest.raises(PositionOutOfBounds):
        Position(-1, 0)


def test_positions_are_hashable_values():
    assert Position(1, 2) == Position(1, 2)
    assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2


def test_indices_row_major_and_restartable():
    grid = Grid.filled(2, 3, 0)
    expected = [Position(r, c) for r in range(2) for c in range(3)]
    assert list(grid.indices()) == expected
    assert list(grid.indices()) == expected


def test_indices_cover_non_square_grid():
    grid = Grid.filled(3, 5, 0)
    positions = list(grid.indices())
    assert len(positions) == 15
    assert len(set(positions)) == 15
    assert positions[-1] == Position(2, 4)


def test_map_applies_in_place():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    grid.map(lambda v: v * 10)
    assert grid.to_list() == [[10, 20], [30, 40]]


def test_find_returns_row_major_positions():
    grid = Grid.from_rows([[9, 1, 9], [0, 9, 2]])
    assert grid.find(lambda v: v == 9) == [Position(0, 0), Position(0, 2), Position(1, 1)]
    assert grid.find(lambda v: v > 100) == []


def test_map_surroundings_uses_orthogonal_neighbours():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    sums = grid.map_surroundings(lambda v, around: v + sum(around))
    assert sums.to_list() == [[6, 7], [8, 9]]


def test_copy_is_independent():
    grid = Grid.from_rows([[1, 2]])
    other = grid.copy()
    other.set(Position(0, 0), 5)
    assert grid.get(Position(0, 0)) == 1
    assert other != grid


def test_array_round_trip_and_str():
    grid = Grid.from_rows([[1, 2, 3], [4, 5, 6]])
    arr = grid.to_array()
    assert arr.shape == (2, 3)
    assert np.array_equal(arr, np.array([[1, 2, 3], [4, 5, 6]]))
    assert Grid.from_array(arr) == grid
    assert str(grid) == "123\n456"


def test_visualize_prints_rows(capsys):
    Grid.from_rows([[0, 1], [2, 3]]).visualize()
    assert capsys.readouterr().out == "01\n23\n"
