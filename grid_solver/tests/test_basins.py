from pathlib import Path

import pytest

from grid_solver.src.core.grid import Grid
from grid_solver.src.core.position import Position
from grid_solver.src.data import load_digit_grid
from grid_solver.src.segment import (
    analyze_basins,
    basin_sizes,
    find_local_minima,
    largest_basins_product,
    risk_level,
)

DATA = Path(__file__).parent / "data"


@pytest.fixture
def heightmap():
    return load_digit_grid(DATA / "heightmap_5x10.txt")


def test_local_minima(heightmap):
    assert find_local_minima(heightmap) == [
        Position(0, 1),
        Position(0, 9),
        Position(2, 2),
        Position(4, 6),
    ]


def test_plateau_is_not_a_minimum():
    grid = Grid.from_rows([[1, 1], [2, 2]])
    assert find_local_minima(grid) == []


def test_risk_level(heightmap):
    assert risk_level(heightmap, find_local_minima(heightmap)) == 15


def test_basin_sizes(heightmap):
    assert basin_sizes(heightmap) == [3, 9, 14, 9]


def test_basin_wall_override(heightmap):
    assert basin_sizes(heightmap, [Position(0, 9)], wall=2) == [3]


def test_largest_basins_product():
    assert largest_basins_product([3, 9, 14, 9]) == 1134
    assert largest_basins_product([2, 5], top_n=1) == 5
    with pytest.raises(ValueError):
        largest_basins_product([1, 2])


def test_analyze_basins(heightmap, caplog):
    with caplog.at_level("INFO"):
        report = analyze_basins(heightmap)
    assert report.risk_level == 15
    assert report.sizes == [3, 9, 14, 9]
    assert report.product == 1134
    assert any("basin product 1134" in rec.message for rec in caplog.records)


def test_analyze_basins_with_fewer_than_top_n(caplog):
    grid = Grid.from_rows(
        [
            [9, 9, 9, 9, 9],
            [9, 0, 1, 2, 9],
            [9, 3, 9, 9, 9],
            [9, 9, 9, 1, 9],
            [9, 9, 9, 9, 9],
        ]
    )
    with caplog.at_level("WARNING"):
        report = analyze_basins(grid)
    assert report.minima == [Position(1, 1), Position(3, 3)]
    assert report.risk_level == 3
    assert report.sizes == [4, 1]
    assert report.product is None
    assert any("only 2 basins" in rec.message for rec in caplog.records)
