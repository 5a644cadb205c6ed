from grid_solver.src.core.position import Position
from grid_solver.src.data import load_digit_grid
from grid_solver.src.executor import simulate_cascade
from grid_solver.src.search import minimal_risk
from grid_solver.src.segment import find_local_minima, flood_fill, region_size

FIXTURE = """\
99999
90129
93999
99919
99999
"""


def test_basin_from_local_minimum(tmp_path):
    path = tmp_path / "basin.txt"
    path.write_text(FIXTURE, encoding="utf-8")
    grid = load_digit_grid(path, shape=(5, 5))

    minima = find_local_minima(grid)
    assert minima == [Position(1, 1), Position(3, 3)]

    basin = flood_fill(grid, minima[0], lambda v: v if v != 9 else None)
    # (1,1), (1,2), (1,3) and (2,1)
    assert region_size(basin) == 4
    assert basin.get(Position(2, 1)) == 3
    assert basin.get(Position(3, 3)) is None

    assert region_size(flood_fill(grid, minima[1], lambda v: v if v != 9 else None)) == 1


def test_same_grid_through_every_algorithm(tmp_path):
    path = tmp_path / "grid.txt"
    path.write_text(FIXTURE, encoding="utf-8")

    grid = load_digit_grid(path)
    # one 9 to leave the corner, 0+1+2 along row 1, 9 then 1 down column 3, two 9s out
    assert minimal_risk(grid) == 40

    summary = simulate_cascade(load_digit_grid(path), 1, stop_on_sync=False)
    assert summary.steps[0].triggered > 0
