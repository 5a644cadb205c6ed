from __future__ import annotations

"""Height-map basin analysis built on flood fill."""

from dataclasses import dataclass, field
from math import prod
from typing import List, Optional, Sequence

from ..core.grid import Grid
from ..core.position import Position
from ..utils import config_loader
from ..utils.logger import get_logger
from .segmenter import flood_fill, region_size

logger = get_logger(__name__)


@dataclass
class BasinReport:
    """Summary of the basins found in a height map."""

    minima: List[Position]
    risk_level: int
    sizes: List[int] = field(default_factory=list)
    product: Optional[int] = None


def _is_local_minimum(value: int, around: List[int]) -> bool:
    return all(n > value for n in around)


def find_local_minima(grid: Grid) -> List[Position]:
    """Return positions strictly lower than all of their orthogonal neighbours."""
    return grid.map_surroundings(_is_local_minimum).find(lambda flag: flag)


def risk_level(grid: Grid, minima: Sequence[Position]) -> int:
    """Return the summed risk (height + 1) of ``minima``."""
    return sum(grid.get(pos) + 1 for pos in minima)


def basin_sizes(
    grid: Grid,
    minima: Optional[Sequence[Position]] = None,
    wall: Optional[int] = None,
) -> List[int]:
    """Return the basin size around each minimum, in ``minima`` order."""
    if minima is None:
        minima = find_local_minima(grid)
    if wall is None:
        wall = config_loader.BASIN_WALL_VALUE

    sizes = []
    for pos in minima:
        basin = flood_fill(grid, pos, lambda v: v if v != wall else None)
        size = region_size(basin)
        logger.debug(f"basin at {pos} has size {size}")
        sizes.append(size)
    return sizes


def largest_basins_product(sizes: Sequence[int], top_n: Optional[int] = None) -> int:
    """Return the product of the ``top_n`` largest basin sizes."""
    if top_n is None:
        top_n = config_loader.BASIN_TOP_N
    if len(sizes) < top_n:
        raise ValueError(f"need at least {top_n} basins, found {len(sizes)}")
    return prod(sorted(sizes)[-top_n:])


def analyze_basins(grid: Grid) -> BasinReport:
    """Run the full basin analysis on ``grid``."""
    minima = find_local_minima(grid)
    report = BasinReport(minima=minima, risk_level=risk_level(grid, minima))
    report.sizes = basin_sizes(grid, minima)
    if len(report.sizes) >= config_loader.BASIN_TOP_N:
        report.product = largest_basins_product(report.sizes)
    else:
        logger.warning(
            f"only {len(report.sizes)} basins found, need {config_loader.BASIN_TOP_N} for the product"
        )
    logger.info(
        f"found {len(minima)} low points, risk level {report.risk_level}, basin product {report.product}"
    )
    return report


__all__ = [
    "BasinReport",
    "find_local_minima",
    "risk_level",
    "basin_sizes",
    "largest_basins_product",
    "analyze_basins",
]
