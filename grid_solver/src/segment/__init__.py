from .segmenter import flood_fill, region_positions, region_size
from .basins import (
    BasinReport,
    analyze_basins,
    basin_sizes,
    find_local_minima,
    largest_basins_product,
    risk_level,
)

__all__ = [
    "flood_fill",
    "region_size",
    "region_positions",
    "BasinReport",
    "analyze_basins",
    "basin_sizes",
    "find_local_minima",
    "largest_basins_product",
    "risk_level",
]
