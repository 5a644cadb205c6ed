"""Core grid utilities and data structures."""

from .position import Position, PositionOutOfBounds
from .neighbors import Adjacency, iter_neighbors
from .grid import Grid
from .grid_utils import TilingError, expand_grid, tile_grid

__all__ = [
    "Adjacency",
    "Grid",
    "Position",
    "PositionOutOfBounds",
    "TilingError",
    "expand_grid",
    "iter_neighbors",
    "tile_grid",
]
