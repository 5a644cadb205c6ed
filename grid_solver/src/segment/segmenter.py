"""Connected region extraction on grids."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Set

from ..core.grid import Grid
from ..core.neighbors import Adjacency
from ..core.position import Position
from ..utils.logger import get_logger

logger = get_logger(__name__)

Transform = Callable[[Any], Optional[Any]]


def flood_fill(
    grid: Grid,
    start: Position,
    transform: Transform,
    adjacency: Adjacency = Adjacency.ORTHOGONAL,
) -> Grid:
    """Return the region reachable from ``start`` as a grid of optional values.

    ``transform`` is called once on the original value of every visited cell.
    A non-``None`` result includes the cell: the result is recorded and the
    cell's neighbours are queued. ``None`` excludes the cell and stops the
    fill there. Cells outside the region, or excluded, hold ``None``.

    A cell queued through several neighbours is still processed once; the
    visited set only grows, so the fill terminates on any finite grid.
    """

    rows, cols = grid.shape()
    out = Grid.filled(rows, cols, None)
    visited: Set[Position] = set()
    stack: List[Position] = [start]

    while stack:
        cur = stack.pop()
        if cur in visited:
            continue
        visited.add(cur)

        result = transform(grid.get(cur))
        if result is None:
            continue
        out.set(cur, result)
        stack.extend(n for n in grid.neighbors(cur, adjacency) if n not in visited)

    logger.debug(f"flood fill from {start} visited {len(visited)} cells")
    return out


def region_size(filled: Grid) -> int:
    """Return the number of included cells in a :func:`flood_fill` result."""
    return filled.count(lambda v: v is not None)


def region_positions(filled: Grid) -> List[Position]:
    """Return included positions of a :func:`flood_fill` result, row-major."""
    return filled.find(lambda v: v is not None)


__all__ = ["flood_fill", "region_size", "region_positions"]
