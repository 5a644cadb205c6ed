"""Minimum-cost paths over weighted grids.

Cell values are the cost of *entering* a cell; the origin itself costs
nothing. Distances are computed with Dijkstra's algorithm over a ``heapq``
frontier. Improved distances push a fresh frontier entry and leave the old
one in place; stale entries are discarded when popped because their position
has already been finalized.

Entries of equal weight leave the heap in no guaranteed order, so the order
in which cells are explored may vary. Only the distance values are stable.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field
from typing import List, Optional, Set

from ..core.grid import Grid
from ..core.neighbors import Adjacency
from ..core.position import Position, PositionOutOfBounds
from ..utils.logger import get_logger

logger = get_logger(__name__)

INF = math.inf


@dataclass(order=True)
class WeightedPosition:
    """Frontier entry ordered by cumulative ``weight`` only."""

    weight: float
    pos: Position = field(compare=False)


def shortest_distances(
    grid: Grid,
    origin: Optional[Position] = None,
    target: Optional[Position] = None,
) -> Grid:
    """Return a grid of minimum entry-cost distances from ``origin``.

    ``origin`` defaults to the top-left cell. When ``target`` is given the
    search stops as soon as it is popped from the frontier, so cells further
    away may keep non-final (or infinite) distances.
    """
    if origin is None:
        origin = Position(0, 0)
    rows, cols = grid.shape()

    distances = Grid.filled(rows, cols, INF)
    distances.set(origin, 0)
    if target is not None and not grid.in_bounds(target):
        raise PositionOutOfBounds(f"target {target} is outside the {rows}x{cols} grid")

    finalized: Set[Position] = set()
    frontier: List[WeightedPosition] = [WeightedPosition(0, origin)]

    while frontier:
        entry = heapq.heappop(frontier)
        cur, cur_dist = entry.pos, entry.weight
        if cur in finalized:
            continue
        if cur == target:
            break
        finalized.add(cur)

        for npos in grid.neighbors(cur, Adjacency.ORTHOGONAL):
            if npos in finalized:
                continue
            candidate = cur_dist + grid.get(npos)
            if candidate < distances.get(npos):
                distances.set(npos, candidate)
                heapq.heappush(frontier, WeightedPosition(candidate, npos))

    logger.debug(f"finalized {len(finalized)} of {rows * cols} cells")
    return distances


def minimal_risk(grid: Grid, target: Optional[Position] = None) -> int:
    """Return the lowest total entry cost from top-left to ``target``.

    ``target`` defaults to the bottom-right cell.
    """
    rows, cols = grid.shape()
    if target is None:
        target = Position(rows - 1, cols - 1)
    dist = shortest_distances(grid, target=target).get(target)
    if dist == INF:
        raise ValueError(f"{target} is unreachable from the origin")
    return dist


__all__ = ["INF", "WeightedPosition", "shortest_distances", "minimal_risk"]
