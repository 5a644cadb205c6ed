"""Neighbour enumeration for fixed-size grids."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional, Tuple

from .position import Position


Offset = Tuple[int, int]

ORTHOGONAL_OFFSETS: Tuple[Offset, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
FULL_OFFSETS: Tuple[Offset, ...] = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
)


class Adjacency(Enum):
    """Neighbourhood policies supported by the engine."""

    ORTHOGONAL = "ORTHOGONAL"
    FULL = "FULL"

    @property
    def offsets(self) -> Tuple[Offset, ...]:
        if self is Adjacency.ORTHOGONAL:
            return ORTHOGONAL_OFFSETS
        return FULL_OFFSETS

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


def apply_offset(pos: Position, offset: Offset, shape: Tuple[int, int]) -> Optional[Position]:
    """Return ``pos`` shifted by ``offset`` or ``None`` if it leaves ``shape``."""
    rows, cols = shape
    row = pos.row + offset[0]
    col = pos.col + offset[1]
    if 0 <= row < rows and 0 <= col < cols:
        return Position(row, col)
    return None


def iter_neighbors(
    pos: Position,
    shape: Tuple[int, int],
    adjacency: Adjacency = Adjacency.ORTHOGONAL,
) -> Iterator[Position]:
    """Yield the in-bounds neighbours of ``pos`` in fixed offset order.

    Boundary cells simply produce fewer neighbours; nothing outside
    ``[0, rows) x [0, cols)`` is ever yielded.
    """
    for offset in adjacency.offsets:
        nxt = apply_offset(pos, offset, shape)
        if nxt is not None:
            yield nxt


__all__ = [
    "Adjacency",
    "ORTHOGONAL_OFFSETS",
    "FULL_OFFSETS",
    "apply_offset",
    "iter_neighbors",
]
