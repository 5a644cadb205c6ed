"""Fixed-size grid container used by the puzzle solvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Sequence, Tuple

import numpy as np

from .neighbors import Adjacency, iter_neighbors
from .position import Position, PositionOutOfBounds


@dataclass
class Grid:
    """Rectangular ``rows`` x ``cols`` grid stored as a flat row-major list.

    Dimensions are fixed for the lifetime of the grid. Every access goes
    through :class:`Position` and is bounds-checked against the declared
    shape.
    """

    rows: int
    cols: int
    cells: List[Any]

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("Grid cannot be empty")
        if len(self.cells) != self.rows * self.cols:
            raise ValueError(
                f"Expected {self.rows * self.cols} cells for a {self.rows}x{self.cols} grid, "
                f"got {len(self.cells)}"
            )

    # Construction ------------------------------------------------------

    @classmethod
    def filled(cls, rows: int, cols: int, fill: Any) -> "Grid":
        """Return a ``rows`` x ``cols`` grid with every cell equal to ``fill``."""
        return cls(rows, cols, [fill] * (rows * cols))

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[Any]]) -> "Grid":
        """Build a grid from a rectangular list of rows."""
        if not data or not data[0]:
            raise ValueError("Grid cannot be empty")
        width = len(data[0])
        cells: List[Any] = []
        for row in data:
            if len(row) != width:
                raise ValueError("All rows must have the same length")
            cells.extend(row)
        return cls(len(data), width, cells)

    # Addressing --------------------------------------------------------

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (rows, cols)."""
        return self.rows, self.cols

    def in_bounds(self, pos: Position) -> bool:
        return pos.row < self.rows and pos.col < self.cols

    def position(self, row: int, col: int) -> Position:
        """Return a :class:`Position` validated against this grid."""
        pos = Position(row, col)
        self._offset(pos)
        return pos

    def _offset(self, pos: Position) -> int:
        if not self.in_bounds(pos):
            raise PositionOutOfBounds(
                f"Position ({pos.row}, {pos.col}) is out of bounds of grid dimensions "
                f"({self.rows}, {self.cols})"
            )
        return pos.row * self.cols + pos.col

    def get(self, pos: Position) -> Any:
        return self.cells[self._offset(pos)]

    def set(self, pos: Position, value: Any) -> None:
        self.cells[self._offset(pos)] = value

    # Traversal ---------------------------------------------------------

    def indices(self) -> Iterator[Position]:
        """Yield every position exactly once in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Position(row, col)

    def neighbors(self, pos: Position, adjacency: Adjacency = Adjacency.ORTHOGONAL) -> Iterator[Position]:
        """Yield in-bounds neighbours of ``pos`` under ``adjacency``."""
        self._offset(pos)
        return iter_neighbors(pos, self.shape(), adjacency)

    def map(self, f: Callable[[Any], Any]) -> None:
        """Apply ``f`` to every cell value in place."""
        self.cells = [f(value) for value in self.cells]

    def map_surroundings(
        self,
        f: Callable[[Any, List[Any]], Any],
        adjacency: Adjacency = Adjacency.ORTHOGONAL,
    ) -> "Grid":
        """Return a new grid of ``f(value, neighbour_values)`` for every cell."""
        out: List[Any] = []
        for pos in self.indices():
            around = [self.get(n) for n in self.neighbors(pos, adjacency)]
            out.append(f(self.get(pos), around))
        return Grid(self.rows, self.cols, out)

    def find(self, predicate: Callable[[Any], bool]) -> List[Position]:
        """Return all positions whose value satisfies ``predicate``, row-major."""
        return [pos for pos in self.indices() if predicate(self.get(pos))]

    def count(self, predicate: Callable[[Any], bool]) -> int:
        return sum(1 for value in self.cells if predicate(value))

    # Conversion --------------------------------------------------------

    def copy(self) -> "Grid":
        return Grid(self.rows, self.cols, list(self.cells))

    def to_list(self) -> List[List[Any]]:
        """Return the grid as a list of row lists."""
        return [self.cells[r * self.cols : (r + 1) * self.cols] for r in range(self.rows)]

    def to_array(self) -> np.ndarray:
        """Return the grid as a 2D ``numpy`` array."""
        return np.array(self.cells).reshape(self.rows, self.cols)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Grid":
        if arr.ndim != 2:
            raise ValueError("grid array must be 2-dimensional")
        return cls.from_rows(arr.tolist())

    def visualize(self) -> None:
        """Pretty-print the grid values."""
        print(self)

    def __str__(self) -> str:
        return "\n".join("".join(str(v) for v in row) for row in self.to_list())

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"


__all__ = ["Grid"]
