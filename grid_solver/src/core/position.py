from __future__ import annotations

"""Validated grid coordinates."""

from dataclasses import dataclass


class PositionOutOfBounds(IndexError):
    """Raised when a position falls outside a grid's dimensions."""


@dataclass(frozen=True)
class Position:
    """Immutable ``(row, col)`` coordinate."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.col < 0:
            raise PositionOutOfBounds(f"Position ({self.row}, {self.col}) has a negative coordinate")

    def as_tuple(self) -> tuple[int, int]:
        return self.row, self.col

    def __repr__(self) -> str:
        return f"Position({self.row}, {self.col})"


__all__ = ["Position", "PositionOutOfBounds"]
