from __future__ import annotations

"""Grid replication helpers."""

from typing import Optional

import numpy as np

from .grid import Grid


class TilingError(ValueError):
    """Raised when a grid cannot be tiled to the requested dimensions."""


def wrap_values(arr: np.ndarray, max_value: int = 9) -> np.ndarray:
    """Wrap values above ``max_value`` back into ``1..max_value`` (10 -> 1)."""
    return np.where(arr > max_value, (arr - 1) % max_value + 1, arr)


def tile_grid(
    grid: Grid,
    target_rows: int,
    target_cols: Optional[int] = None,
    *,
    max_value: int = 9,
) -> Grid:
    """Return ``grid`` replicated up to ``target_rows`` x ``target_cols``.

    The tile at block ``(bi, bj)`` has ``bi + bj`` added to each of its values;
    results above ``max_value`` wrap around to ``1`` rather than ``0``. The
    target must be a whole multiple of the source dimensions.
    """
    if target_cols is None:
        target_cols = target_rows
    rows, cols = grid.shape()
    if target_rows < rows or target_cols < cols:
        raise TilingError(
            f"cannot shrink a {rows}x{cols} grid to {target_rows}x{target_cols}"
        )
    if target_rows % rows or target_cols % cols:
        raise TilingError(
            f"target {target_rows}x{target_cols} is not a multiple of {rows}x{cols}"
        )

    reps_r = target_rows // rows
    reps_c = target_cols // cols
    src = grid.to_array().astype(int)
    tiled = np.tile(src, (reps_r, reps_c))
    blocks = np.add.outer(np.arange(reps_r), np.arange(reps_c))
    offsets = np.repeat(np.repeat(blocks, rows, axis=0), cols, axis=1)
    return Grid.from_array(wrap_values(tiled + offsets, max_value))


def expand_grid(grid: Grid, factor: int, *, max_value: int = 9) -> Grid:
    """Tile ``grid`` ``factor`` times along each axis."""
    if factor < 1:
        raise TilingError(f"tile factor must be positive, got {factor}")
    rows, cols = grid.shape()
    return tile_grid(grid, rows * factor, cols * factor, max_value=max_value)


__all__ = ["TilingError", "tile_grid", "expand_grid", "wrap_values"]
