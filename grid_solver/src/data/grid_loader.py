"""Load digit grids from text files.

Each line of the input holds one row of single-digit cells (``'0'``-``'9'``).
When a shape is declared the input must match it exactly; otherwise the shape
is taken from the first row and every other row must agree with it. A grid is
only returned once every row has been validated.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from grid_solver.src.core.grid import Grid
from grid_solver.src.utils.logger import get_logger

logger = get_logger(__name__)


class GridLoadError(ValueError):
    """Base class for errors raised while loading a grid."""


class GridReadError(GridLoadError):
    """Raised when the grid source cannot be read."""


class GridParseError(GridLoadError):
    """Raised for a non-digit character or a row of the wrong length."""


class GridSizeError(GridLoadError):
    """Raised when the input has more or fewer rows or columns than declared."""


def _strip_trailing_blank(lines: List[str]) -> List[str]:
    while lines and not lines[-1]:
        lines.pop()
    return lines


def parse_digit_lines(
    lines: Iterable[str],
    shape: Optional[Tuple[int, int]] = None,
) -> Grid:
    """Return a :class:`Grid` of ints parsed from ``lines``.

    Parameters
    ----------
    lines:
        Text rows; trailing newlines and trailing blank lines are ignored.
    shape:
        Optional ``(rows, cols)`` the input must match exactly.
    """

    rows = _strip_trailing_blank([line.rstrip("\r\n") for line in lines])
    if not rows:
        raise GridSizeError("grid input is empty")

    if shape is not None:
        n_rows, n_cols = shape
    else:
        n_rows, n_cols = len(rows), len(rows[0])

    if n_rows <= 0 or n_cols <= 0:
        raise GridSizeError(f"grid dimensions must be positive, got {n_rows}x{n_cols}")

    if len(rows) > n_rows:
        raise GridSizeError(f"expected {n_rows} rows, got more ({len(rows)})")

    cells: List[int] = []
    for i, line in enumerate(rows):
        if len(line) > n_cols:
            raise GridSizeError(
                f"row {i} has {len(line)} characters, more than the declared {n_cols}"
            )
        if len(line) != n_cols:
            raise GridParseError(f"row {i} has {len(line)} characters, expected {n_cols}")
        for j, char in enumerate(line):
            if char not in "0123456789":
                raise GridParseError(f"non-digit character {char!r} at row {i}, column {j}")
            cells.append(int(char))

    if len(rows) < n_rows:
        raise GridSizeError(f"expected {n_rows} rows, got {len(rows)}")

    return Grid(n_rows, n_cols, cells)


def load_digit_grid(path: str | Path, shape: Optional[Tuple[int, int]] = None) -> Grid:
    """Load a digit grid from ``path``."""
    try:
        with open(Path(path), "r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as exc:
        raise GridReadError(f"unable to read grid file {path}: {exc}") from exc
    grid = parse_digit_lines(lines, shape)
    logger.debug(f"loaded {grid.rows}x{grid.cols} grid from {path}")
    return grid


__all__ = [
    "GridLoadError",
    "GridReadError",
    "GridParseError",
    "GridSizeError",
    "parse_digit_lines",
    "load_digit_grid",
]
