"""Input helpers for the grid solver."""

from .grid_loader import (
    GridLoadError,
    GridParseError,
    GridReadError,
    GridSizeError,
    load_digit_grid,
    parse_digit_lines,
)

__all__ = [
    "GridLoadError",
    "GridParseError",
    "GridReadError",
    "GridSizeError",
    "load_digit_grid",
    "parse_digit_lines",
]
