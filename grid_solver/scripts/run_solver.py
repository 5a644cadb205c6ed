"""Entrypoint for running the grid puzzles over an input file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

from grid_solver.src.core.grid import Grid
from grid_solver.src.core.grid_utils import TilingError, expand_grid
from grid_solver.src.data.grid_loader import GridLoadError, load_digit_grid
from grid_solver.src.executor.cascade import CascadeStep, simulate_cascade
from grid_solver.src.search.shortest_path import minimal_risk
from grid_solver.src.segment.basins import analyze_basins
from grid_solver.src.utils import config_loader
from grid_solver.src.utils.logger import attach_file_handler, get_logger, set_level

logger = get_logger("grid_solver.cli")


def _shape(args: argparse.Namespace) -> Optional[tuple[int, int]]:
    if args.rows is None and args.cols is None:
        return None
    if args.rows is None or args.cols is None:
        raise GridLoadError("--rows and --cols must be given together")
    return args.rows, args.cols


def run_basins(args: argparse.Namespace) -> None:
    if args.wall is not None:
        config_loader.set_basin_wall_value(args.wall)

    grid = load_digit_grid(args.input, _shape(args))
    report = analyze_basins(grid)
    print(f"Local minima: {[p.as_tuple() for p in report.minima]}")
    print(f"Risk level: {report.risk_level}")
    for size in report.sizes:
        print(f"Basin of size: {size} found")
    print(f"Largest basins: {sorted(report.sizes)[-config_loader.BASIN_TOP_N:]}")
    if report.product is None:
        print(f"Basin metric: n/a (fewer than {config_loader.BASIN_TOP_N} basins)")
    else:
        print(f"Basin metric: {report.product}")


def run_cascade(args: argparse.Namespace) -> None:
    if args.threshold is not None:
        config_loader.set_cascade_threshold(args.threshold)
    if args.steps is not None:
        config_loader.set_cascade_max_steps(args.steps)

    grid = load_digit_grid(args.input, _shape(args))
    if args.show:
        print(f"Init:\n{grid}\n")

    def _show(step: CascadeStep, g: Grid) -> None:
        print(f"Step {step.step}, {step.triggered} triggered:\n{g}\n")

    report_step = config_loader.CASCADE_REPORT_STEP
    summary = simulate_cascade(
        grid, min_steps=report_step, on_step=_show if args.show else None
    )
    if len(summary.steps) < report_step:
        print(f"Triggered after {report_step} steps: n/a (only {len(summary.steps)} steps ran)")
    else:
        print(f"Triggered after {report_step} steps: {summary.triggered_after(report_step)}")
    print(f"Total triggered: {summary.total_triggered}")
    if summary.first_sync_step is not None:
        print(f"First full sync on step {summary.first_sync_step}")
    else:
        print(f"No full sync within {len(summary.steps)} steps")


def run_risk(args: argparse.Namespace) -> None:
    if args.factor is not None:
        config_loader.set_large_cave_factor(args.factor)

    grid = load_digit_grid(args.input, _shape(args))
    if args.large_cave:
        grid = expand_grid(
            grid, config_loader.LARGE_CAVE_FACTOR, max_value=config_loader.RISK_MAX_VALUE
        )
        logger.info(f"expanded cave to {grid.rows}x{grid.cols}")
    print(f"Minimal risk: {minimal_risk(grid)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve grid puzzles")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--show-config", action="store_true", help="Print runtime configuration")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", type=Path, help="Text file with one digit per cell")
    common.add_argument("--rows", type=int, default=None, help="Declared row count")
    common.add_argument("--cols", type=int, default=None, help="Declared column count")

    sub = parser.add_subparsers(dest="command", required=True)

    p_basins = sub.add_parser("basins", parents=[common], help="Low points and basin sizes")
    p_basins.add_argument("--wall", type=int, default=None, help="Cell value that bounds a basin")
    p_basins.set_defaults(func=run_basins)

    p_cascade = sub.add_parser("cascade", parents=[common], help="Chain-reaction simulation")
    p_cascade.add_argument("--steps", type=int, default=None, help="Maximum steps to simulate")
    p_cascade.add_argument("--threshold", type=int, default=None, help="Trigger threshold")
    p_cascade.add_argument("--show", action="store_true", help="Print the grid after each step")
    p_cascade.set_defaults(func=run_cascade)

    p_risk = sub.add_parser("risk", parents=[common], help="Minimal path risk")
    p_risk.add_argument("--large-cave", action="store_true", help="Tile the cave before solving")
    p_risk.add_argument("--factor", type=int, default=None, help="Tile factor for --large-cave")
    p_risk.set_defaults(func=run_risk)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, config_loader.LOG_LEVEL, logging.INFO)
    set_level(level)
    if args.log_file:
        attach_file_handler("grid_solver", args.log_file)
    if args.show_config:
        config_loader.print_runtime_config()

    try:
        args.func(args)
    except (GridLoadError, TilingError) as exc:
        logger.error(f"{args.command} failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
