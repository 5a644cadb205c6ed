from __future__ import annotations

"""Chain-reaction simulation on integer grids.

Each step raises every cell by one. A cell whose value exceeds the threshold
triggers: it resets to the baseline and bumps each of its eight neighbours,
which may trigger them in turn within the same step. A cell that has already
triggered during a step sits at the baseline and ignores further bumps until
the next step.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..core.grid import Grid
from ..core.neighbors import Adjacency
from ..utils import config_loader
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class CascadeStep:
    """Outcome of a single simulated step."""

    step: int
    triggered: int
    synchronized: bool


@dataclass
class CascadeSummary:
    """Outcome of a multi-step simulation."""

    steps: List[CascadeStep] = field(default_factory=list)
    total_triggered: int = 0
    first_sync_step: Optional[int] = None

    def triggered_after(self, step: int) -> int:
        """Return the cumulative trigger count after ``step`` steps."""
        return sum(s.triggered for s in self.steps if s.step <= step)


def propagate(grid: Grid, threshold: int, baseline: int) -> int:
    """Trigger every cell above ``threshold`` and resolve the chain reaction.

    Returns the number of cells that triggered.
    """
    stack = grid.find(lambda v: v > threshold)
    triggered = 0

    while stack:
        cur = stack.pop()
        if grid.get(cur) == baseline:
            continue
        grid.set(cur, baseline)
        triggered += 1

        for npos in grid.neighbors(cur, Adjacency.FULL):
            value = grid.get(npos)
            if value == baseline:
                continue
            value += 1
            grid.set(npos, value)
            if value > threshold:
                stack.append(npos)

    return triggered


def cascade_step(
    grid: Grid,
    *,
    threshold: Optional[int] = None,
    baseline: Optional[int] = None,
    step: int = 1,
) -> CascadeStep:
    """Advance ``grid`` by one step in place and report what triggered."""
    if threshold is None:
        threshold = config_loader.CASCADE_THRESHOLD
    if baseline is None:
        baseline = config_loader.CASCADE_BASELINE

    grid.map(lambda v: v + 1)
    triggered = propagate(grid, threshold, baseline)
    rows, cols = grid.shape()
    return CascadeStep(step=step, triggered=triggered, synchronized=triggered == rows * cols)


def simulate_cascade(
    grid: Grid,
    max_steps: Optional[int] = None,
    *,
    stop_on_sync: bool = True,
    min_steps: int = 0,
    threshold: Optional[int] = None,
    baseline: Optional[int] = None,
    on_step: Optional[Callable[[CascadeStep, Grid], None]] = None,
) -> CascadeSummary:
    """Run up to ``max_steps`` steps on ``grid`` in place.

    With ``stop_on_sync`` the run ends once every cell has triggered in a
    single step, but never before ``min_steps`` steps have run. ``on_step``
    is called after each step with the step result and the grid.
    """
    if max_steps is None:
        max_steps = config_loader.CASCADE_MAX_STEPS

    summary = CascadeSummary()
    for n in range(1, max_steps + 1):
        result = cascade_step(grid, threshold=threshold, baseline=baseline, step=n)
        summary.steps.append(result)
        summary.total_triggered += result.triggered
        if on_step is not None:
            on_step(result, grid)

        if result.synchronized and summary.first_sync_step is None:
            summary.first_sync_step = n
            logger.info(f"first full synchronization on step {n}")
        if stop_on_sync and summary.first_sync_step is not None and n >= min_steps:
            break

    logger.debug(f"simulated {len(summary.steps)} steps, {summary.total_triggered} triggers")
    return summary


__all__ = [
    "CascadeStep",
    "CascadeSummary",
    "propagate",
    "cascade_step",
    "simulate_cascade",
]
