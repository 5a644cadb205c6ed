from .cascade import (
    CascadeStep,
    CascadeSummary,
    cascade_step,
    propagate,
    simulate_cascade,
)

__all__ = [
    "CascadeStep",
    "CascadeSummary",
    "cascade_step",
    "propagate",
    "simulate_cascade",
]
