"""Simulation engine components."""

from .montecarlo import MonteCarloSimulator, Trial, TrialTally

__all__ = [
    "MonteCarloSimulator",
    "Trial",
    "TrialTally",
]
