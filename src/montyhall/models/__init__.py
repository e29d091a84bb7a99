"""Data models for the Monty Hall game."""

from .game import NUM_DOORS, PLAYER_DOOR, GameTable, SimulationConfig

__all__ = [
    "GameTable",
    "NUM_DOORS",
    "PLAYER_DOOR",
    "SimulationConfig",
]
