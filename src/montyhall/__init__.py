"""Monty Hall: exact and simulated chances of winning by switching doors."""

__version__ = "0.1.0"
