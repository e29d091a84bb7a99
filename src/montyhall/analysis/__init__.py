"""Exact analysis and shared results."""

from .calculator import calculate_result
from .result import Result

__all__ = ["Result", "calculate_result"]
