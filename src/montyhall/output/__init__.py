"""Output formatting."""

from .console import ConsoleOutput, format_percentage

__all__ = ["ConsoleOutput", "format_percentage"]
