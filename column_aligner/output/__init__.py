"""Output module: reports for formatting runs."""

from .formatter import OutputFormatter

__all__ = ["OutputFormatter"]
