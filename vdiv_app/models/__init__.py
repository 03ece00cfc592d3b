"""
Data models module.

Immutable result structures produced by the divider solver.
"""

from .results import CalculationResult, ErrorKind, ResistorPair

__all__ = ["CalculationResult", "ErrorKind", "ResistorPair"]
