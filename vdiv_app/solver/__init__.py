"""Divider solving, value formatting and safety classification"""

from .divider import find_nearest_standard, solve, validate_voltages
from .formatting import format_resistance, format_voltage
from .safety import classify, is_within_tolerance

__all__ = [
    "solve",
    "validate_voltages",
    "find_nearest_standard",
    "format_resistance",
    "format_voltage",
    "classify",
    "is_within_tolerance",
]
