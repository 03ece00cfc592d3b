"""Standard resistor value series"""

from .e24 import (
    BASE_E24,
    MULTIPLIERS,
    STANDARD_RESISTORS,
    candidate_bottom_resistors,
    generate_standard_series,
)

__all__ = [
    "BASE_E24",
    "MULTIPLIERS",
    "STANDARD_RESISTORS",
    "candidate_bottom_resistors",
    "generate_standard_series",
]
