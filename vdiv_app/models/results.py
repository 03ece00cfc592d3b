"""Result models for divider solving."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Why a solve request was rejected."""
    INVALID_MAGNITUDE = "invalid_magnitude"
    INVALID_RANGE = "invalid_range"


@dataclass(frozen=True)
class ResistorPair:
    """Best-matching standard resistor pair and its electrical metrics."""
    r1: float                   # Top resistor, ohms
    r2: float                   # Bottom resistor, ohms
    r1_formatted: str
    r2_formatted: str
    actual_v_out: float         # Volts
    deviation_percent: float    # Signed, relative to target
    power_r1: float             # Watts
    power_r2: float             # Watts
    impedance: float            # Parallel r1 || r2, ohms
    is_safe: bool
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary view for serialization."""
        return asdict(self)


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of one solve call: a pair or an error, never both."""
    best_pair: Optional[ResistorPair] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        if (self.best_pair is None) == (self.error is None):
            raise ValueError("CalculationResult holds exactly one of best_pair or error")
        if self.error is not None and self.error_kind is None:
            raise ValueError("error results require an error_kind")

    @classmethod
    def success(cls, pair: ResistorPair) -> "CalculationResult":
        return cls(best_pair=pair)

    @classmethod
    def failure(cls, message: str, kind: ErrorKind) -> "CalculationResult":
        return cls(error=message, error_kind=kind)

    @property
    def ok(self) -> bool:
        return self.best_pair is not None
