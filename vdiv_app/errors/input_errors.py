"""
Input error classifications for divider solving.

Each class carries the exact user-facing message and the result error kind
it maps to.
"""

from typing import Any, Dict, Optional

from ..models.results import ErrorKind


class InputValidationError(Exception):
    """Base class for rejected solver inputs."""

    kind: ErrorKind
    default_message: str = ""

    def __init__(self, message: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.context = context or {}
        self.recoverable = True


class InvalidMagnitudeError(InputValidationError):
    """A voltage is zero, negative or not a finite number."""

    kind = ErrorKind.INVALID_MAGNITUDE
    default_message = "positive voltage values required."


class InvalidRangeError(InputValidationError):
    """The requested output is not below the input voltage."""

    kind = ErrorKind.INVALID_RANGE
    default_message = "output voltage cannot be higher than input voltage."
