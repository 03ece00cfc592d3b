"""
Error classification for the divider designer.

Input errors are raised by validation and converted into the error variant of
a calculation result; service failures are absorbed where the service is
called; configuration errors stop the designer from starting.
"""

from .input_errors import (
    InputValidationError,
    InvalidMagnitudeError,
    InvalidRangeError,
)
from .service_failures import (
    ConfigurationError,
    ExplanationServiceError,
)

__all__ = [
    # Input Errors
    "InputValidationError",
    "InvalidMagnitudeError",
    "InvalidRangeError",
    # Service and Setup Failures
    "ExplanationServiceError",
    "ConfigurationError",
]
