"""
Failure classifications for collaborators and setup.

Explanation failures degrade gracefully to a fallback message; configuration
failures require the operator to fix the settings file.
"""

from typing import Any, Optional


class ExplanationServiceError(Exception):
    """The narrative explanation service could not produce text."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 retryable: bool = False):
        super().__init__(message)
        self.status_code = status_code
        self.retryable = retryable
        self.degraded_functionality = "explanation"
        self.fallback_strategy = "fixed_fallback_message"
        self.allows_degradation = True


class ConfigurationError(Exception):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.recoverable = False
