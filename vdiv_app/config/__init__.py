"""Configuration defaults, YAML loading and validation."""

from .defaults import (
    SAFETY_TOLERANCE_VOLTS,
    DefaultConfig,
    ExplanationParams,
    LoggingParams,
    SolverParams,
    get_default_config,
)
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "SAFETY_TOLERANCE_VOLTS",
    "DefaultConfig",
    "ExplanationParams",
    "LoggingParams",
    "SolverParams",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
