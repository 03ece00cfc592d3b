"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from ..series.e24 import candidate_bottom_resistors
from .defaults import ExplanationParams, LoggingParams, SolverParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _unknown_fields(params: dict[str, Any], params_type: type) -> list[ValidationError]:
    known = {f.name for f in fields(params_type)}
    return [
        ValidationError(field=key, message="Unknown parameter", value=value)
        for key, value in params.items()
        if key not in known
    ]


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_solver_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate resistor search parameters."""
        errors = _unknown_fields(params, SolverParams)

        for name in ("r2_min_ohms", "r2_max_ohms"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        # Window must not be inverted
        low = params.get("r2_min_ohms", SolverParams.r2_min_ohms)
        high = params.get("r2_max_ohms", SolverParams.r2_max_ohms)
        if _is_number(low) and _is_number(high):
            if low > high:
                errors.append(ValidationError(
                    field="r2_max_ohms",
                    message="Must be greater than or equal to r2_min_ohms",
                    value=high
                ))
            elif not candidate_bottom_resistors(low, high):
                errors.append(ValidationError(
                    field="r2_min_ohms",
                    message="Window must contain at least one standard resistor value",
                    value=low
                ))

        if "safety_tolerance_volts" in params:
            value = params["safety_tolerance_volts"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="safety_tolerance_volts",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_explanation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate explanation service parameters."""
        errors = _unknown_fields(params, ExplanationParams)

        if "enabled" in params and not isinstance(params["enabled"], bool):
            errors.append(ValidationError(
                field="enabled",
                message="Must be a boolean",
                value=params["enabled"]
            ))

        for name in ("model", "endpoint", "api_key_env"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-empty string",
                        value=value
                    ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = _unknown_fields(params, LoggingParams)

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ValidationError(
                field="format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "solver" in config:
            errors.extend(ConfigValidator.validate_solver_params(config["solver"]))

        if "explanation" in config:
            errors.extend(ConfigValidator.validate_explanation_params(config["explanation"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
