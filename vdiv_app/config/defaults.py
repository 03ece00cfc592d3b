"""Default configuration parameters for the divider designer."""

from dataclasses import dataclass

# Output may exceed the target by this much and still be reported as safe.
# Unexplained in the product brief; confirm with the product owner before changing.
SAFETY_TOLERANCE_VOLTS = 0.05


@dataclass(frozen=True)
class SolverParams:
    """Resistor search parameters."""
    # Bottom resistor window, sized for typical ADC sampling impedance
    r2_min_ohms: float = 1000.0
    r2_max_ohms: float = 100000.0

    # Safety classification
    safety_tolerance_volts: float = SAFETY_TOLERANCE_VOLTS


@dataclass(frozen=True)
class ExplanationParams:
    """Narrative explanation service parameters."""
    enabled: bool = True
    model: str = "gemini-3-flash-preview"
    endpoint: str = "https://generativelanguage.googleapis.com/v1beta"
    api_key_env: str = "API_KEY"                # Environment variable holding the key
    timeout_seconds: float = 15.0


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    solver: SolverParams
    explanation: ExplanationParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        solver=SolverParams(),
        explanation=ExplanationParams(),
        logging=LoggingParams(),
    )
