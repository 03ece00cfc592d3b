"""Pass/caution classification of a solved divider"""

from ..config.defaults import SAFETY_TOLERANCE_VOLTS
from .formatting import format_voltage

SUCCESS_TEMPLATE = (
    "Success! You are free to build. Use {r1} and {r2} for a hassle-free {v_out}V."
)
CAUTION_TEMPLATE = (
    "Caution: This is the best match, but it runs a bit high ({v_out}V). Watch your pins!"
)


def is_within_tolerance(actual_v_out: float, target_v_out: float,
                        tolerance: float = SAFETY_TOLERANCE_VOLTS) -> bool:
    """True when the achieved output does not overshoot the target by more than tolerance."""
    return actual_v_out <= target_v_out + tolerance


def classify(is_safe: bool, r1_formatted: str, r2_formatted: str, actual_v_out: float) -> str:
    """User-facing message for a solved pair."""
    if is_safe:
        return SUCCESS_TEMPLATE.format(
            r1=r1_formatted, r2=r2_formatted, v_out=format_voltage(actual_v_out)
        )
    return CAUTION_TEMPLATE.format(v_out=format_voltage(actual_v_out))
