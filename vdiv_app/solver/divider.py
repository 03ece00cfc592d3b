"""Best standard resistor pair for a voltage divider"""

import math
from typing import Optional

from ..config.defaults import SolverParams
from ..errors import (
    ConfigurationError,
    InputValidationError,
    InvalidMagnitudeError,
    InvalidRangeError,
)
from ..logging.config import get_solver_logger
from ..models.results import CalculationResult, ResistorPair
from ..series.e24 import STANDARD_RESISTORS, candidate_bottom_resistors
from .formatting import format_resistance
from .safety import classify, is_within_tolerance

logger = get_solver_logger(__name__)


def validate_voltages(v_in: float, target_v_out: float) -> None:
    """
    Reject voltages the search cannot work with

    Raises:
        InvalidMagnitudeError: either voltage is not a positive finite number
        InvalidRangeError: target_v_out is not below v_in
    """
    if not (math.isfinite(v_in) and math.isfinite(target_v_out)) \
            or v_in <= 0 or target_v_out <= 0:
        raise InvalidMagnitudeError(context={"v_in": v_in, "target_v_out": target_v_out})

    if target_v_out >= v_in:
        raise InvalidRangeError(context={"v_in": v_in, "target_v_out": target_v_out})


def find_nearest_standard(ideal: float) -> float:
    """
    Series member closest to ideal

    min() keeps the first minimum, so an exact tie between two members
    resolves to the smaller one.
    """
    return min(STANDARD_RESISTORS, key=lambda r: abs(r - ideal))


def _divider_output(v_in: float, r1: float, r2: float) -> float:
    return v_in * (r2 / (r1 + r2))


def _build_pair(v_in: float, target_v_out: float, r1: float, r2: float,
                tolerance: float) -> ResistorPair:
    actual_v_out = _divider_output(v_in, r1, r2)
    current = v_in / (r1 + r2)
    is_safe = is_within_tolerance(actual_v_out, target_v_out, tolerance)
    r1_formatted = format_resistance(r1)
    r2_formatted = format_resistance(r2)

    return ResistorPair(
        r1=r1,
        r2=r2,
        r1_formatted=r1_formatted,
        r2_formatted=r2_formatted,
        actual_v_out=actual_v_out,
        deviation_percent=(actual_v_out - target_v_out) / target_v_out * 100,
        power_r1=current * current * r1,
        power_r2=current * current * r2,
        impedance=(r1 * r2) / (r1 + r2),
        is_safe=is_safe,
        message=classify(is_safe, r1_formatted, r2_formatted, actual_v_out),
    )


def solve(v_in: float, target_v_out: float,
          params: Optional[SolverParams] = None) -> CalculationResult:
    """
    Find the E24 pair whose divider output is closest to target_v_out

    Every bottom resistor in the configured window is tried in ascending
    order; for each, the top resistor is the series member nearest the ideal
    value. A later candidate replaces the best only if its error is strictly
    smaller, so ties keep the pair with the smaller bottom resistor.

    Args:
        v_in: Source voltage in volts
        target_v_out: Requested output voltage in volts
        params: Search window and safety tolerance (defaults when None)

    Returns:
        CalculationResult holding either the best pair or the error message
    """
    params = params or SolverParams()

    try:
        validate_voltages(v_in, target_v_out)
    except InputValidationError as e:
        logger.debug("Rejected divider inputs", error_kind=e.kind.value, **e.context)
        return CalculationResult.failure(e.message, e.kind)

    ratio = v_in / target_v_out - 1
    best: Optional[tuple[float, float]] = None
    min_error = math.inf

    for r2 in candidate_bottom_resistors(params.r2_min_ohms, params.r2_max_ohms):
        r1 = find_nearest_standard(r2 * ratio)
        error = abs(target_v_out - _divider_output(v_in, r1, r2))

        if error < min_error:
            min_error = error
            best = (r1, r2)

    if best is None:
        # Only reachable with a search window that holds no series member
        raise ConfigurationError(
            "r2 search window contains no standard resistor values",
            errors=[{"r2_min_ohms": params.r2_min_ohms, "r2_max_ohms": params.r2_max_ohms}]
        )

    r1, r2 = best
    return CalculationResult.success(
        _build_pair(v_in, target_v_out, r1, r2, params.safety_tolerance_volts)
    )
