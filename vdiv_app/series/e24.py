"""E24 preferred resistor values from 1 ohm to 9.1 megohm"""

# Coefficients of one decade of the E24 series
BASE_E24: tuple[float, ...] = (
    1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
    3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
)

MULTIPLIERS: tuple[int, ...] = (1, 10, 100, 1000, 10000, 100000, 1000000)


def generate_standard_series() -> tuple[float, ...]:
    """
    Build the ascending series of every coefficient times every multiplier

    Values are plain float products (e.g. 1.1 * 1000), so callers compare
    against members of this tuple rather than re-deriving them.

    Returns:
        168 distinct resistor values in ohms, sorted ascending
    """
    return tuple(sorted(base * mult for mult in MULTIPLIERS for base in BASE_E24))


# Built once at import; shared read-only by every caller
STANDARD_RESISTORS: tuple[float, ...] = generate_standard_series()


def candidate_bottom_resistors(min_ohms: float, max_ohms: float) -> tuple[float, ...]:
    """Series members within [min_ohms, max_ohms], ascending"""
    return tuple(r for r in STANDARD_RESISTORS if min_ohms <= r <= max_ohms)
