"""Numeric generators: doubles, currency amounts and phone numbers."""

import math

from hypothesis import strategies as st

from degenerate.combinators.constrained import such_that

PHONE_NUMBER_MIN = 70000000
PHONE_NUMBER_MAX = 80000000


def _is_finite(value: float) -> bool:
    return math.isfinite(value)


def round_currency(value: float) -> float:
    """Round to two decimal places by formatting and parsing back."""
    return float(f"{value:.2f}")


def format_phone_number(number: int) -> str:
    # The upper bound renders as "080000000".
    return f"0{number}"


finite_double = such_that(st.floats(), _is_finite)

currency = st.floats(min_value=1.0, allow_nan=False, allow_infinity=False).map(round_currency)

phone_number = st.integers(min_value=PHONE_NUMBER_MIN, max_value=PHONE_NUMBER_MAX).map(
    format_phone_number
)
