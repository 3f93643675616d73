"""Slippage-bounded minimum amounts.

All arithmetic happens on integers in basis-point space. A tolerance given as
a percentage is converted to basis points once, through ``Decimal``, and is
never multiplied as a float.
"""

from decimal import Decimal, InvalidOperation

from .errors import InvalidArgument

BPS_DENOMINATOR = 10_000
MAX_PERCENT = Decimal(100)


def _as_decimal(value) -> Decimal:
    if isinstance(value, bool):
        raise InvalidArgument(f"Invalid slippage tolerance: {value!r}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # shortest repr, so 0.1 stays 0.1 and not 0.1000000000000000055...
        value = repr(value)
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidArgument(f"Invalid slippage tolerance: {value!r}") from None
    if not result.is_finite():
        raise InvalidArgument(f"Invalid slippage tolerance: {value!r}")
    return result


def _check_amount(amount) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidArgument(f"Amount must be an integer in base units, got {amount!r}")
    if amount < 0:
        raise InvalidArgument(f"Amount must not be negative, got {amount}")
    return amount


def tolerance_to_bps(tolerance_percent) -> int:
    """Convert a percentage in [0, 100] to whole basis points.

    Anything finer than 0.01 % is rejected: it would floor to a smaller
    tolerance than the operator asked for, possibly to none at all.
    """
    percent = _as_decimal(tolerance_percent)
    if percent < 0 or percent > MAX_PERCENT:
        raise InvalidArgument(
            "Invalid slippage tolerance. Please enter a value between 0 and 100."
        )
    bps = percent * 100
    if bps != bps.to_integral_value():
        raise InvalidArgument(
            f"Invalid slippage tolerance {tolerance_percent!r}: use at most two decimal places."
        )
    return int(bps)


def min_acceptable_bps(amount: int, tolerance_bps: int) -> int:
    """Lowest amount still acceptable once ``tolerance_bps`` of slippage is allowed."""
    amount = _check_amount(amount)
    if isinstance(tolerance_bps, bool) or not isinstance(tolerance_bps, int):
        raise InvalidArgument(f"Tolerance must be whole basis points, got {tolerance_bps!r}")
    if not 0 <= tolerance_bps <= BPS_DENOMINATOR:
        raise InvalidArgument(
            f"Tolerance must be between 0 and {BPS_DENOMINATOR} basis points, got {tolerance_bps}"
        )
    return amount * (BPS_DENOMINATOR - tolerance_bps) // BPS_DENOMINATOR


def min_acceptable(amount: int, tolerance_percent) -> int:
    """Percentage form of :func:`min_acceptable_bps`.

    >>> min_acceptable(1000, 1)
    990
    """
    return min_acceptable_bps(amount, tolerance_to_bps(tolerance_percent))


def bps_to_percent(bps: int) -> str:
    """Render basis points as a percentage string: 150 -> '1.5'."""
    whole, frac = divmod(int(bps), 100)
    return f"{whole}.{frac:02d}".rstrip("0").rstrip(".")
