"""Turn scaled amounts back into cook-friendly text, preferring simple fractions."""

import math

from . import config

# Upper bound on continued-fraction terms; two-decimal inputs need far fewer
MAX_CONVERGENTS = 32


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves away from zero (for non-negative values).

    The builtin round() rounds halves to even, which would turn 1.125 into 1.12.
    """
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def format_decimal(value: float, precision: int = config.QUANTITY_PRECISION) -> str:
    """Format a number with at most `precision` decimals and no trailing zeros."""
    if value == int(value):
        return str(int(value))
    return f"{value:.{precision}f}".rstrip("0").rstrip(".")


def continued_fraction(value: float, tolerance: float | None = None) -> tuple[int, int]:
    """
    Approximate a non-negative value by a fraction using continued-fraction expansion.

    Expands until the convergent h/k is within `tolerance` (relative) of the value.

    Args:
        value: The value to approximate
        tolerance: Relative tolerance, defaults to config.FRACTION_TOLERANCE

    Returns:
        Tuple of (numerator, denominator)
    """
    if tolerance is None:
        tolerance = config.FRACTION_TOLERANCE

    if value == math.floor(value):
        return int(value), 1

    h1, h2 = 1, 0
    k1, k2 = 0, 1
    b = value

    for _ in range(MAX_CONVERGENTS):
        a = math.floor(b)
        h1, h2 = a * h1 + h2, h1
        k1, k2 = a * k1 + k2, k1

        if abs(value - h1 / k1) <= value * tolerance:
            break

        remainder = b - a
        if remainder <= 0:
            break
        b = 1 / remainder

    return h1, k1


def decimal_to_fraction(value: float, tolerance: float | None = None) -> str:
    """
    Render a value as a whole number, simple fraction or mixed number.

    Examples:
        2.0 -> "2"
        0.25 -> "1/4"
        1.5 -> "1 1/2"
    """
    if value == math.floor(value):
        return str(int(value))

    numerator, denominator = continued_fraction(value, tolerance)

    if numerator > denominator:
        whole, remainder = divmod(numerator, denominator)
        if remainder == 0:
            return str(whole)
        return f"{whole} {remainder}/{denominator}"

    return f"{numerator}/{denominator}"


def format_amount(amount: float, max_fraction_length: int | None = None) -> str:
    """
    Format a scaled amount without a unit.

    Rounds to two decimals, then uses a fraction unless it is too long to read
    comfortably ("1 13/100"), in which case the decimal is used.
    """
    if max_fraction_length is None:
        max_fraction_length = config.MAX_FRACTION_LENGTH

    rounded = round_half_up(amount, config.QUANTITY_PRECISION)
    fraction = decimal_to_fraction(rounded)

    if len(fraction) < max_fraction_length:
        return fraction
    return format_decimal(rounded)


def format_quantity(amount: float, unit: str | None = "") -> str:
    """
    Format a scaled amount together with its unit.

    Examples:
        (1.5, "cups") -> "1 1/2 cups"
        (1.125, "cup") -> "1.13 cup"
        (3.0, "") -> "3"
    """
    return f"{format_amount(amount)} {unit or ''}".strip()
