"""Cooking time adjustment for scaled recipes.

Cooking time does not grow linearly with batch size. A doubled batch takes
longer, but nowhere near twice as long, so times are scaled on a log2 curve.
"""

import logging
import math
import re

from . import config

logger = logging.getLogger(__name__)

# "20 minutes", "1 hr", "45mins". The number must be a whole integer: "1.5 hours" and
# "1 1/2 hours" do not match and are left unchanged.
DURATION_PATTERN = re.compile(
    r"(?<![\d./])(\d+)(?![\d./])\s*(minutes?|mins?|hours?|hrs?)\b", re.IGNORECASE
)


def time_adjustment_factor(
    scale_factor: float,
    up_coefficient: float | None = None,
    down_coefficient: float | None = None,
) -> float:
    """
    Calculate how much cooking times change for a given scaling factor.

    Args:
        scale_factor: Ingredient scaling factor (must be positive)
        up_coefficient: Weight per doubling when scaling up
        down_coefficient: Weight per halving when scaling down

    Returns:
        Multiplier for cooking times, never negative

    Raises:
        ValueError: If scale_factor is not positive
    """
    if up_coefficient is None:
        up_coefficient = config.TIME_SCALE_UP_COEFFICIENT
    if down_coefficient is None:
        down_coefficient = config.TIME_SCALE_DOWN_COEFFICIENT

    if not scale_factor > 0:
        raise ValueError(f"Scaling factor must be positive, got {scale_factor}")

    if scale_factor > 1:
        return 1 + math.log2(scale_factor) * up_coefficient
    if scale_factor < 1:
        return max(0.0, 1 - math.log2(1 / scale_factor) * down_coefficient)
    return 1.0


def parse_duration(text: str | None) -> tuple[int, str] | None:
    """
    Parse the first "<number> <unit>" duration in a string.

    Returns:
        Tuple of (amount, unit as written) or None
    """
    if not text:
        return None
    match = DURATION_PATTERN.search(text)
    if not match:
        return None
    return int(match.group(1)), match.group(2)


def apply_time_adjustment(text: str | None, adjustment: float) -> str | None:
    """
    Apply a precomputed time adjustment to a duration string.

    The unit word is kept exactly as written and surrounding text is kept.
    Strings without a recognisable duration are returned unchanged.
    """
    if not text:
        return text

    match = DURATION_PATTERN.search(text)
    if not match:
        logger.debug("No duration found in %r, leaving unchanged", text)
        return text

    amount = int(match.group(1))
    unit = match.group(2)
    adjusted = int(math.floor(amount * adjustment + 0.5))

    return f"{text[: match.start()]}{adjusted} {unit}{text[match.end() :]}"


def adjust_time(text: str | None, scale_factor: float) -> str | None:
    """
    Adjust a duration string for a recipe scaled by `scale_factor`.

    Examples:
        ("30 minutes", 2.0) -> "39 minutes"
        ("30 minutes", 0.5) -> "24 minutes"
        ("overnight", 2.0) -> "overnight"
    """
    return apply_time_adjustment(text, time_adjustment_factor(scale_factor))
