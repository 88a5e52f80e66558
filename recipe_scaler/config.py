"""Configuration for Recipe Scaler."""

import logging
import math
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

APP_NAME = "recipe-scaler"
ENV_PREFIX = "RECIPE_SCALER_"


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back to the default on bad input."""
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s%s=%r, using %s", ENV_PREFIX, name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s%s=%r, using %s", ENV_PREFIX, name, raw, default)
        return default


# Servings assumed when a recipe has none (or a non-positive value)
DEFAULT_SERVINGS = _env_float("DEFAULT_SERVINGS", 4.0)
if not (math.isfinite(DEFAULT_SERVINGS) and DEFAULT_SERVINGS > 0):
    logger.warning("DEFAULT_SERVINGS must be positive, using 4")
    DEFAULT_SERVINGS = 4.0

# Cooking time heuristic: doubling a batch adds more time than halving removes.
# Negative coefficients would make times shrink as batches grow.
TIME_SCALE_UP_COEFFICIENT = _env_float("TIME_UP_COEFFICIENT", 0.3)
if not (math.isfinite(TIME_SCALE_UP_COEFFICIENT) and TIME_SCALE_UP_COEFFICIENT >= 0):
    logger.warning("TIME_UP_COEFFICIENT must not be negative, using 0.3")
    TIME_SCALE_UP_COEFFICIENT = 0.3

TIME_SCALE_DOWN_COEFFICIENT = _env_float("TIME_DOWN_COEFFICIENT", 0.2)
if not (math.isfinite(TIME_SCALE_DOWN_COEFFICIENT) and TIME_SCALE_DOWN_COEFFICIENT >= 0):
    logger.warning("TIME_DOWN_COEFFICIENT must not be negative, using 0.2")
    TIME_SCALE_DOWN_COEFFICIENT = 0.2

# Fractions this long or longer ("1 13/100") are shown as decimals instead
MAX_FRACTION_LENGTH = _env_int("MAX_FRACTION_LENGTH", 8)

# Fixed, not read from the environment
QUANTITY_PRECISION = 2
FRACTION_TOLERANCE = 1.0e-6

LOG_LEVEL = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").upper()
