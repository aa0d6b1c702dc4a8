"""
Numeric input checks and number rendering shared by the modeling classes
"""
import math

import numpy as np


NUMBER_TYPES = (int, float, np.number)


def ensure_float(value, what: str) -> float:
    """Return ``value`` as a float, rejecting non-numeric and NaN input"""
    if not isinstance(value, NUMBER_TYPES):
        raise TypeError(f"{what} must be a number, got {type(value).__name__}")
    value = float(value)
    if math.isnan(value):
        raise ValueError(f"{what} is NaN")
    return value


def ensure_integral(value, what: str) -> int:
    """Return ``value`` as an int, rejecting NaN and non-integral input"""
    if isinstance(value, (int, np.integer)):
        return int(value)
    value = ensure_float(value, what)
    if not value.is_integer():
        raise ValueError(f"{what} must be integral, got {value}")
    return int(value)


def format_number(value) -> str:
    """
    Render a number for diagnostics.

    Integral values print without a fractional part (``13.0`` -> ``13``),
    everything else uses the shortest round-tripping representation.
    """
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
