"""Validation helpers for precondition checks at the cart and offer boundaries.

Only finite numbers pass; NaN and infinity are rejected like any other
out-of-range value.
"""

import math

from .errors import InvalidParameterError, InvalidQuantityError


def require_positive(value: float, error_msg: str) -> None:
    """Require that a quantity is finite and greater than zero."""
    if not math.isfinite(value) or value <= 0:
        raise InvalidQuantityError(error_msg)


def require_non_negative(value: float, error_msg: str) -> None:
    """Require that a parameter is finite and zero or greater."""
    if not math.isfinite(value) or value < 0:
        raise InvalidParameterError(error_msg)


def require_in_range(value: float, low: float, high: float, error_msg: str) -> None:
    """Require that a parameter lies within [low, high]."""
    if not math.isfinite(value) or value < low or value > high:
        raise InvalidParameterError(error_msg)
