from __future__ import annotations

import numbers

import numpy as np


class ValidationError(ValueError):
    """Raised when validation constraints are violated."""


def require_finite(value: float, label: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{label} must be a number.") from exc
    if not np.isfinite(number):
        raise ValidationError(f"{label} must be finite.")
    return number


def require_side_count(side_count: int) -> int:
    if isinstance(side_count, bool) or not isinstance(side_count, numbers.Integral):
        raise ValidationError("side_count must be an integer.")
    if side_count < 3:
        raise ValidationError("side_count must be >= 3.")
    return int(side_count)


def require_positive(value: float, label: str) -> float:
    number = require_finite(value, label)
    if number <= 0:
        raise ValidationError(f"{label} must be positive.")
    return number


def require_non_negative(value: float, label: str) -> float:
    number = require_finite(value, label)
    if number < 0:
        raise ValidationError(f"{label} must be >= 0.")
    return number
