"""Validation of scalar scenario inputs."""

from __future__ import annotations

import math
import numbers
from typing import Any

from kinecalc.exceptions import (
    InvalidInputError,
    NegativeValueError,
    ScenarioValidationError,
)
from kinecalc.units import Unit


def _is_finite_number(value: Any) -> bool:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def _describe(value: Any) -> str:
    """Describe a rejected value the way the error message reports it."""
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return "int out of float range"
    return type(value).__name__


def validate(value: Any, expected_unit: Unit | str, param_name: str) -> float:
    """Check that ``value`` is a finite, non-negative number.

    Args:
        value: The raw parameter value.
        expected_unit: Unit the value is expressed in, used for messages only.
        param_name: Human-readable parameter name, e.g. ``"Fuel Burn Rate"``.

    Returns:
        The value as a float.

    Raises:
        InvalidInputError: If the value is not a real number, is NaN/infinite,
            or is too large to convert to a float.
        NegativeValueError: If the value is below zero.
    """
    unit = str(expected_unit)
    if not _is_finite_number(value):
        raise InvalidInputError(
            f"Invalid input for {param_name}. "
            f"Expected a number in {unit}, got {_describe(value)}.",
            param_name=param_name,
            expected_unit=unit,
            value=value,
        )
    if value < 0:
        raise NegativeValueError(
            f"{param_name} cannot be negative. Received {value} {unit}.",
            param_name=param_name,
            expected_unit=unit,
            value=value,
        )
    return float(value)


def check(
    value: Any, expected_unit: Unit | str, param_name: str
) -> ScenarioValidationError | None:
    """Non-raising form of :func:`validate`: return the error, or None if valid."""
    try:
        validate(value, expected_unit, param_name)
    except ScenarioValidationError as exc:
        return exc
    return None
