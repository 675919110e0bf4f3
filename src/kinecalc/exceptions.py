"""Custom exceptions for the kinecalc calculator."""

from __future__ import annotations

from typing import Any


class KinecalcError(Exception):
    """Base exception for all kinecalc errors."""


class ScenarioValidationError(KinecalcError):
    """Raised when a scenario parameter fails validation.

    Not a ``ValueError`` subclass, so pydantic validators let it through unchanged.
    """

    def __init__(
        self,
        message: str,
        *,
        param_name: str,
        expected_unit: str,
        value: Any,
    ) -> None:
        self.param_name = param_name
        self.expected_unit = expected_unit
        self.value = value
        self.actual_type = type(value).__name__
        self.message = message
        super().__init__(message)


class InvalidInputError(ScenarioValidationError):
    """Raised when a parameter is not a finite number."""


class NegativeValueError(ScenarioValidationError):
    """Raised when a parameter is a number below zero."""


class ConfigError(KinecalcError):
    """Raised when scenario configuration cannot be loaded."""
