"""kinecalc — Unit-checked velocity, distance and fuel calculator."""

from kinecalc.exceptions import (
    ConfigError,
    InvalidInputError,
    KinecalcError,
    NegativeValueError,
    ScenarioValidationError,
)
from kinecalc.kinematics import (
    compute_new_distance,
    compute_new_velocity,
    compute_remaining_fuel,
)
from kinecalc.models import Measurement, ScenarioInput, ScenarioReport, ScenarioResult
from kinecalc.runner import ScenarioRunner, run_scenario
from kinecalc.units import Unit
from kinecalc.validation import check, validate

__all__ = [
    "ConfigError",
    "InvalidInputError",
    "KinecalcError",
    "Measurement",
    "NegativeValueError",
    "ScenarioInput",
    "ScenarioReport",
    "ScenarioResult",
    "ScenarioRunner",
    "ScenarioValidationError",
    "Unit",
    "check",
    "compute_new_distance",
    "compute_new_velocity",
    "compute_remaining_fuel",
    "run_scenario",
    "validate",
]

__version__ = "0.1.0"
