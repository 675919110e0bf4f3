"""Scenario input and result models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from kinecalc.constants import (
    DEFAULT_ACCELERATION_MPS2,
    DEFAULT_FUEL_BURN_RATE_KGPS,
    DEFAULT_INITIAL_DISTANCE_KM,
    DEFAULT_REMAINING_FUEL_KG,
    DEFAULT_TIME_S,
    DEFAULT_VELOCITY_KMH,
    SCENARIO_PARAMETERS,
)
from kinecalc.exceptions import ConfigError
from kinecalc.models.measurement import Measurement
from kinecalc.validation import validate


class ScenarioInput(BaseModel):
    """The six inputs of one scenario.

    Fields can be given by Python name or by camelCase config key
    (``initialDistance``, ``remainingFuel``, ``fuelBurnRate``). Omitted fields
    fall back to the reference scenario.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    velocity: float = DEFAULT_VELOCITY_KMH
    acceleration: float = DEFAULT_ACCELERATION_MPS2
    time: float = DEFAULT_TIME_S
    initial_distance: float = DEFAULT_INITIAL_DISTANCE_KM
    remaining_fuel: float = DEFAULT_REMAINING_FUEL_KG
    fuel_burn_rate: float = DEFAULT_FUEL_BURN_RATE_KGPS

    @field_validator("*", mode="before")
    @classmethod
    def _validate_parameter(cls, value: Any, info: ValidationInfo) -> float:
        label, unit = SCENARIO_PARAMETERS[info.field_name]
        return validate(value, unit, label)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> ScenarioInput:
        """Build a scenario from a config mapping.

        Raises:
            InvalidInputError, NegativeValueError: If a value fails validation.
            ConfigError: If the mapping holds unrecognised keys.
        """
        try:
            return cls.model_validate(dict(config))
        except ValidationError as exc:
            raise ConfigError(f"Invalid scenario configuration: {exc}") from exc

    def measurements(self) -> list[Measurement]:
        """Return every input as a validated :class:`Measurement`, in validation order."""
        return [
            Measurement(name=label, unit=unit, value=getattr(self, field))
            for field, (label, unit) in SCENARIO_PARAMETERS.items()
        ]


class ScenarioResult(BaseModel):
    """Outputs of one scenario run."""

    model_config = ConfigDict(frozen=True)

    new_velocity: float
    new_distance: float
    remaining_fuel_after_burn: float

    @property
    def fuel_depleted(self) -> bool:
        """True if the burn used more fuel than was available."""
        return self.remaining_fuel_after_burn < 0
