"""Single scalar measurement with its unit."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from kinecalc.units import Unit
from kinecalc.validation import validate


class Measurement(BaseModel):
    """A finite, non-negative value tagged with its unit.

    The value is checked on construction, so an existing instance is always valid.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    unit: Unit
    value: float

    @model_validator(mode="before")
    @classmethod
    def _validate_value(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            data["value"] = validate(
                data.get("value"),
                data.get("unit", ""),
                data.get("name", "value"),
            )
        return data

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"
