"""Tagged success/failure outcome of a scenario run."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from kinecalc.exceptions import ScenarioValidationError
from kinecalc.models.scenario import ScenarioResult


class ScenarioReport(BaseModel):
    """Either a result or the first validation error, never both."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    result: ScenarioResult | None = None
    error: ScenarioValidationError | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> ScenarioReport:
        if (self.result is None) == (self.error is None):
            raise ValueError("ScenarioReport needs exactly one of result or error")
        return self

    @classmethod
    def success(cls, result: ScenarioResult) -> ScenarioReport:
        return cls(result=result)

    @classmethod
    def failure(cls, error: ScenarioValidationError) -> ScenarioReport:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
