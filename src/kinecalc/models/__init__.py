"""kinecalc data models."""

from kinecalc.models.measurement import Measurement
from kinecalc.models.report import ScenarioReport
from kinecalc.models.scenario import ScenarioInput, ScenarioResult

__all__ = [
    "Measurement",
    "ScenarioInput",
    "ScenarioReport",
    "ScenarioResult",
]
