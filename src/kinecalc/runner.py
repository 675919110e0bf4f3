"""Top-level orchestration of a scenario run."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kinecalc.call_logging import log_calculation
from kinecalc.exceptions import ScenarioValidationError
from kinecalc.kinematics import (
    compute_new_distance,
    compute_new_velocity,
    compute_remaining_fuel,
)
from kinecalc.models.report import ScenarioReport
from kinecalc.models.scenario import ScenarioInput, ScenarioResult


@log_calculation
def run_scenario(scenario: ScenarioInput) -> ScenarioResult:
    """Validate every input of ``scenario`` and compute its results.

    Raises:
        ScenarioValidationError: On the first invalid input. No result is produced.
    """
    # Re-checks instances built with model_construct()
    scenario.measurements()

    new_distance = compute_new_distance(
        scenario.initial_distance, scenario.velocity, scenario.time
    )
    remaining_fuel = compute_remaining_fuel(
        scenario.remaining_fuel, scenario.fuel_burn_rate, scenario.time
    )
    new_velocity = compute_new_velocity(
        scenario.velocity, scenario.acceleration, scenario.time
    )
    return ScenarioResult(
        new_velocity=new_velocity,
        new_distance=new_distance,
        remaining_fuel_after_burn=remaining_fuel,
    )


class ScenarioRunner:
    """Runs scenarios and reports the outcome instead of raising.

    Usage:
        report = ScenarioRunner().run({"velocity": 120, "time": 60})
        if report.ok:
            print(report.result.new_velocity)
    """

    def run(self, scenario: ScenarioInput | Mapping[str, Any] | None = None) -> ScenarioReport:
        """Run one scenario; a validation failure becomes a failed report.

        Raises:
            ConfigError: If a mapping holds unrecognised keys.
        """
        try:
            if scenario is None:
                scenario = ScenarioInput()
            elif not isinstance(scenario, ScenarioInput):
                scenario = ScenarioInput.from_config(scenario)
            result = run_scenario(scenario)
        except ScenarioValidationError as exc:
            return ScenarioReport.failure(exc)
        return ScenarioReport.success(result)
