"""Text formatting for scenario reports."""

from __future__ import annotations

from kinecalc.constants import RESULT_DECIMALS
from kinecalc.models.report import ScenarioReport
from kinecalc.models.scenario import ScenarioResult
from kinecalc.units import Unit


def format_quantity(value: float, unit: Unit | str) -> str:
    """Format a value with exactly two decimals followed by its unit."""
    return f"{value:.{RESULT_DECIMALS}f} {unit}"


def format_result(result: ScenarioResult) -> list[str]:
    """Return the three result lines for a successful run."""
    return [
        f"Corrected New Velocity: {format_quantity(result.new_velocity, Unit.KILOMETERS_PER_HOUR)}",
        f"Corrected New Distance: {format_quantity(result.new_distance, Unit.KILOMETERS)}",
        f"Corrected Remaining Fuel: {format_quantity(result.remaining_fuel_after_burn, Unit.KILOGRAMS)}",
    ]


def format_error(error: Exception) -> str:
    return f"Error: {error}"


def format_report(report: ScenarioReport) -> list[str]:
    """Result lines on success, or the single error line on failure."""
    if report.error is not None:
        return [format_error(report.error)]
    return format_result(report.result)  # type: ignore[arg-type]
