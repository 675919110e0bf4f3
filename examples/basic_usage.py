"""Basic usage examples for kinecalc."""

from kinecalc import ScenarioInput, ScenarioRunner, compute_new_velocity, run_scenario
from kinecalc.formatters import format_report


def main() -> None:
    # Reference scenario: every input at its default
    print("=== Reference scenario ===")
    result = run_scenario(ScenarioInput())
    print(f"  velocity: {result.new_velocity:.2f} km/h")
    print(f"  distance: {result.new_distance:.2f} km")
    print(f"  fuel:     {result.remaining_fuel_after_burn:.2f} kg")

    # A single velocity update
    print("\n=== 100 km/h, 2 m/s^2 for 10 s ===")
    print(f"  {compute_new_velocity(100, 2, 10):.2f} km/h")

    # Config keys as they appear in a JSON file, via the non-raising runner
    print("\n=== Heavy burn ===")
    runner = ScenarioRunner()
    report = runner.run({"fuelBurnRate": 2, "time": 3600})
    for line in format_report(report):
        print(f"  {line}")
    if report.result is not None and report.result.fuel_depleted:
        print("  (fuel exhausted before the end of the run)")

    print("\n=== Invalid input ===")
    report = runner.run({"acceleration": -3})
    for line in format_report(report):
        print(f"  {line}")


if __name__ == "__main__":
    main()
