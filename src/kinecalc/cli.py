"""Command line entry point.

Usage:
    kinecalc
    kinecalc --velocity 120 --acceleration 2 --time 30
    kinecalc --config scenario.json --fuel-burn-rate 1.5

Prints the three corrected results, or a single ``Error:`` line.
"""

from __future__ import annotations

import argparse
import sys

from kinecalc.config import build_config, get_settings
from kinecalc.exceptions import ConfigError
from kinecalc.formatters import format_error, format_report
from kinecalc.runner import ScenarioRunner

EXIT_OK = 0
EXIT_VALIDATION_FAILED = 1
EXIT_CONFIG_ERROR = 2


def _number(text: str) -> float | str:
    """Parse a numeric flag, leaving unparseable text for scenario validation."""
    try:
        return float(text)
    except ValueError:
        return text


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kinecalc",
        description="Compute new velocity, distance and remaining fuel for one scenario",
    )
    parser.add_argument("--config", type=str, default=None, help="JSON scenario config file")
    parser.add_argument("--velocity", type=_number, default=None, help="Velocity (km/h)")
    parser.add_argument("--acceleration", type=_number, default=None, help="Acceleration (m/s^2)")
    parser.add_argument("--time", type=_number, default=None, help="Time (s)")
    parser.add_argument(
        "--initial-distance", dest="initial_distance", type=_number, default=None,
        help="Initial distance (km)",
    )
    parser.add_argument(
        "--remaining-fuel", dest="remaining_fuel", type=_number, default=None,
        help="Remaining fuel (kg)",
    )
    parser.add_argument(
        "--fuel-burn-rate", dest="fuel_burn_rate", type=_number, default=None,
        help="Fuel burn rate (kg/s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the scenario described by the command line.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 1 = invalid input, 2 = bad configuration).
    """
    args = _build_parser().parse_args(argv)
    overrides = {
        "velocity": args.velocity,
        "acceleration": args.acceleration,
        "time": args.time,
        "initial_distance": args.initial_distance,
        "remaining_fuel": args.remaining_fuel,
        "fuel_burn_rate": args.fuel_burn_rate,
    }

    try:
        get_settings()
        config = build_config(args.config, overrides)
        report = ScenarioRunner().run(config)
    except ConfigError as exc:
        print(format_error(exc), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    lines = format_report(report)
    if not report.ok:
        print(lines[0], file=sys.stderr)
        return EXIT_VALIDATION_FAILED
    for line in lines:
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
