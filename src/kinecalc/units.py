"""Units of measurement and the conversions between them."""

from __future__ import annotations

from enum import Enum

METERS_PER_KILOMETER = 1000.0
SECONDS_PER_HOUR = 3600.0


class Unit(str, Enum):
    """Units attached to scenario measurements."""

    KILOMETERS_PER_HOUR = "km/h"
    METERS_PER_SECOND_SQUARED = "m/s^2"
    SECONDS = "seconds"
    KILOMETERS = "km"
    KILOGRAMS = "kg"
    KILOGRAMS_PER_SECOND = "kg/s"

    def __str__(self) -> str:
        return self.value


def kmh_to_mps(speed_kmh: float) -> float:
    """Convert a speed from km/h to m/s."""
    return speed_kmh * (METERS_PER_KILOMETER / SECONDS_PER_HOUR)


def mps_to_kmh(speed_mps: float) -> float:
    """Convert a speed from m/s to km/h."""
    return speed_mps * (SECONDS_PER_HOUR / METERS_PER_KILOMETER)


def seconds_to_hours(seconds: float) -> float:
    return seconds / SECONDS_PER_HOUR
