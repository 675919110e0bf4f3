"""Shared constants for kinecalc."""

from __future__ import annotations

from kinecalc.units import Unit

# Reference scenario: 10000 km/h, 3 m/s^2 for one hour, 5000 kg of fuel at 0.5 kg/s.
DEFAULT_VELOCITY_KMH = 10000.0
DEFAULT_ACCELERATION_MPS2 = 3.0
DEFAULT_TIME_S = 3600.0
DEFAULT_INITIAL_DISTANCE_KM = 0.0
DEFAULT_REMAINING_FUEL_KG = 5000.0
DEFAULT_FUEL_BURN_RATE_KGPS = 0.5

# Field name -> (display label, unit), in validation order
SCENARIO_PARAMETERS: dict[str, tuple[str, Unit]] = {
    "velocity": ("Velocity", Unit.KILOMETERS_PER_HOUR),
    "acceleration": ("Acceleration", Unit.METERS_PER_SECOND_SQUARED),
    "time": ("Time", Unit.SECONDS),
    "initial_distance": ("Initial Distance", Unit.KILOMETERS),
    "remaining_fuel": ("Remaining Fuel", Unit.KILOGRAMS),
    "fuel_burn_rate": ("Fuel Burn Rate", Unit.KILOGRAMS_PER_SECOND),
}

RESULT_DECIMALS = 2
