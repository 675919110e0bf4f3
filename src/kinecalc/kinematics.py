"""Closed-form kinematics and fuel arithmetic for a single scenario step."""

from __future__ import annotations

import logging

from kinecalc.call_logging import log_calculation
from kinecalc.units import Unit, kmh_to_mps, mps_to_kmh, seconds_to_hours
from kinecalc.validation import validate

logger = logging.getLogger(__name__)


@log_calculation
def compute_new_velocity(vel_kmh: float, acc_mps2: float, time_s: float) -> float:
    """Apply constant acceleration to a velocity given in km/h.

    The velocity is converted to m/s before adding ``acc * t`` and converted
    back afterwards; mixing km/h with m/s^2 directly is off by a factor of 3.6.

    Args:
        vel_kmh: Initial velocity (km/h).
        acc_mps2: Constant acceleration (m/s^2).
        time_s: Duration (s).

    Returns:
        New velocity (km/h).

    Raises:
        InvalidInputError: If an input is not a finite number.
        NegativeValueError: If an input is negative.
    """
    vel_kmh = validate(vel_kmh, Unit.KILOMETERS_PER_HOUR, "Velocity")
    acc_mps2 = validate(acc_mps2, Unit.METERS_PER_SECOND_SQUARED, "Acceleration")
    time_s = validate(time_s, Unit.SECONDS, "Time")

    vel_mps = kmh_to_mps(vel_kmh)
    new_vel_mps = vel_mps + acc_mps2 * time_s
    return mps_to_kmh(new_vel_mps)


@log_calculation
def compute_new_distance(initial_distance_km: float, vel_kmh: float, time_s: float) -> float:
    """Distance (km) after travelling at ``vel_kmh`` for ``time_s`` seconds."""
    initial_distance_km = validate(initial_distance_km, Unit.KILOMETERS, "Initial Distance")
    vel_kmh = validate(vel_kmh, Unit.KILOMETERS_PER_HOUR, "Velocity")
    time_s = validate(time_s, Unit.SECONDS, "Time")
    return initial_distance_km + vel_kmh * seconds_to_hours(time_s)


@log_calculation
def compute_remaining_fuel(remaining_fuel_kg: float, burn_rate_kgps: float, time_s: float) -> float:
    """Fuel mass (kg) left after burning at a constant rate.

    A negative result is returned as-is: it is the fuel deficit.
    """
    remaining_fuel_kg = validate(remaining_fuel_kg, Unit.KILOGRAMS, "Remaining Fuel")
    burn_rate_kgps = validate(burn_rate_kgps, Unit.KILOGRAMS_PER_SECOND, "Fuel Burn Rate")
    time_s = validate(time_s, Unit.SECONDS, "Time")
    remaining = remaining_fuel_kg - burn_rate_kgps * time_s
    if remaining < 0:
        logger.warning(
            "Fuel exhausted: burning %s kg/s for %s s needs %.2f kg more than the %s kg available",
            burn_rate_kgps, time_s, -remaining, remaining_fuel_kg,
        )
    return remaining
