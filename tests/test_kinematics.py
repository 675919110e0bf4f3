"""Tests for the velocity, distance and fuel calculations."""

from __future__ import annotations

import math

import pytest

from kinecalc.exceptions import InvalidInputError, NegativeValueError
from kinecalc.kinematics import (
    compute_new_distance,
    compute_new_velocity,
    compute_remaining_fuel,
)


class TestComputeNewVelocity:
    def test_reference_scenario(self) -> None:
        # 10000 km/h + 3 m/s^2 * 3600 s * 3.6
        assert compute_new_velocity(10000, 3, 3600) == pytest.approx(48880.0)

    def test_units_are_converted(self) -> None:
        # Adding acc * t straight onto km/h would give 10000 + 10800
        assert compute_new_velocity(10000, 3, 3600) != pytest.approx(20800.0)

    def test_small_values(self) -> None:
        # 100 km/h + 2 m/s^2 * 10 s = 100 + 72 km/h
        assert compute_new_velocity(100, 2, 10) == pytest.approx(172.0)

    @pytest.mark.parametrize("velocity", [0.0, 1.0, 99.9, 10000.0, 3.0e8])
    def test_zero_acceleration_keeps_velocity(self, velocity: float) -> None:
        assert compute_new_velocity(velocity, 0, 3600) == pytest.approx(velocity, rel=1e-9)

    def test_zero_time_keeps_velocity(self) -> None:
        assert compute_new_velocity(250, 9.81, 0) == pytest.approx(250.0)

    @pytest.mark.parametrize(
        ("vel", "acc", "time"),
        [(0, 0, 0), (1e-9, 1e-9, 1e-9), (1e12, 1e3, 1e6)],
    )
    def test_result_is_finite(self, vel: float, acc: float, time: float) -> None:
        assert math.isfinite(compute_new_velocity(vel, acc, time))

    @pytest.mark.parametrize(
        ("args", "param"),
        [((-1, 3, 3600), "Velocity"), ((1, -3, 3600), "Acceleration"), ((1, 3, -1), "Time")],
    )
    def test_negative_input(self, args: tuple, param: str) -> None:
        with pytest.raises(NegativeValueError) as exc_info:
            compute_new_velocity(*args)
        assert exc_info.value.param_name == param

    def test_non_numeric_input(self) -> None:
        with pytest.raises(InvalidInputError, match="Expected a number in m/s\\^2, got str"):
            compute_new_velocity(10, "3", 60)


class TestComputeNewDistance:
    def test_reference_scenario(self) -> None:
        assert compute_new_distance(0, 10000, 3600) == pytest.approx(10000.0)

    def test_time_converted_to_hours(self) -> None:
        assert compute_new_distance(5, 120, 1800) == pytest.approx(65.0)

    @pytest.mark.parametrize(
        ("args", "param"),
        [((-5, 10, 10), "Initial Distance"), ((5, -10, 10), "Velocity"), ((5, 10, -10), "Time")],
    )
    def test_negative_input(self, args: tuple, param: str) -> None:
        with pytest.raises(NegativeValueError) as exc_info:
            compute_new_distance(*args)
        assert exc_info.value.param_name == param

    def test_non_numeric_input(self) -> None:
        with pytest.raises(InvalidInputError, match="Invalid input for Initial Distance"):
            compute_new_distance(None, 10, 10)


class TestComputeRemainingFuel:
    def test_reference_scenario(self) -> None:
        assert compute_remaining_fuel(5000, 0.5, 3600) == pytest.approx(3200.0)

    def test_deficit_is_accepted(self) -> None:
        assert compute_remaining_fuel(5000, 2, 3600) == pytest.approx(-2200.0)

    @pytest.mark.parametrize(
        ("args", "param"),
        [((-1, 0.5, 60), "Remaining Fuel"), ((100, -0.5, 60), "Fuel Burn Rate"), ((100, 0.5, -60), "Time")],
    )
    def test_negative_input(self, args: tuple, param: str) -> None:
        with pytest.raises(NegativeValueError) as exc_info:
            compute_remaining_fuel(*args)
        assert exc_info.value.param_name == param

    def test_nan_input(self) -> None:
        with pytest.raises(InvalidInputError, match="Fuel Burn Rate.*got nan"):
            compute_remaining_fuel(100, float("nan"), 60)
