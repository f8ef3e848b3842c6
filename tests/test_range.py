"""Tests for torque sample generation."""

import types

from calculations.calcs_range import generate_torque_range


def test_inclusive_end():
    assert list(generate_torque_range(0, 1000, 250)) == [0, 250, 500, 750, 1000]


def test_stops_before_end_when_step_does_not_divide():
    assert list(generate_torque_range(0, 10, 3)) == [0, 3, 6, 9]


def test_negative_start():
    assert list(generate_torque_range(-10, 10, 5)) == [-10, -5, 0, 5, 10]


def test_large_range():
    values = list(generate_torque_range(0, 80000, 10000))
    assert values[0] == 0
    assert values[-1] == 80000
    assert len(values) == 9


def test_fractional_step_does_not_drift():
    values = list(generate_torque_range(0, 1, 0.1))
    assert len(values) == 11
    assert values[-1] == 1.0


def test_end_below_start_is_empty():
    assert list(generate_torque_range(10, 0, 1)) == []


def test_lazy_and_restartable():
    gen = generate_torque_range(0, 1e12, 1)
    assert isinstance(gen, types.GeneratorType)
    assert next(gen) == 0
    assert next(gen) == 1

    assert list(generate_torque_range(0, 2, 1)) == list(generate_torque_range(0, 2, 1))
