"""Tests for the tension-torque capacity curve."""

import math

import pytest

from calculations.calcs_curve import (
    DEFAULT_MAX_TORQUE,
    DEFAULT_TORQUE_STEP,
    CapacityPoint,
    calculate_tension_curve,
)
from calculations.calcs_geometry import area, inside_diameter


def test_generates_points(pipe_4in):
    results = calculate_tension_curve(pipe_4in["od"], pipe_4in["wt"], pipe_4in["yield_psi"], 1000, 5000)

    assert len(results) > 0
    for point in results:
        assert isinstance(point, CapacityPoint)
        assert point.max_tension > 0


def test_starts_at_zero_torque_with_pure_axial_capacity(pipe_4in):
    results = calculate_tension_curve(pipe_4in["od"], pipe_4in["wt"], pipe_4in["yield_psi"], 1000, 5000)

    first = results[0]
    expected = area(pipe_4in["od"], inside_diameter(pipe_4in["od"], pipe_4in["wt"])) * pipe_4in["yield_psi"]
    assert first.torque == 0
    assert first.max_tension == pytest.approx(expected)


def test_tension_non_increasing(pipe_4in):
    results = calculate_tension_curve(pipe_4in["od"], pipe_4in["wt"], pipe_4in["yield_psi"], 1000, 5000)
    for prev, cur in zip(results, results[1:]):
        assert cur.torque > prev.torque
        assert cur.max_tension <= prev.max_tension


@pytest.mark.parametrize("step,max_torque", [(1000, 5000), (500, 5000)])
def test_point_count_when_all_feasible(pipe_4in, step, max_torque):
    results = calculate_tension_curve(pipe_4in["od"], pipe_4in["wt"], pipe_4in["yield_psi"], step, max_torque)

    assert len(results) == math.trunc(max_torque / step) + 1
    assert results[-1].torque <= max_torque


def test_infeasible_torques_are_dropped(pipe_4in):
    # torsion alone yields this section between 7000 and 8000 ft-lb
    results = calculate_tension_curve(pipe_4in["od"], pipe_4in["wt"], pipe_4in["yield_psi"], 1000, 10000)

    assert len(results) == 8
    assert results[-1].torque == 7000


def test_larger_pipe_has_higher_capacity():
    results1 = calculate_tension_curve(4, 0.213, 35000, 1000, 5000)
    results2 = calculate_tension_curve(5, 0.213, 35000, 1000, 5000)

    assert results2[0].max_tension > results1[0].max_tension


def test_defaults():
    assert DEFAULT_TORQUE_STEP == 500
    assert DEFAULT_MAX_TORQUE == 80000

    results = calculate_tension_curve(5.875, 0.415, 135000)
    assert len(results) == 161
    assert results[-1].torque == 80000


def test_empty_when_max_torque_negative():
    assert calculate_tension_curve(4, 0.213, 35000, 500, -1) == []
