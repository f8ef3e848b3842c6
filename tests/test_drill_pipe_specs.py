"""Tests for the drill pipe reference tables."""

import pytest

from reference_data import drill_pipe_specs


def test_sizes():
    assert list(drill_pipe_specs.PIPE_SPECS) == ['4"', '5"', '5 7/8"']


def test_every_weight_leaves_a_bore():
    for spec in drill_pipe_specs.PIPE_SPECS.values():
        for w in spec["weights"]:
            assert spec["od"] > 2 * w["wall"]


def test_heavier_weight_means_thicker_wall():
    for spec in drill_pipe_specs.PIPE_SPECS.values():
        walls = [w["wall"] for w in spec["weights"]]
        assert walls == sorted(walls)


def test_get_pipe_spec():
    assert drill_pipe_specs.get_pipe_spec('5"')["od"] == 5.0
    assert drill_pipe_specs.get_pipe_spec('7"') is None


def test_get_nominal_weights():
    assert drill_pipe_specs.get_nominal_weights('4"') == [11.85, 14.00, 15.70]
    assert drill_pipe_specs.get_nominal_weights('7"') is None


@pytest.mark.parametrize("size,weight,wall", [
    ('4"', 14.0, 0.330),
    ('5"', 19.5, 0.362),
    ('5 7/8"', 23.40, 0.361),
])
def test_get_wall_for_weight(size, weight, wall):
    assert drill_pipe_specs.get_wall_for_weight(size, weight) == wall


def test_get_wall_for_unknown_weight():
    assert drill_pipe_specs.get_wall_for_weight('5"', 21.0) is None
    assert drill_pipe_specs.get_wall_for_weight('7"', 19.5) is None


def test_get_yield_strength():
    assert drill_pipe_specs.get_yield_strength("E-75") == 75000
    assert drill_pipe_specs.get_yield_strength("S-135") == 135000
    assert drill_pipe_specs.get_yield_strength("X-52") is None
