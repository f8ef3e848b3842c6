"""Pytest configuration and shared fixtures."""

import pytest

from analyzer import PipeSelection


@pytest.fixture
def pipe_4in():
    """4" OD, 0.213" wall, 35 ksi pipe body."""
    return {"od": 4.0, "wt": 0.213, "yield_psi": 35000}


@pytest.fixture
def selection_5in():
    """5" 19.50 lb/ft G-105 drill pipe with 20% safety factor."""
    return PipeSelection(
        pipe_size='5"',
        nominal_weight=19.50,
        grade="G-105",
        safety_factor_percent=20,
        step=5000,
        max_torque=80000,
    )
