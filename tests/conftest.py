"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator with default settings."""
    from scicalc import Calculator

    return Calculator()


@pytest.fixture
def degrees_calculator():
    """Provide a Calculator working in degrees."""
    from scicalc import Calculator

    return Calculator(angle_unit="degrees")


@pytest.fixture
def invalid_numbers():
    """Values every operation must reject as invalid input."""
    return [
        float("nan"),
        float("inf"),
        float("-inf"),
        "42",
        None,
        True,
        [1],
        10**400,
    ]
