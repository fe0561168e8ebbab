"""Pytest configuration and fixtures for ecosim tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def registry():
    """Provide a registry holding the baseline food web."""
    from ecosim.foodweb.trophic import TrophicRegistry

    return TrophicRegistry.with_defaults()


@pytest.fixture
def context(seeded_rng):
    """Provide a fresh simulation context with a seeded RNG."""
    from ecosim.context import SimulationContext

    return SimulationContext(seeded_rng)
