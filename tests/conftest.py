"""Pytest configuration and fixtures for elevation tests."""

import pytest

from realms.terrain import FalloffParameters, NoiseParameters, WorldParameters


@pytest.fixture
def noise_params():
    """Small, fast noise parameters."""
    return NoiseParameters(scale=1.0, octaves=4, persistence=0.5, lacunarity=2.0)


@pytest.fixture
def falloff_params():
    """Falloff strong enough to sink every edge cell."""
    return FalloffParameters(a=2.0, b=6.0, multiplier=1.0)


@pytest.fixture
def world_params(noise_params, falloff_params):
    """A 32x32 island world."""
    return WorldParameters(
        width=32,
        height=32,
        elevation_parameters=noise_params,
        falloff=falloff_params,
        sea_level=0.0,
    )
