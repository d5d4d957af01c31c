"""Elevation generation: fractal noise, island falloff and the World aggregate."""

from realms.terrain.adjust import ParameterField, adjust, describe
from realms.terrain.falloff import apply_falloff, falloff_curve, falloff_map
from realms.terrain.noise import NoiseSource, build_noise_map, octave_offsets
from realms.terrain.noisemap import FLAT_SENTINEL, NoiseMap, inverse_lerp, lerp
from realms.terrain.types import (
    FalloffParameters,
    InvalidParametersError,
    NoiseParameters,
    WorldParameters,
)
from realms.terrain.world import World, generate_elevation, random_seed

__all__ = [
    "FLAT_SENTINEL",
    "FalloffParameters",
    "InvalidParametersError",
    "NoiseMap",
    "NoiseParameters",
    "NoiseSource",
    "ParameterField",
    "World",
    "WorldParameters",
    "adjust",
    "apply_falloff",
    "build_noise_map",
    "describe",
    "falloff_curve",
    "falloff_map",
    "generate_elevation",
    "inverse_lerp",
    "lerp",
    "octave_offsets",
    "random_seed",
]
