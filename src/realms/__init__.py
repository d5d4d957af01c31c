"""Deterministic island heightmap generation."""

from realms.terrain import FalloffParameters, NoiseMap, NoiseParameters, World, WorldParameters

__version__ = "0.1.0"
__all__ = ["FalloffParameters", "NoiseMap", "NoiseParameters", "World", "WorldParameters"]
