"""World: a seed and a parameter set bound to a generated elevation field."""

import logging
import time

import numpy as np

from realms.terrain.falloff import apply_falloff
from realms.terrain.noise import build_noise_map
from realms.terrain.noisemap import NoiseMap
from realms.terrain.types import (
    WorldParameters,
    validate_seed,
    validate_world_parameters,
)

logger = logging.getLogger(__name__)


def random_seed() -> int:
    """Fresh 64-bit seed from the operating system's entropy."""
    return int(np.random.default_rng().integers(0, 2**64 - 1, dtype=np.uint64, endpoint=True))


def generate_elevation(seed: int, parameters: WorldParameters) -> NoiseMap:
    """Build the elevation field for *seed*, with falloff when configured."""
    elevation = build_noise_map(
        seed,
        parameters.width,
        parameters.height,
        parameters.elevation_parameters,
    )
    if parameters.falloff is not None:
        apply_falloff(elevation, parameters.falloff)
    return elevation


class World:
    """Owns the elevation field generated from ``seed`` and ``parameters``.

    Regeneration always rebuilds from scratch and swaps in a new
    :class:`NoiseMap`; readers holding the old map keep a complete, untouched
    field.
    """

    def __init__(self, seed: int, parameters: WorldParameters) -> None:
        validate_world_parameters(parameters)
        self.seed = validate_seed(seed)
        self.parameters = parameters
        self.elevation = self._generate()

    def _generate(self) -> NoiseMap:
        t_start = time.perf_counter()
        elevation = generate_elevation(self.seed, self.parameters)
        logger.info(
            "Generated %dx%d world seed=%d in %.1fms (range [%.4f, %.4f])",
            self.parameters.width, self.parameters.height, self.seed,
            (time.perf_counter() - t_start) * 1000,
            elevation.min, elevation.max,
        )
        return elevation

    def generate(self, seed: int | None = None) -> None:
        """Regenerate with a new seed (a random one when omitted)."""
        self.seed = validate_seed(random_seed() if seed is None else seed)
        self.elevation = self._generate()

    def update_parameters(self, parameters: WorldParameters) -> None:
        """Swap in new parameters and regenerate with the current seed."""
        validate_world_parameters(parameters)
        self.parameters = parameters
        self.elevation = self._generate()

    def is_land(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) is at or above sea level."""
        return self.elevation.get(x, y) >= self.parameters.sea_level

    def land_fraction(self) -> float:
        """Share of cells at or above sea level."""
        return float(np.mean(self.elevation.values >= self.parameters.sea_level))

    def __repr__(self) -> str:
        return (
            f"World(seed={self.seed}, size={self.parameters.width}x{self.parameters.height}, "
            f"range=[{self.elevation.min:.4f}, {self.elevation.max:.4f}])"
        )
