"""Noise utilities for elevation generation using OpenSimplex."""

import logging
import time

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex

from realms.terrain.noisemap import NoiseMap
from realms.terrain.types import NoiseParameters

logger = logging.getLogger(__name__)

# The noise source is fixed; a world's seed only moves the sampling window.
NOISE_SOURCE_SEED = 0


class NoiseSource:
    """Deterministic 2D gradient noise with a fixed seed."""

    def __init__(self, seed: int = NOISE_SOURCE_SEED) -> None:
        self.seed = seed
        self._simplex = OpenSimplex(seed=seed)

    def sample(self, x: float, y: float) -> float:
        """Sample noise at the given coordinates. Returns value in [-1, 1]."""
        return self._simplex.noise2(x, y)

    def sample_grid(self, xs: NDArray[np.float64], ys: NDArray[np.float64]) -> NDArray[np.float64]:
        """Sample noise on the grid spanned by *xs* and *ys*.

        Returns:
            Array of shape ``(len(ys), len(xs))`` where ``[j, i]`` equals
            ``sample(xs[i], ys[j])``.
        """
        return self._simplex.noise2array(xs, ys)


_default_source: NoiseSource | None = None


def default_source() -> NoiseSource:
    """Process-wide noise source shared by every build."""
    global _default_source
    if _default_source is None:
        _default_source = NoiseSource()
    return _default_source


def octave_offsets(seed: int, octaves: int) -> NDArray[np.uint32]:
    """Draw the per-octave sampling offsets for *seed*.

    Uses numpy's PCG64 generator seeded with *seed* and draws ``2 * octaves``
    unsigned 32-bit values in one pass. Row ``i`` of the result is the
    ``(offset_x, offset_y)`` pair of octave ``i``.
    """
    rng = np.random.default_rng(seed)
    draws = rng.integers(0, 0xFFFFFFFF, size=octaves * 2, dtype=np.uint32, endpoint=True)
    return draws.reshape(octaves, 2)


def build_noise_map(
    seed: int,
    width: int,
    height: int,
    params: NoiseParameters,
    source: NoiseSource | None = None,
) -> NoiseMap:
    """Build a fractal (fBm) elevation field.

    Each cell sums ``params.octaves`` layers of noise. Octave ``i`` is sampled
    at ``frequency * (x - width / 2 + offset_x) / (scale * width)`` (and the
    same for y), weighted by ``amplitude``; amplitude then shrinks by
    ``persistence`` and frequency grows by ``lacunarity``. Coordinates are
    centered on the grid so the sampling window does not drift with its size.

    Args:
        seed: World seed feeding the offset generator
        width, height: Grid size in cells
        params: Noise parameters
        source: Noise source to sample, defaults to the shared fixed source

    Returns:
        NoiseMap with the raw values and their min/max
    """
    source = source or default_source()
    t_start = time.perf_counter()

    offsets = octave_offsets(seed, params.octaves)

    field = np.zeros((height, width), dtype=np.float64)
    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(height, dtype=np.float64)
    x_span = params.scale * width
    y_span = params.scale * height

    amplitude = 1.0
    frequency = 1.0
    for offset_x, offset_y in offsets:
        sample_xs = frequency * (xs - width / 2 + float(offset_x)) / x_span
        sample_ys = frequency * (ys - height / 2 + float(offset_y)) / y_span
        field += amplitude * source.sample_grid(sample_xs, sample_ys)
        amplitude *= params.persistence
        frequency *= params.lacunarity

    values = field.reshape(-1)
    noise_map = NoiseMap(
        values=values,
        width=width,
        height=height,
        min=float(values.min()),
        max=float(values.max()),
    )

    logger.debug(
        "Built %dx%d noise map (%d octaves) in %.1fms, range [%.4f, %.4f]",
        width, height, params.octaves,
        (time.perf_counter() - t_start) * 1000,
        noise_map.min, noise_map.max,
    )
    return noise_map
