"""Island falloff: lowers elevation towards the edges of the map.

The distance used is Chebyshev-style, ``max(|u|, |v|)`` with ``u`` and ``v``
running from -1 at one edge to +1 at the other, which gives square
contours rather than circular ones. The distance is fed through

    f(d) = d^a / (d^a + (b - b*d)^a)

an S-curve that is 0 at the center and reaches 1 at the edge. ``a`` sets the
steepness and ``b`` pushes the midpoint outwards.
"""

import logging

import numpy as np
from numpy.typing import NDArray

from realms.terrain.noisemap import NoiseMap
from realms.terrain.types import FalloffParameters

logger = logging.getLogger(__name__)


def falloff_curve(d: NDArray[np.float64] | float, a: float, b: float) -> NDArray[np.float64]:
    """Evaluate the falloff S-curve.

    ``d`` is clipped to [0, 1] so the base ``b - b*d`` never goes negative.
    With ``b > 0`` the denominator is always positive.
    """
    d = np.clip(np.asarray(d, dtype=np.float64), 0.0, 1.0)
    near = np.power(d, a)
    far = np.power(np.maximum(b - b * d, 0.0), a)
    return near / (near + far)


def falloff_map(width: int, height: int, a: float, b: float) -> NDArray[np.float64]:
    """Falloff value for every cell, shape ``(height, width)``."""
    u = np.abs(np.arange(width, dtype=np.float64) / width * 2.0 - 1.0)
    v = np.abs(np.arange(height, dtype=np.float64) / height * 2.0 - 1.0)
    distance = np.maximum(u[np.newaxis, :], v[:, np.newaxis])
    return falloff_curve(distance, a, b)


def apply_falloff(noise_map: NoiseMap, params: FalloffParameters) -> NoiseMap:
    """Subtract the falloff from *noise_map* in place.

    Each cell loses ``(max - min) * multiplier * f(d)``. The recorded min/max
    are left untouched so normalization keeps the raw field as reference.

    Returns:
        The same map, for chaining
    """
    fall = falloff_map(noise_map.width, noise_map.height, params.a, params.b)
    span = noise_map.max - noise_map.min
    noise_map.values -= (span * params.multiplier * fall).reshape(-1)

    logger.debug(
        "Applied falloff a=%.2f b=%.2f multiplier=%.2f to %dx%d map",
        params.a, params.b, params.multiplier, noise_map.width, noise_map.height,
    )
    return noise_map
