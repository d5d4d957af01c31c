"""Elevation field container and its normalization accessors."""

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# Returned by normalize() when the field has no range to normalize against.
FLAT_SENTINEL = 0.5


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between *a* and *b*."""
    return a + (b - a) * t


def inverse_lerp(low: float, high: float, value: float) -> float:
    """Position of *value* between *low* and *high* (0 at low, 1 at high)."""
    return (value - low) / (high - low)


@dataclass
class NoiseMap:
    """A width x height elevation field stored row-major.

    ``min`` and ``max`` are the extremes of the raw field as it was built.
    They stay fixed when a falloff pass later lowers individual cells, so
    they remain the normalization reference for the whole lifetime of the
    map.
    """

    values: NDArray[np.float64]
    width: int
    height: int
    min: float
    max: float
    _flat_warned: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.values.shape != (self.width * self.height,):
            raise ValueError(
                f"expected {self.width * self.height} values, got shape {self.values.shape}"
            )

    @property
    def is_flat(self) -> bool:
        """True when min == max and normalization is undefined."""
        return self.max == self.min

    def index(self, x: int, y: int) -> int:
        """Flat position of (x, y) in ``values``."""
        return y * self.width + x

    def get(self, x: int, y: int) -> float:
        """Raw elevation at (x, y). Caller guarantees the point is in bounds."""
        return float(self.values[self.index(x, y)])

    def normalize(self, value: float) -> float:
        """Map a raw value into [0, 1] against the recorded min/max.

        Values lowered by falloff can land below 0. A flat field returns
        :data:`FLAT_SENTINEL`.
        """
        if self.is_flat:
            if not self._flat_warned:
                logger.warning(
                    "Normalizing a flat %dx%d field (min == max == %s)",
                    self.width, self.height, self.min,
                )
                self._flat_warned = True
            return FLAT_SENTINEL
        return inverse_lerp(self.min, self.max, value)

    def get_normalized(self, x: int, y: int) -> float:
        """Normalized elevation at (x, y), see :meth:`normalize`."""
        return self.normalize(self.get(x, y))

    def as_array(self) -> NDArray[np.float64]:
        """Read-only (height, width) view of the field."""
        view = self.values.reshape(self.height, self.width).view()
        view.flags.writeable = False
        return view
