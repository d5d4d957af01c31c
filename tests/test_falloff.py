"""Tests for the island falloff transform."""

import math

import numpy as np
import pytest

from realms.terrain import (
    FalloffParameters,
    NoiseMap,
    apply_falloff,
    build_noise_map,
    falloff_curve,
    falloff_map,
)


def _ring_and_center_means(grid):
    """Mean of the outermost ring and of the central ~10% of cells."""
    ring = np.concatenate([grid[0, :], grid[-1, :], grid[1:-1, 0], grid[1:-1, -1]])
    h, w = grid.shape
    kh = max(1, round(h * math.sqrt(0.1)))
    kw = max(1, round(w * math.sqrt(0.1)))
    top = (h - kh) // 2
    left = (w - kw) // 2
    center = grid[top:top + kh, left:left + kw]
    return float(ring.mean()), float(center.mean())


class TestFalloffCurve:
    """Tests for the falloff S-curve."""

    def test_endpoints(self):
        assert falloff_curve(0.0, 2.0, 6.0) == 0.0
        assert falloff_curve(1.0, 2.0, 6.0) == 1.0

    def test_known_value(self):
        """f(0.5) = 0.25 / (0.25 + 9) for a=2, b=6."""
        assert falloff_curve(0.5, 2.0, 6.0) == pytest.approx(0.25 / 9.25)

    def test_monotonic(self):
        d = np.linspace(0.0, 1.0, 101)
        values = falloff_curve(d, 3.0, 2.2)
        assert np.all(np.diff(values) >= 0.0)

    def test_out_of_range_distance_is_clipped(self):
        """Distances outside [0, 1] never produce NaN."""
        values = falloff_curve(np.array([-0.2, 1.0000001, 1.5]), 2.5, 6.0)

        assert not np.any(np.isnan(values))
        assert values[0] == 0.0
        assert values[1] == 1.0
        assert values[2] == 1.0


class TestFalloffMap:
    def test_shape_and_extremes(self):
        fall = falloff_map(10, 6, 2.0, 6.0)

        assert fall.shape == (6, 10)
        # x=5, y=3 sits exactly on the center
        assert fall[3, 5] == 0.0
        # x=0 and y=0 sit on the edge
        assert fall[0, 0] == 1.0
        assert fall[3, 0] == 1.0
        assert fall.min() >= 0.0
        assert fall.max() <= 1.0

    def test_square_contours(self):
        """Cells at the same Chebyshev distance get the same falloff."""
        fall = falloff_map(8, 8, 2.0, 6.0)
        # x=2,y=4 and x=4,y=2 are both at distance 0.5
        assert fall[4, 2] == fall[2, 4]
        assert fall[4, 2] == fall[2, 2]


class TestApplyFalloff:
    """Tests for applying falloff to a noise map."""

    def test_keeps_recorded_range(self, noise_params, falloff_params):
        noise_map = build_noise_map(4, 32, 32, noise_params)
        original_min, original_max = noise_map.min, noise_map.max

        apply_falloff(noise_map, falloff_params)

        assert noise_map.min == original_min
        assert noise_map.max == original_max

    def test_only_lowers_values(self, noise_params, falloff_params):
        noise_map = build_noise_map(4, 32, 32, noise_params)
        before = noise_map.values.copy()

        apply_falloff(noise_map, falloff_params)

        assert np.all(noise_map.values <= before)
        assert noise_map.values.min() < noise_map.min

    def test_subtracts_scaled_range(self):
        values = np.full(16, 0.5)
        noise_map = NoiseMap(values=values, width=4, height=4, min=0.0, max=2.0)

        apply_falloff(noise_map, FalloffParameters(a=2.0, b=6.0, multiplier=0.5))

        # (0, 0) is on the edge: falloff 1, loses 2.0 * 0.5 * 1
        assert noise_map.get(0, 0) == pytest.approx(-0.5)
        # (2, 2) is the center: falloff 0
        assert noise_map.get(2, 2) == pytest.approx(0.5)

    def test_zero_multiplier_is_noop(self, noise_params):
        noise_map = build_noise_map(4, 16, 16, noise_params)
        before = noise_map.values.copy()

        apply_falloff(noise_map, FalloffParameters(a=2.0, b=6.0, multiplier=0.0))

        assert np.array_equal(noise_map.values, before)

    def test_edges_lower_than_center_on_flat_field(self):
        noise_map = NoiseMap(values=np.full(400, 1.0), width=20, height=20, min=0.0, max=1.0)

        apply_falloff(noise_map, FalloffParameters(a=2.0, b=6.0, multiplier=0.7))

        ring, center = _ring_and_center_means(noise_map.as_array())
        assert ring < center

    @pytest.mark.parametrize("seed", [1, 2, 3, 42])
    def test_edges_lower_than_center_on_generated_field(self, seed, noise_params, falloff_params):
        """The outer ring ends up no higher than the central region."""
        noise_map = build_noise_map(seed, 64, 64, noise_params)

        apply_falloff(noise_map, falloff_params)

        ring, center = _ring_and_center_means(noise_map.as_array())
        assert ring <= center
