"""Unit tests for the interval accelerator."""

import numpy as np

from pyinterpfunct.core.accelerator import IntervalAccelerator


class TestIntervalAccelerator:
    """Test cases for cached interval lookup."""

    knots = np.array([0.0, 1.0, 2.0, 4.0, 8.0])

    def test_find_matches_binary_search(self):
        accelerator = IntervalAccelerator()
        rng = np.random.default_rng(13579)
        for x in rng.uniform(0.0, 8.0, 200):
            i = accelerator.find(self.knots, x)
            assert self.knots[i] <= x < self.knots[i + 1]

    def test_knots_map_to_their_own_interval(self):
        accelerator = IntervalAccelerator()
        assert accelerator.find(self.knots, 0.0) == 0
        assert accelerator.find(self.knots, 1.0) == 1
        assert accelerator.find(self.knots, 4.0) == 3

    def test_last_knot_maps_to_last_interval(self):
        accelerator = IntervalAccelerator()
        assert accelerator.find(self.knots, 8.0) == 3
        assert accelerator.find(self.knots, 8.0) == 3

    def test_monotonic_sweep_mostly_hits_cache(self):
        accelerator = IntervalAccelerator()
        for x in np.linspace(0.0, 8.0, 100):
            accelerator.find(self.knots, x)
        assert accelerator.cache_misses == 1
        assert accelerator.cache_hits == 99

    def test_jump_falls_back_to_search(self):
        accelerator = IntervalAccelerator()
        assert accelerator.find(self.knots, 0.5) == 0
        assert accelerator.find(self.knots, 7.0) == 3
        assert accelerator.find(self.knots, 0.5) == 0
        assert accelerator.cache_misses == 3

    def test_reset_clears_cache(self):
        accelerator = IntervalAccelerator()
        accelerator.find(self.knots, 0.5)
        accelerator.find(self.knots, 0.6)
        accelerator.reset()
        assert accelerator.cache_hits == 0
        assert accelerator.cache_misses == 0
        accelerator.find(self.knots, 0.6)
        assert accelerator.cache_misses == 1
