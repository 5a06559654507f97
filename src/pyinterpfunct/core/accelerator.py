import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


class IntervalAccelerator:
    """
    Caches the interval found by the previous lookup.

    Callers usually sweep the argument monotonically, so the next lookup tends to
    land in the same interval or in its right neighbour. Only the lookup cost
    depends on the cache; the returned index is always the correct one.
    Instances are not thread-safe.
    """

    def __init__(self) -> None:
        self._cached_index: Optional[int] = None
        self.cache_hits = 0
        self.cache_misses = 0

    def reset(self) -> None:
        """Forget the cached interval and the hit statistics."""
        self._cached_index = None
        self.cache_hits = 0
        self.cache_misses = 0

    def find(self, knots: np.ndarray, x: float) -> int:
        """
        Return the index i of the interval with knots[i] <= x < knots[i+1].
        Args:
            knots: Strictly ascending knot arguments (at least two)
            x: Argument inside [knots[0], knots[-1]]
        Returns:
            Interval index in [0, len(knots) - 2]; x == knots[-1] maps to the last interval
        """
        last = len(knots) - 2
        i = self._cached_index
        if i is not None:
            if knots[i] <= x < knots[i + 1] or (i == last and x == knots[-1]):
                self.cache_hits += 1
                return i
            j = i + 1
            if j <= last and knots[j] <= x and (x < knots[j + 1] or j == last):
                self.cache_hits += 1
                self._cached_index = j
                return j
        self.cache_misses += 1
        i = int(np.searchsorted(knots, x, side='right')) - 1
        i = min(max(i, 0), last)
        self._cached_index = i
        return i
