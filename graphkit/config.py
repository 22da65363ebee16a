"""Configuration for distance arithmetic used by shortest-path algorithms."""

import sys
from dataclasses import dataclass
from typing import Union

Cost = Union[int, float]


@dataclass
class DistanceConfig:
    """Distance sentinel and saturating addition policy.

    The sentinel marks "no known path". It sits at half of ``sys.maxsize`` so
    that adding any realistic edge weight to it never reaches the platform's
    largest integer.
    """

    # Reserved "infinity" for unreachable vertices
    infinity: int = sys.maxsize // 2

    def is_infinite(self, distance: Cost) -> bool:
        """Return True if ``distance`` is at or beyond the sentinel."""
        return distance >= self.infinity

    def add(self, distance: Cost, weight: Cost) -> Cost:
        """Add an edge weight to a distance, saturating at the sentinel.

        An infinite operand yields the sentinel. A finite sum that reaches the
        sentinel is clamped to it.

        Args:
            distance: Known distance to an edge's source vertex.
            weight: Edge weight.

        Returns:
            The sum, or ``infinity`` when saturated.
        """
        if self.is_infinite(distance) or self.is_infinite(weight):
            return self.infinity
        total = distance + weight
        if total >= self.infinity:
            return self.infinity
        return total


# Global configuration instance
DISTANCE_CONFIG = DistanceConfig()
