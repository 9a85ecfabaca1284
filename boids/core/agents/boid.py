"""
Boid agent class implementing flocking behavior.
"""

import math
import random
from typing import Sequence, Tuple

from .base import Agent
from ..averages import average_angle, average_position, average_speed
from ..config import (
    ALIGNMENT_WEIGHT, COHESION_WEIGHT, SEPARATION_WEIGHT, SEPARATION_FALLOFF,
    SPEED_MATCH_WEIGHT, NOISE_AMPLITUDE, MIN_SPEED, MAX_SPEED
)


class Boid(Agent):
    """
    A boid agent that exhibits flocking behavior.

    Each rule returns an influence rather than applying it, and all of them
    are summed:
    - Alignment: Turn toward the mean heading of neighbors
    - Cohesion: Drift toward the mean position of neighbors
    - Separation: Push away from each neighbor, harder when closer
    - Speed matching: Move toward the mean speed of neighbors

    ``flock`` only writes ``new_angle`` and ``new_speed``; the committed
    fields are left alone until ``update``.
    """

    def flock(self, neighbors: Sequence["Boid"], rng: random.Random) -> None:
        """
        Stage the next heading and speed from neighbors plus noise.

        Args:
            neighbors: Boids within the neighbor radius (may be empty)
            rng: Random source for the noise terms
        """
        x_influence = 0.0
        y_influence = 0.0
        speed_influence = 0.0

        if neighbors:
            ali = self.alignment(neighbors)
            x_influence += ali[0]
            y_influence += ali[1]

            coh = self.cohesion(neighbors)
            x_influence += coh[0]
            y_influence += coh[1]

            sep = self.separation(neighbors)
            x_influence += sep[0]
            y_influence += sep[1]

            speed_influence += self.match_speed(neighbors)

        # Noise is drawn x, y, speed in that order
        x_influence += _noise(rng)
        y_influence += _noise(rng)
        speed_influence += _noise(rng)

        self.new_angle = math.atan2(
            math.sin(self.angle) + y_influence,
            math.cos(self.angle) + x_influence
        )
        self.new_speed = min(max(self.speed + speed_influence, MIN_SPEED), MAX_SPEED)

    def alignment(self, neighbors: Sequence["Boid"]) -> Tuple[float, float]:
        """
        Calculate the influence toward the mean neighbor heading.

        Args:
            neighbors: Non-empty list of nearby boids

        Returns:
            (x, y) influence
        """
        mean_angle = average_angle(neighbors)
        return (
            math.cos(mean_angle) * ALIGNMENT_WEIGHT,
            math.sin(mean_angle) * ALIGNMENT_WEIGHT,
        )

    def cohesion(self, neighbors: Sequence["Boid"]) -> Tuple[float, float]:
        """
        Calculate the influence toward the mean neighbor position.

        Args:
            neighbors: Non-empty list of nearby boids

        Returns:
            (x, y) influence
        """
        mean_x, mean_y = average_position(neighbors)
        return (
            (mean_x - self.x) * COHESION_WEIGHT,
            (mean_y - self.y) * COHESION_WEIGHT,
        )

    def separation(self, neighbors: Sequence["Boid"]) -> Tuple[float, float]:
        """
        Calculate the repulsion away from every neighbor.

        The denominator is never below 1, so coincident boids contribute
        nothing instead of dividing by zero.

        Args:
            neighbors: List of nearby boids

        Returns:
            (x, y) influence
        """
        x = 0.0
        y = 0.0

        for other in neighbors:
            dx = self.x - other.x
            dy = self.y - other.y
            falloff = (dx * dx + dy * dy) / SEPARATION_FALLOFF + 1

            x += dx / falloff * SEPARATION_WEIGHT
            y += dy / falloff * SEPARATION_WEIGHT

        return x, y

    def match_speed(self, neighbors: Sequence["Boid"]) -> float:
        """Speed influence toward the mean neighbor speed."""
        return (average_speed(neighbors) - self.speed) * SPEED_MATCH_WEIGHT


def _noise(rng: random.Random) -> float:
    return (rng.random() * 2 - 1) * NOISE_AMPLITUDE
