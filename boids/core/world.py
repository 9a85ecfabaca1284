"""
The flocking world: a bounded, wrapping plane and the boids on it.
"""

import math
import random
from typing import List, Optional

from .agents.boid import Boid
from .config import InvalidConfiguration, NEIGHBOR_RADIUS
from .neighbors import NeighborFinder


class World:
    """
    A wrapping 2D plane populated by boids.

    A driver calls ``update`` once per tick and reads ``x``, ``y``,
    ``angle`` and ``speed`` from each boid in ``agents`` to draw them.

    Each tick runs in two phases. Every boid first stages its next heading
    and speed against the same committed state; only once all boids are
    staged does any boid commit and move. Boids later in the list never
    see the moves of boids earlier in the list.
    """

    def __init__(self, width: float, height: float, initial_agent_count: int = 0,
                 rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """
        Initialize the world.

        Args:
            width: Width of the plane
            height: Height of the plane
            initial_agent_count: Number of randomly placed boids to create
            rng: Random source for placement and noise
            seed: Seed for a new random source (ignored if rng is given)

        Raises:
            InvalidConfiguration: If a dimension is not positive or the
                agent count is negative
        """
        if width <= 0 or height <= 0:
            raise InvalidConfiguration(
                f"World dimensions must be positive, got {width}x{height}"
            )
        if initial_agent_count < 0:
            raise InvalidConfiguration(
                f"Initial agent count must not be negative, got {initial_agent_count}"
            )

        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random(seed)

        self.agents: List[Boid] = []
        self.neighbor_finder = NeighborFinder(self.agents)
        self.tick = 0

        for _ in range(initial_agent_count):
            self.add_agent()

    def add_agent(self, x: Optional[float] = None, y: Optional[float] = None,
                  angle: Optional[float] = None, speed: Optional[float] = None) -> Boid:
        """
        Add a boid to the world.

        Any field left as None is drawn from the world's random source, in
        the order x, y, angle, speed.

        Args:
            x: X position, uniform in [0, width) by default
            y: Y position, uniform in [0, height) by default
            angle: Heading in radians, uniform in [0, 2*pi) by default
            speed: Speed, uniform in [0.5, 1.5) by default

        Returns:
            The new boid
        """
        if x is None:
            x = self.rng.random() * self.width
        if y is None:
            y = self.rng.random() * self.height
        if angle is None:
            angle = self.rng.random() * 2 * math.pi
        if speed is None:
            speed = self.rng.random() + 0.5

        boid = Boid(x, y, angle, speed)
        self.agents.append(boid)
        return boid

    def get_neighbors(self, target: Boid, radius: float) -> List[Boid]:
        """
        Get the neighbors of a boid.

        Args:
            target: The boid to find the neighbors of
            radius: The size of the neighborhood to consider

        Returns:
            Every other boid strictly within ``radius`` of the target
        """
        return self.neighbor_finder.find_within_radius(target, radius)

    def update(self) -> None:
        """Advance every boid by one tick."""
        for boid in self.agents:
            boid.flock(self.get_neighbors(boid, NEIGHBOR_RADIUS), self.rng)

        for boid in self.agents:
            boid.update(self.width, self.height)

        self.tick += 1
