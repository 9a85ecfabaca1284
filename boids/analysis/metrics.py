"""
Flock statistics computed from a world's current state.
"""

from typing import Dict, Sequence

import numpy as np

from ..core.config import NEIGHBOR_RADIUS


def polarization(boids: Sequence) -> float:
    """
    Measure how aligned the flock's headings are.

    Args:
        boids: Sequence of boids

    Returns:
        Length of the mean heading unit vector: 0 for no agreement, 1 when
        every boid points the same way. 0 for an empty flock.
    """
    if not boids:
        return 0.0

    angles = np.array([b.angle for b in boids], dtype=np.float64)
    return float(np.hypot(np.cos(angles).mean(), np.sin(angles).mean()))


def cohesion(boids: Sequence) -> float:
    """
    Measure how tightly the flock is grouped.

    Args:
        boids: Sequence of boids

    Returns:
        Average distance to the centroid (lower = tighter grouping)
    """
    if not boids:
        return 0.0

    positions = np.array([(b.x, b.y) for b in boids], dtype=np.float64)
    centroid = positions.mean(axis=0)
    return float(np.linalg.norm(positions - centroid, axis=1).mean())


def mean_speed(boids: Sequence) -> float:
    """Average speed of the flock."""
    if not boids:
        return 0.0
    return float(np.mean([b.speed for b in boids]))


def mean_neighbors(world, radius: float = NEIGHBOR_RADIUS) -> float:
    """Average neighbor count per boid, by default over the flocking radius."""
    if not world.agents:
        return 0.0
    return float(np.mean([len(world.get_neighbors(b, radius)) for b in world.agents]))


def snapshot(world) -> Dict[str, float]:
    """
    Collect the flock statistics for the current tick.

    Args:
        world: World to measure

    Returns:
        Dictionary with tick, boid_count, polarization, cohesion, avg_speed
        and mean_neighbors
    """
    return {
        "tick": world.tick,
        "boid_count": len(world.agents),
        "polarization": polarization(world.agents),
        "cohesion": cohesion(world.agents),
        "avg_speed": mean_speed(world.agents),
        "mean_neighbors": mean_neighbors(world),
    }
