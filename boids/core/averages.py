"""
Averaging helpers shared by the flocking rules.
"""

import math
from typing import Sequence, Tuple


def average_angle(boids: Sequence) -> float:
    """
    Find the circular mean heading of a group of boids.

    Sums the unit vector of every heading and takes the angle of the
    resultant, so headings either side of 0 rad average correctly.

    Args:
        boids: Non-empty sequence of boids

    Returns:
        Mean heading in radians, in (-pi, pi]
    """
    x = 0.0
    y = 0.0

    for boid in boids:
        x += math.cos(boid.angle)
        y += math.sin(boid.angle)

    return math.atan2(y, x)


def average_position(boids: Sequence) -> Tuple[float, float]:
    """
    Find the mean position of a group of boids.

    Args:
        boids: Non-empty sequence of boids

    Returns:
        Tuple of (x, y)
    """
    total_x = 0.0
    total_y = 0.0

    for boid in boids:
        total_x += boid.x
        total_y += boid.y

    return total_x / len(boids), total_y / len(boids)


def average_speed(boids: Sequence) -> float:
    """Find the mean speed of a non-empty group of boids."""
    return sum(boid.speed for boid in boids) / len(boids)
