"""
Base Agent class for all simulation entities.
"""

import math


class Agent:
    """
    Base class for all agents in the simulation.

    Holds the committed state a renderer reads (position, heading, speed)
    and the staged heading/speed written during a tick. ``update`` commits
    the staged values, moves the agent and wraps it back onto the plane.
    """

    def __init__(self, x: float, y: float, angle: float, speed: float):
        """
        Initialize an agent.

        Args:
            x: Initial x position
            y: Initial y position
            angle: Initial heading in radians
            speed: Initial speed
        """
        self.x = x
        self.y = y
        self.angle = angle
        self.speed = speed

        self.new_angle = 0.0
        self.new_speed = 0.0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x:.2f}, y={self.y:.2f}, "
            f"angle={self.angle:.3f}, speed={self.speed:.3f})"
        )

    def update(self, width: float, height: float) -> None:
        """
        Commit the staged heading and speed, then move one step.

        Args:
            width: Width of the plane
            height: Height of the plane
        """
        self.angle = self.new_angle
        self.speed = self.new_speed

        self.x += math.cos(self.angle) * self.speed
        self.y += math.sin(self.angle) * self.speed

        self.wrap(width, height)

    def wrap(self, width: float, height: float) -> None:
        """
        Bring the position back onto the plane.

        Uses the truncated remainder (sign follows the dividend). The lower
        y bound re-adds ``height`` to a remainder taken against ``width``;
        this matches the established behavior and is kept as is. A
        coordinate that ends on exactly 0 also takes the lower-bound branch
        and lands on the far edge (``x == width``).

        Args:
            width: Width of the plane
            height: Height of the plane
        """
        if self.x >= width:
            self.x = math.fmod(self.x, width)
        if self.x <= 0:
            self.x = math.fmod(self.x, width) + width

        if self.y >= height:
            self.y = math.fmod(self.y, height)
        if self.y <= 0:
            self.y = math.fmod(self.y, width) + height
