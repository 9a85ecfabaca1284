"""
Neighbor lookup for agents on the plane.
"""

from typing import List, Sequence


class NeighborFinder:
    """
    Linear-scan neighbor lookup.

    Checks every agent against the target, so a query is O(n) and a full
    tick is O(n^2). Distances are plain Euclidean: agents on opposite
    edges of the wrapping plane are not neighbors.

    The finder keeps a reference to the live agent list rather than a
    copy, so agents added to the world are found without re-indexing.
    """

    def __init__(self, agents: Sequence):
        """
        Initialize the finder.

        Args:
            agents: The agent collection to search (kept by reference)
        """
        self.agents = agents

    def find_within_radius(self, target, radius: float) -> List:
        """
        Get all agents strictly within a radius of a target.

        Args:
            target: Agent with ``x`` and ``y`` attributes; excluded from the result
            radius: Search radius

        Returns:
            List of agents whose squared distance is below radius squared
        """
        radius_sq = radius * radius
        neighbors = []

        for agent in self.agents:
            if agent is target:
                continue

            dx = agent.x - target.x
            dy = agent.y - target.y
            if dx * dx + dy * dy < radius_sq:
                neighbors.append(agent)

        return neighbors
