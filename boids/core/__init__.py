"""
Core module containing configuration, neighbor lookup, agents and the world.
"""

from .config import SimulationConfig, DEFAULT_CONFIG, HEADLESS_CONFIG, InvalidConfiguration
from .neighbors import NeighborFinder
from .world import World

__all__ = [
    'SimulationConfig', 'DEFAULT_CONFIG', 'HEADLESS_CONFIG', 'InvalidConfiguration',
    'NeighborFinder', 'World'
]
