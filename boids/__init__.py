"""
Boids flocking simulation on a bounded, wrapping plane.
"""

from .core import World, SimulationConfig, InvalidConfiguration

__all__ = ['World', 'SimulationConfig', 'InvalidConfiguration']
