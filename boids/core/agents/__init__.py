"""
Agent classes for the boids simulation.
"""

from .base import Agent
from .boid import Boid

__all__ = ['Agent', 'Boid']
