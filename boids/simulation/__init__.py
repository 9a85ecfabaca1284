"""
Simulation module containing the headless runner and the interactive viewer.

The viewer needs pygame and a display, so it is imported from
``boids.simulation.interactive`` directly rather than re-exported here.
"""

from .benchmark import BenchmarkSimulation

__all__ = ['BenchmarkSimulation']
