"""
Headless simulation for timing runs and collecting flock metrics.
"""

import time
from typing import Dict, Any

from ..core.world import World
from ..analysis.metrics import snapshot


# Ticks between progress lines
PROGRESS_INTERVAL = 500


class BenchmarkSimulation:
    """
    Headless flocking simulation.

    Steps the world without a display and samples flock metrics every
    ``metricsInterval`` ticks.
    """

    def __init__(self, config: Dict, verbose: bool = True):
        """
        Initialize benchmark simulation.

        Args:
            config: Configuration dictionary (see SimulationConfig.to_dict)
            verbose: Whether to print progress lines
        """
        self.config = config
        self.verbose = verbose

        self.world = World(
            config["screenWidth"],
            config["screenHeight"],
            config["boidCount"],
            seed=config.get("seed"),
        )

        self.metrics_interval = max(1, config.get("metricsInterval", 10))
        self.timeseries = []

    def update(self) -> None:
        """Advance the world one tick and sample metrics when due."""
        self.world.update()

        if self.world.tick % self.metrics_interval == 0:
            self.timeseries.append(snapshot(self.world))

    def run_benchmark(self, ticks: int) -> Dict[str, Any]:
        """
        Run the simulation for a number of ticks.

        Args:
            ticks: Number of ticks to simulate

        Returns:
            Dictionary with timing, the metrics time series and final state
        """
        self.timeseries.append(snapshot(self.world))
        start_time = time.perf_counter()

        for _ in range(ticks):
            self.update()

            if self.verbose and self.world.tick % PROGRESS_INTERVAL == 0:
                latest = self.timeseries[-1]
                print(f"  Tick {self.world.tick}/{ticks}: "
                      f"polarization={latest['polarization']:.3f}, "
                      f"cohesion={latest['cohesion']:.1f}")

        elapsed = time.perf_counter() - start_time

        return {
            "ticks": ticks,
            "boid_count": len(self.world.agents),
            "seed": self.config.get("seed"),
            "elapsed_time_seconds": elapsed,
            "ticks_per_second": ticks / elapsed if elapsed > 0 else 0.0,
            "final": snapshot(self.world),
            "metrics_over_time": self.timeseries,
        }
