"""
Configuration classes and defaults for the boids simulation.
"""

from dataclasses import dataclass, field
from typing import List, Optional


class InvalidConfiguration(ValueError):
    """Raised when a world is built with dimensions or counts it cannot simulate."""


@dataclass
class SimulationConfig:
    """Configuration for the drivers around the flocking world."""

    # Plane settings
    screenWidth: int = 1000
    screenHeight: int = 700

    # Agent counts
    boidCount: int = 150

    # Random source (None = unseeded)
    seed: Optional[int] = None

    # Headless run
    ticks: int = 2000
    metricsInterval: int = 10

    # Visualization
    fpsTarget: int = 60
    boidSize: int = 3
    headingLength: int = 8
    showHeadings: bool = True
    backgroundColor: List[int] = field(default_factory=lambda: [25, 25, 25])
    boidColor: List[int] = field(default_factory=lambda: [200, 200, 255])

    # Output
    metricsOutputFile: str = "flock_metrics.csv"
    reportOutputFile: str = "flock_report.json"
    plotOutputFile: str = "flock_metrics.png"

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "screenWidth": self.screenWidth,
            "screenHeight": self.screenHeight,
            "boidCount": self.boidCount,
            "seed": self.seed,
            "ticks": self.ticks,
            "metricsInterval": self.metricsInterval,
            "fpsTarget": self.fpsTarget,
            "boidSize": self.boidSize,
            "headingLength": self.headingLength,
            "showHeadings": self.showHeadings,
            "backgroundColor": self.backgroundColor,
            "boidColor": self.boidColor,
            "metricsOutputFile": self.metricsOutputFile,
            "reportOutputFile": self.reportOutputFile,
            "plotOutputFile": self.plotOutputFile,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary."""
        return cls(**{k: v for k, v in data.items() if hasattr(cls, k)})


# Default configuration for the interactive viewer
DEFAULT_CONFIG = SimulationConfig()

# Configuration for reproducible headless runs
HEADLESS_CONFIG = SimulationConfig(
    seed=42,
    showHeadings=False,
)


# Neighborhood used by every flocking rule
NEIGHBOR_RADIUS = 100

# Rule weights (fixed, not part of SimulationConfig)
ALIGNMENT_WEIGHT = 0.01
COHESION_WEIGHT = 0.001
SEPARATION_WEIGHT = 0.01
SEPARATION_FALLOFF = 100
SPEED_MATCH_WEIGHT = 0.1
NOISE_AMPLITUDE = 0.01

# Speed limits applied after every tick
MIN_SPEED = 0.5
MAX_SPEED = 2.0
