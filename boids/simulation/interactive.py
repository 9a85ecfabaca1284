"""
Interactive simulation with pygame GUI.
"""

import math
import sys
from typing import Optional

import pygame

from ..core.world import World
from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..analysis.metrics import snapshot


class Simulation:
    """
    Interactive boids viewer with pygame visualization.

    Owns the frame loop: one ``World.update`` per rendered frame, then
    draws every boid from its committed state.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
        """
        pygame.init()

        self.config = config if config else DEFAULT_CONFIG

        width = self.config.screenWidth
        height = self.config.screenHeight

        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Boids Simulation - Flocking")
        self.clock = pygame.time.Clock()

        self.world = self._build_world(self.config.seed)

        self.running = True
        self.paused = False
        self.stats = snapshot(self.world)

    def _build_world(self, seed: Optional[int]) -> World:
        """Create a freshly populated world."""
        return World(
            self.config.screenWidth,
            self.config.screenHeight,
            self.config.boidCount,
            seed=seed,
        )

    def update(self) -> None:
        """Update simulation state for one frame."""
        if self.paused:
            return

        self.world.update()
        self.stats = snapshot(self.world)

    def draw(self) -> None:
        """Render the current frame."""
        self.screen.fill(self.config.backgroundColor)

        color = self.config.boidColor
        size = self.config.boidSize
        length = self.config.headingLength

        for boid in self.world.agents:
            pos = (int(boid.x), int(boid.y))
            pygame.draw.circle(self.screen, color, pos, size)

            if self.config.showHeadings:
                end_pos = (boid.x + math.cos(boid.angle) * length,
                           boid.y + math.sin(boid.angle) * length)
                pygame.draw.line(self.screen, color, pos, end_pos, 1)

        self._draw_stats()

        pygame.display.flip()

    def _draw_stats(self) -> None:
        """Draw statistics overlay."""
        font = pygame.font.Font(None, 24)
        y_offset = 10

        stats_text = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Boids: {self.stats['boid_count']}",
            f"Tick: {self.stats['tick']}",
            f"Polarization: {self.stats['polarization']:.2f}",
            f"Cohesion: {self.stats['cohesion']:.1f}",
            f"Avg Speed: {self.stats['avg_speed']:.2f}",
            f"Neighbors: {self.stats['mean_neighbors']:.1f}",
        ]
        if self.paused:
            stats_text.append("PAUSED")

        for text in stats_text:
            surface = font.render(text, True, (200, 200, 200))
            self.screen.blit(surface, (10, y_offset))
            y_offset += 25

    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key)

            self.update()
            self.draw()
            self.clock.tick(self.config.fpsTarget)

        pygame.quit()
        sys.exit()

    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_h:
            self.config.showHeadings = not self.config.showHeadings
        elif key == pygame.K_a:
            mx, my = pygame.mouse.get_pos()
            self.world.add_agent(x=float(mx), y=float(my))
            self.stats = snapshot(self.world)
            print(f"Added boid at ({mx}, {my}), total {len(self.world.agents)}")
        elif key == pygame.K_r:
            self.world = self._build_world(self.world.rng.randrange(2 ** 32))
            self.stats = snapshot(self.world)
            print("World rebuilt")
