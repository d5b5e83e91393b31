"""
DeskBurst - Simulation Stage
Per-frame driver for one show: spawns, advances and reaps fireworks.
"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from src.core.constants import (
    LaunchMode, FIREWORK_PALETTE, DISPLAY_DURATION_MS,
    INITIAL_BUDGET, LAUNCH_BUDGET,
    INITIAL_SPAWN_CHANCE, LAUNCH_SPAWN_CHANCE, REPLACEMENT_SPAWN_CHANCE,
    LAUNCH_HEIGHT_JITTER
)
from src.core.logger import get_logger
from src.core.stats_tracker import ShowStats
from src.entities.firework import Firework
from src.graphics.render_surface import RenderSurface
from src.utils.random_source import RandomSource, roll_percent


@dataclass(frozen=True)
class TickResult:
    """What a single tick did."""
    immediate_spawns: int
    launch_spawns: int
    reaped: int
    replacements: int
    initial_budget: int
    launch_budget: int
    active: int


class SimulationStage:
    """
    Runs one show on one surface.

    The stage is driven at a fixed rate by its host. All physics is per tick,
    so a slower host slows the show down instead of changing its shape.
    Once the display duration has elapsed the stage releases every primitive
    and ignores further ticks.
    """

    def __init__(self, width: float, height: float, surface: RenderSurface,
                 rng: RandomSource, duration_ms: float = DISPLAY_DURATION_MS,
                 clock: Callable[[], float] = time.monotonic,
                 palette: Sequence[Tuple[int, int, int]] = FIREWORK_PALETTE,
                 on_finished: Optional[Callable[['SimulationStage'], None]] = None):
        self.width = width
        self.height = height
        self.surface = surface
        self.rng = rng
        self.duration_ms = duration_ms
        self.clock = clock
        self.palette = tuple(palette)
        self.on_finished = on_finished

        self.fireworks: List[Firework] = []
        self.initial_budget = INITIAL_BUDGET
        self.launch_budget = LAUNCH_BUDGET
        self.stats = ShowStats()

        self.start_time = clock()
        self._finished = False

        # Opening burst so the screen is never empty
        self.spawn(LaunchMode.IMMEDIATE)
        self.spawn(LaunchMode.LAUNCH)
        self.stats.immediate_spawns += 1
        self.stats.launch_spawns += 1

        get_logger().debug(
            f"Stage created {int(width)}x{int(height)}, "
            f"budgets {self.initial_budget}/{self.launch_budget}, {duration_ms:.0f} ms"
        )

    @property
    def elapsed_ms(self) -> float:
        return (self.clock() - self.start_time) * 1000.0

    def is_finished(self) -> bool:
        return self._finished

    def spawn(self, mode: LaunchMode) -> Firework:
        """Create a firework and add it to the active collection."""
        x = self.rng.random() * self.width
        if mode == LaunchMode.IMMEDIATE:
            y = self.rng.random() * self.height
        else:
            y = self.height - self.rng.random() * LAUNCH_HEIGHT_JITTER

        color = self.palette[self.rng.randrange(len(self.palette))]
        firework = Firework(x, y, color, self.rng, self.surface)

        if mode == LaunchMode.IMMEDIATE:
            firework.explode()
            self.stats.explosions += 1

        self.fireworks.append(firework)
        return firework

    def tick(self) -> Optional[TickResult]:
        """Advance the show by one step. Returns None once the show is over."""
        if self._finished:
            return None

        if self.elapsed_ms >= self.duration_ms:
            self.finish()
            return None

        immediate_spawns = 0
        launch_spawns = 0

        if self.initial_budget > 0 and roll_percent(self.rng, INITIAL_SPAWN_CHANCE):
            self.spawn(LaunchMode.IMMEDIATE)
            self.initial_budget -= 1
            immediate_spawns += 1

        if self.launch_budget > 0 and roll_percent(self.rng, LAUNCH_SPAWN_CHANCE):
            self.spawn(LaunchMode.LAUNCH)
            self.launch_budget -= 1
            launch_spawns += 1

        reaped, replacements = self._advance_and_reap()

        self.stats.ticks += 1
        self.stats.immediate_spawns += immediate_spawns
        self.stats.launch_spawns += launch_spawns
        live_particles = sum(len(f.particles) for f in self.fireworks)
        self.stats.peak_particles = max(self.stats.peak_particles, live_particles)

        return TickResult(
            immediate_spawns=immediate_spawns,
            launch_spawns=launch_spawns,
            reaped=reaped,
            replacements=replacements,
            initial_budget=self.initial_budget,
            launch_budget=self.launch_budget,
            active=len(self.fireworks),
        )

    def _advance_and_reap(self) -> Tuple[int, int]:
        # Iterate a snapshot: replacements land in the live list but wait for the next tick
        current = self.fireworks
        self.fireworks = []
        reaped = 0
        replacements = 0

        for firework in current:
            was_exploded = firework.exploded
            firework.advance()
            if firework.exploded and not was_exploded:
                self.stats.explosions += 1

            if not firework.is_dead():
                self.fireworks.append(firework)
                continue

            reaped += 1
            if roll_percent(self.rng, REPLACEMENT_SPAWN_CHANCE):
                self.spawn(LaunchMode.LAUNCH)
                replacements += 1

        self.stats.fireworks_reaped += reaped
        self.stats.replacement_spawns += replacements
        return reaped, replacements

    def finish(self):
        """End the show now, dropping anything still on screen."""
        if self._finished:
            return
        self.close()
        self._finished = True
        get_logger().debug(f"Stage finished after {self.elapsed_ms:.0f} ms")
        if self.on_finished is not None:
            self.on_finished(self)

    def close(self):
        """Release every primitive still owned by live fireworks."""
        for firework in self.fireworks:
            firework.release()
        self.fireworks.clear()
