"""
DeskBurst - Firework Entity
A shell that rises from the bottom of the screen and bursts into sparks
"""

import math
from typing import List, Optional, Tuple

from src.core.constants import (
    PrimitiveKind, FireworkState, SHELL_SIZE,
    FIREWORK_LAUNCH_SPEED_MIN, FIREWORK_LAUNCH_SPEED_JITTER,
    FIREWORK_ASCENT_GRAVITY, FIREWORK_MAX_ASCENT_TICKS,
    PARTICLES_PER_EXPLOSION, PARTICLE_SPEED_MIN, PARTICLE_SPEED_RANGE
)
from src.entities.particle import Particle
from src.graphics.render_surface import RenderSurface
from src.utils.random_source import RandomSource


class Firework:
    """
    Firework with two states.

    ASCENDING: a single shell dot climbs and decelerates.
    EXPLODED: the dot is gone and a swarm of sparks fades out.
    The firework is dead once it has exploded and every spark has burned out.
    """

    def __init__(self, x: float, y: float, color: Tuple[int, int, int],
                 rng: RandomSource, surface: RenderSurface,
                 velocity_y: Optional[float] = None):
        self.x = x
        self.y = y
        self.color = color
        self.rng = rng
        self.surface = surface

        if velocity_y is None:
            velocity_y = -(FIREWORK_LAUNCH_SPEED_MIN + rng.randrange(FIREWORK_LAUNCH_SPEED_JITTER))
        self.velocity_y = velocity_y

        self.state = FireworkState.ASCENDING
        self.update_count = 0
        self.particles: List[Particle] = []

        self.dot_handle = surface.create_primitive(
            PrimitiveKind.SHELL, (self.x, self.y), SHELL_SIZE, color
        )

    @property
    def exploded(self) -> bool:
        return self.state == FireworkState.EXPLODED

    def is_dead(self) -> bool:
        return self.exploded and not self.particles

    def advance(self):
        """Step one tick."""
        if not self.exploded:
            self.y += self.velocity_y
            self.velocity_y += FIREWORK_ASCENT_GRAVITY
            self.update_count += 1

            self.surface.update_primitive(self.dot_handle, (self.x, self.y), (*self.color, 255))

            # Apex reached, or climbing for too long
            if self.velocity_y >= 0 or self.update_count >= FIREWORK_MAX_ASCENT_TICKS:
                self.explode()
        else:
            self.particles = [p for p in self.particles if p.advance()]

    def explode(self):
        """Swap the shell dot for a burst of sparks. Later calls do nothing."""
        if self.exploded:
            return

        self.state = FireworkState.EXPLODED
        self._release_dot()

        for _ in range(PARTICLES_PER_EXPLOSION):
            angle = self.rng.random() * math.pi * 2
            speed = PARTICLE_SPEED_MIN + self.rng.random() * PARTICLE_SPEED_RANGE
            self.particles.append(Particle(
                (self.x, self.y),
                (math.cos(angle) * speed, math.sin(angle) * speed),
                self.color,
                self.surface
            ))

    def release(self):
        """Remove every primitive this firework still owns."""
        self._release_dot()
        for particle in self.particles:
            particle.release()
        self.particles.clear()

    def _release_dot(self):
        if self.dot_handle is not None:
            self.surface.remove_primitive(self.dot_handle)
            self.dot_handle = None
