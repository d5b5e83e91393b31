"""
DeskBurst - Spark Particle
A single decaying spark thrown out by an exploding firework
"""

from typing import Tuple

from src.core.constants import (
    PrimitiveKind, SPARK_SIZE, PARTICLE_GRAVITY, PARTICLE_DECAY, PARTICLE_MAX_LIFE
)
from src.graphics.render_surface import RenderSurface


class Particle:
    def __init__(self, pos: tuple, vel: tuple, color: Tuple[int, int, int],
                 surface: RenderSurface):
        self.x, self.y = pos
        self.vx, self.vy = vel
        self.color = color
        self.life = PARTICLE_MAX_LIFE
        self.surface = surface
        self.handle = surface.create_primitive(
            PrimitiveKind.SPARK, (self.x, self.y), SPARK_SIZE, color
        )

    @property
    def alpha(self) -> int:
        return int(255 * max(0.0, self.life / PARTICLE_MAX_LIFE))

    def is_dead(self) -> bool:
        return self.life <= 0

    def advance(self) -> bool:
        """Step one tick. Returns False once the spark has burned out."""
        self.x += self.vx
        self.y += self.vy
        self.vy += PARTICLE_GRAVITY
        self.life -= PARTICLE_DECAY

        self.surface.update_primitive(self.handle, (self.x, self.y), (*self.color, self.alpha))

        if self.is_dead():
            self.release()
            return False
        return True

    def release(self):
        if self.handle is not None:
            self.surface.remove_primitive(self.handle)
            self.handle = None
