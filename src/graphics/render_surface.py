"""
DeskBurst - Render Surfaces
Sinks that the simulation pushes visual primitives into
"""

import pygame
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Tuple

from src.core.constants import PrimitiveKind

Position = Tuple[float, float]
Color = Tuple[int, int, int]
ColorWithAlpha = Tuple[int, int, int, int]


class RenderSurface(ABC):
    """
    Write-only display target for fireworks.

    Every handle returned by create_primitive must be passed to
    remove_primitive exactly once. Removing an unknown handle raises KeyError.
    """

    @abstractmethod
    def create_primitive(self, kind: PrimitiveKind, position: Position,
                         size: float, color: Color) -> int:
        ...

    @abstractmethod
    def update_primitive(self, handle: int, position: Position, color: ColorWithAlpha):
        ...

    @abstractmethod
    def remove_primitive(self, handle: int):
        ...


@dataclass
class Primitive:
    kind: PrimitiveKind
    x: float
    y: float
    size: float
    color: ColorWithAlpha


class PygameRenderSurface(RenderSurface):
    """Keeps primitives by handle and draws them as alpha-blended circles."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.primitives: Dict[int, Primitive] = {}
        self._next_handle = 1
        self.layer = pygame.Surface((width, height), pygame.SRCALPHA)

    def create_primitive(self, kind: PrimitiveKind, position: Position,
                         size: float, color: Color) -> int:
        handle = self._next_handle
        self._next_handle += 1
        x, y = position
        self.primitives[handle] = Primitive(kind, x, y, size, (*color[:3], 255))
        return handle

    def update_primitive(self, handle: int, position: Position, color: ColorWithAlpha):
        primitive = self.primitives[handle]
        primitive.x, primitive.y = position
        primitive.color = color

    def remove_primitive(self, handle: int):
        del self.primitives[handle]

    def __len__(self) -> int:
        return len(self.primitives)

    def draw(self, surface: pygame.Surface):
        """Composite all live primitives onto the target surface."""
        self.layer.fill((0, 0, 0, 0))

        for primitive in self.primitives.values():
            alpha = primitive.color[3]
            if alpha <= 0:
                continue
            radius = max(1, int(primitive.size / 2))
            center = (int(primitive.x), int(primitive.y))
            # Skip anything fully off screen
            if (center[0] < -radius or center[0] > self.width + radius or
                    center[1] < -radius or center[1] > self.height + radius):
                continue
            pygame.draw.circle(self.layer, primitive.color, center, radius)

        surface.blit(self.layer, (0, 0))
