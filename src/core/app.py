"""
DeskBurst - Overlay Application
Owns the window, the fixed-rate clock and the show lifecycle
"""

import pygame
import sys
from typing import Optional, Tuple

from src.core.constants import (
    WINDOW_TITLE, TARGET_FPS, COLORS, SHOW_FPS,
    DEFAULT_SURFACE_WIDTH, DEFAULT_SURFACE_HEIGHT
)
from src.core.input_manager import HotkeyConfig, InputAction, InputManager
from src.core.logger import get_logger, init_logger, DeskBurstLogger
from src.core.settings_manager import SettingsManager
from src.core.stage import SimulationStage
from src.core.stats_tracker import StatsTracker
from src.graphics.render_surface import PygameRenderSurface
from src.utils.random_source import make_random


def monitor_size(index: int) -> Tuple[int, int]:
    """Desktop size of the given monitor, falling back to the first one."""
    sizes = pygame.display.get_desktop_sizes()
    if not sizes:
        return (DEFAULT_SURFACE_WIDTH, DEFAULT_SURFACE_HEIGHT)
    if not 0 <= index < len(sizes):
        get_logger().warning(f"Monitor {index} not found, using monitor 0")
        index = 0
    return sizes[index]


class FireworksApp:
    """
    Borderless overlay that plays fireworks shows on demand.
    The hotkey starts a show, or stops the one that is running.
    """

    def __init__(self, settings_path: Optional[str] = None, seed: Optional[int] = None):
        init_logger()
        pygame.init()

        self.settings_manager = SettingsManager(settings_path) if settings_path else SettingsManager()
        self.input_manager = InputManager(
            HotkeyConfig.from_settings(self.settings_manager.section("hotkey"))
        )
        self.stats_tracker = StatsTracker()
        self.rng = make_random(seed)

        # Display setup
        self.monitor = int(self.settings_manager.get("display", "monitor") or 0)
        self.width, self.height = monitor_size(self.monitor)
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.NOFRAME, display=self.monitor
        )
        pygame.display.set_caption(WINDOW_TITLE)

        # Timing
        self.clock = pygame.time.Clock()
        self.target_fps = int(self.settings_manager.get("display", "fps") or TARGET_FPS)
        self.duration_ms = float(self.settings_manager.get("show", "duration_ms"))
        self.exit_when_finished = bool(self.settings_manager.get("show", "exit_when_finished"))

        self.running = True
        self.stage: Optional[SimulationStage] = None
        self.surface: Optional[PygameRenderSurface] = None

        get_logger().info(f"Overlay ready on monitor {self.monitor} ({self.width}x{self.height})")

        if self.settings_manager.get("show", "start_on_launch"):
            self.start_show()

    @property
    def show_active(self) -> bool:
        return self.stage is not None

    def start_show(self):
        """Begin a new show, replacing any running one."""
        if self.stage is not None:
            self.stop_show()

        self.surface = PygameRenderSurface(self.width, self.height)
        self.stage = SimulationStage(
            self.width, self.height, self.surface, self.rng, duration_ms=self.duration_ms
        )
        get_logger().info("Show started")

    def stop_show(self):
        """Tear the current show down and record its stats."""
        if self.stage is None:
            return

        stage = self.stage
        if not stage.is_finished():
            stage.close()
            get_logger().info("Show stopped by hotkey")
        self.stats_tracker.record_show(stage.stats)

        self.stage = None
        self.surface = None

    def toggle_show(self):
        if self.show_active:
            self.stop_show()
        else:
            self.start_show()

    def run(self):
        """Main loop."""
        try:
            while self.running:
                self.clock.tick(self.target_fps)
                if SHOW_FPS:
                    pygame.display.set_caption(f"{WINDOW_TITLE} | FPS: {self.clock.get_fps():.1f}")

                self._handle_events()
                self._update()
                self._render()
        finally:
            self._cleanup()

    def _handle_events(self):
        self.input_manager.update(pygame.event.get())

        if self.input_manager.is_action_just_pressed(InputAction.QUIT):
            self.running = False
        elif self.input_manager.is_action_just_pressed(InputAction.TOGGLE_SHOW):
            self.toggle_show()

    def _update(self):
        if self.stage is None:
            return

        self.stage.tick()
        if self.stage.is_finished():
            self.stop_show()
            if self.exit_when_finished:
                self.running = False

    def _render(self):
        self.screen.fill(COLORS.BACKGROUND)
        if self.surface is not None:
            self.surface.draw(self.screen)
        pygame.display.flip()

    def _cleanup(self):
        """Clean up resources."""
        self.stop_show()
        get_logger().info(f"Exiting: {self.stats_tracker.summary()}")
        DeskBurstLogger.shutdown()
        pygame.quit()


def main():
    """Entry point for the overlay."""
    app = FireworksApp()
    app.run()
    sys.exit(0)


if __name__ == "__main__":
    main()
