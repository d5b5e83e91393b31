"""
Input Manager for DeskBurst
Turns key events into show actions using the configured hotkey
"""

import pygame
from dataclasses import dataclass
from typing import Dict, List
from enum import Enum, auto

from src.core.logger import get_logger

DEFAULT_HOTKEY_KEY = "F"

# Modifier name -> pygame modifier mask
MODIFIER_MASKS = {
    "control": pygame.KMOD_CTRL,
    "alt": pygame.KMOD_ALT,
    "shift": pygame.KMOD_SHIFT,
    "windows": pygame.KMOD_META,
}

MODIFIER_LABELS = {
    "control": "Ctrl",
    "alt": "Alt",
    "shift": "Shift",
    "windows": "Win",
}

class InputAction(Enum):
    """Actions the overlay responds to."""
    TOGGLE_SHOW = auto()
    QUIT = auto()


@dataclass
class HotkeyConfig:
    key: str = DEFAULT_HOTKEY_KEY
    control: bool = True
    alt: bool = True
    shift: bool = False
    windows: bool = False

    @classmethod
    def from_settings(cls, section: dict) -> 'HotkeyConfig':
        modifiers = section.get("modifiers", {}) or {}
        return cls(
            key=str(section.get("key", DEFAULT_HOTKEY_KEY)),
            control=bool(modifiers.get("control", True)),
            alt=bool(modifiers.get("alt", True)),
            shift=bool(modifiers.get("shift", False)),
            windows=bool(modifiers.get("windows", False)),
        )

    def modifier_flags(self) -> Dict[str, bool]:
        return {
            "control": self.control,
            "alt": self.alt,
            "shift": self.shift,
            "windows": self.windows,
        }

    def describe(self) -> str:
        """Human readable form, e.g. Ctrl+Alt+F."""
        parts = [MODIFIER_LABELS[name] for name, on in self.modifier_flags().items() if on]
        parts.append(self.key)
        return "+".join(parts)


def resolve_key(name: str) -> int:
    """Map a key name like 'F' or 'f12' to a pygame key code."""
    return pygame.key.key_code(name.lower())


class InputManager:
    """Matches keyboard events against the show hotkey."""

    def __init__(self, hotkey: HotkeyConfig = None):
        self.hotkey = hotkey or HotkeyConfig()

        try:
            hotkey_code = resolve_key(self.hotkey.key)
        except ValueError:
            get_logger().warning(
                f"Failed to register hotkey: {self.hotkey.describe()}. "
                f"Falling back to key {DEFAULT_HOTKEY_KEY}."
            )
            self.hotkey.key = DEFAULT_HOTKEY_KEY
            hotkey_code = resolve_key(DEFAULT_HOTKEY_KEY)

        self.key_bindings: Dict[InputAction, int] = {
            InputAction.TOGGLE_SHOW: hotkey_code,
            InputAction.QUIT: pygame.K_ESCAPE,
        }

        self.just_pressed: Dict[InputAction, bool] = {action: False for action in InputAction}
        get_logger().info(f"Show hotkey: {self.hotkey.describe()}")

    def update(self, events: List[pygame.event.Event]):
        """Update action state from this frame's pygame events."""
        self.just_pressed = {action: False for action in InputAction}

        for event in events:
            if event.type == pygame.QUIT:
                self.just_pressed[InputAction.QUIT] = True
            elif event.type == pygame.KEYDOWN:
                if self._matches_hotkey(event):
                    self.just_pressed[InputAction.TOGGLE_SHOW] = True
                elif event.key == self.key_bindings[InputAction.QUIT]:
                    self.just_pressed[InputAction.QUIT] = True

    def _matches_hotkey(self, event: pygame.event.Event) -> bool:
        if event.key != self.key_bindings[InputAction.TOGGLE_SHOW]:
            return False
        # Modifiers must match exactly, like a registered system hotkey
        for name, required in self.hotkey.modifier_flags().items():
            held = bool(event.mod & MODIFIER_MASKS[name])
            if held != required:
                return False
        return True

    def is_action_just_pressed(self, action: InputAction) -> bool:
        """Check if action was triggered this frame."""
        return self.just_pressed.get(action, False)

    def get_binding(self, action: InputAction) -> int:
        """Get current key binding for an action."""
        return self.key_bindings.get(action, -1)
