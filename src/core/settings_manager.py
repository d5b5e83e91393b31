import copy
import json
import os
from typing import Dict, Any
from src.core.constants import DISPLAY_DURATION_MS, TARGET_FPS
from src.core.logger import get_logger

SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS = {
    "hotkey": {
        "key": "F",
        "modifiers": {
            "control": True,
            "alt": True,
            "shift": False,
            "windows": False
        }
    },
    "display": {
        "monitor": 0,
        "fps": TARGET_FPS
    },
    "show": {
        "duration_ms": DISPLAY_DURATION_MS,
        "start_on_launch": True,
        "exit_when_finished": False
    }
}

class SettingsManager:
    def __init__(self, path: str = SETTINGS_FILE):
        self.path = path
        self.settings = copy.deepcopy(DEFAULT_SETTINGS)
        self.load()

    def load(self):
        """Load settings from file."""
        if not os.path.exists(self.path):
            return

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                saved = json.load(f)
            if not isinstance(saved, dict):
                raise ValueError("top level must be an object")
            # Merge with defaults to ensure all keys exist
            self._recursive_update(self.settings, saved)
            get_logger().info(f"Settings loaded from {self.path}")
        except (OSError, ValueError) as e:
            get_logger().error(f"Failed to load settings: {e}")

    def _recursive_update(self, base: Dict, update: Dict):
        """Update dictionary recursively, preserving structure."""
        for k, v in update.items():
            if k in base and isinstance(base[k], dict) and isinstance(v, dict):
                self._recursive_update(base[k], v)
            else:
                base[k] = v

    def get(self, category: str, key: str) -> Any:
        return self.settings.get(category, {}).get(key)

    def section(self, category: str) -> Dict[str, Any]:
        return self.settings.get(category, {})
