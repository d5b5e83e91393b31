"""
Tests for Input Manager
"""

import pytest
import pygame
from src.core.input_manager import HotkeyConfig, InputManager, InputAction

@pytest.fixture
def input_manager():
    """Create input manager with the default Ctrl+Alt+F hotkey."""
    pygame.init()
    return InputManager()

def key_event(key, mod=pygame.KMOD_NONE):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=mod)

def test_input_manager_initialization(input_manager):
    """Test input manager binds the hotkey and Escape."""
    assert input_manager.get_binding(InputAction.TOGGLE_SHOW) == pygame.K_f
    assert input_manager.get_binding(InputAction.QUIT) == pygame.K_ESCAPE
    assert not input_manager.is_action_just_pressed(InputAction.TOGGLE_SHOW)

def test_hotkey_with_modifiers_toggles(input_manager):
    """Test Ctrl+Alt+F triggers the show toggle."""
    input_manager.update([key_event(pygame.K_f, pygame.KMOD_LCTRL | pygame.KMOD_LALT)])
    assert input_manager.is_action_just_pressed(InputAction.TOGGLE_SHOW)

    input_manager.update([])
    assert not input_manager.is_action_just_pressed(InputAction.TOGGLE_SHOW)

@pytest.mark.parametrize("mod", [
    pygame.KMOD_NONE,
    pygame.KMOD_LCTRL,
    pygame.KMOD_LCTRL | pygame.KMOD_LALT | pygame.KMOD_LSHIFT,
])
def test_hotkey_needs_exact_modifiers(input_manager, mod):
    """Test missing or extra modifiers do not trigger the toggle."""
    input_manager.update([key_event(pygame.K_f, mod)])
    assert not input_manager.is_action_just_pressed(InputAction.TOGGLE_SHOW)

def test_quit_actions(input_manager):
    """Test Escape and window close both request quit."""
    input_manager.update([key_event(pygame.K_ESCAPE)])
    assert input_manager.is_action_just_pressed(InputAction.QUIT)

    input_manager.update([pygame.event.Event(pygame.QUIT)])
    assert input_manager.is_action_just_pressed(InputAction.QUIT)

def test_custom_hotkey():
    """Test a hotkey built from settings."""
    pygame.init()
    config = HotkeyConfig.from_settings({
        "key": "F12",
        "modifiers": {"control": False, "alt": False, "shift": True}
    })
    manager = InputManager(config)

    assert config.describe() == "Shift+F12"
    manager.update([key_event(pygame.K_F12, pygame.KMOD_RSHIFT)])
    assert manager.is_action_just_pressed(InputAction.TOGGLE_SHOW)

def test_unknown_key_falls_back():
    """Test an unknown key name falls back to the default key."""
    pygame.init()
    manager = InputManager(HotkeyConfig(key="NotAKey"))

    assert manager.hotkey.key == "F"
    assert manager.get_binding(InputAction.TOGGLE_SHOW) == pygame.K_f

def test_describe_defaults():
    """Test the default hotkey description."""
    assert HotkeyConfig().describe() == "Ctrl+Alt+F"
    assert HotkeyConfig(windows=True, alt=False).describe() == "Ctrl+Win+F"
