"""
DeskBurst - Constants and Tuning
Firework overlay that bursts across the desktop
"""

from enum import Enum, auto
from dataclasses import dataclass

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================
WINDOW_TITLE = "DeskBurst"

# Fallback surface size when no desktop size is reported
DEFAULT_SURFACE_WIDTH = 1280
DEFAULT_SURFACE_HEIGHT = 720

# Fixed timestep: one tick every 16 ms (~60 Hz). Physics is per tick, never per second.
TARGET_FPS = 60
TICK_INTERVAL_MS = 16

# How long a show stays on screen
DISPLAY_DURATION_MS = 10000

# =============================================================================
# COLOR PALETTE
# =============================================================================
@dataclass(frozen=True)
class Colors:
    # Background of the overlay window
    BACKGROUND = (0, 0, 0)

    # Firework colors
    RED = (255, 0, 0)
    WHITE = (255, 255, 255)
    BLUE = (0, 0, 255)
    GREEN = (0, 128, 0)
    GOLD = (255, 215, 0)
    PURPLE = (128, 0, 128)
    ORANGE = (255, 165, 0)
    PINK = (255, 192, 203)

COLORS = Colors()

FIREWORK_PALETTE = (
    COLORS.RED,
    COLORS.WHITE,
    COLORS.BLUE,
    COLORS.GREEN,
    COLORS.GOLD,
    COLORS.PURPLE,
    COLORS.ORANGE,
    COLORS.PINK,
)

# =============================================================================
# RENDER PRIMITIVES
# =============================================================================
class PrimitiveKind(Enum):
    SHELL = auto()   # Ascending firework dot
    SPARK = auto()   # Explosion particle

SHELL_SIZE = 8
SPARK_SIZE = 4

# =============================================================================
# FIREWORK SETTINGS
# =============================================================================
class FireworkState(Enum):
    ASCENDING = auto()
    EXPLODED = auto()

class LaunchMode(Enum):
    IMMEDIATE = auto()  # Bursts where it spawns, anywhere on screen
    LAUNCH = auto()     # Rises from near the bottom edge

# Launch velocity is -(MIN + randrange(JITTER)), negative is up
FIREWORK_LAUNCH_SPEED_MIN = 20
FIREWORK_LAUNCH_SPEED_JITTER = 8
FIREWORK_ASCENT_GRAVITY = 0.35
FIREWORK_MAX_ASCENT_TICKS = 100  # Explode even if apex never reached

PARTICLES_PER_EXPLOSION = 150
PARTICLE_SPEED_MIN = 3.0
PARTICLE_SPEED_RANGE = 5.0  # Speed is uniform in [3, 8)

# =============================================================================
# PARTICLE SETTINGS
# =============================================================================
PARTICLE_GRAVITY = 0.1
PARTICLE_DECAY = 0.015  # ~67 ticks to fade out
PARTICLE_MAX_LIFE = 1.0

# =============================================================================
# SPAWN POLICY
# =============================================================================
INITIAL_BUDGET = 15           # Immediate bursts allowed by the periodic roll
LAUNCH_BUDGET = 10            # Bottom-edge launches allowed by the periodic roll
INITIAL_SPAWN_CHANCE = 20     # Percent per tick
LAUNCH_SPAWN_CHANCE = 10      # Percent per tick
REPLACEMENT_SPAWN_CHANCE = 70 # Percent per reaped firework
LAUNCH_HEIGHT_JITTER = 50     # Launch y is height - uniform[0, 50)

# =============================================================================
# DEBUG SETTINGS
# =============================================================================
SHOW_FPS = False
