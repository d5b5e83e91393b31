"""
DeskBurst - Main Entry Point
Fireworks that burst across the desktop on a hotkey
"""

import sys
import os
os.environ['SDL_VIDEO_CENTERED'] = '1'

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.core.app import FireworksApp, main


if __name__ == "__main__":
    main()
