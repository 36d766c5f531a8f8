"""
Show Controller - Gamepad Visualizer for Streaming Overlays
===========================================================

Polls joysticks and the keyboard, selects one sprite per controller region
from user-recorded bindings, and draws the sprites over a background image.

Main Classes:
- ShowController: Main frame loop

Submodules:
- show_controller.config: YAML overlay configuration
- show_controller.input: Joystick/keyboard polling and input identifiers
- show_controller.mapping: Sprite bindings and per-group selection
- show_controller.render: Sprite compositing and bitmap text
- show_controller.display: Display backends (pygame/headless)
- show_controller.setup: Interactive binding wizard
"""

from .controller import ShowController

__all__ = ['ShowController', 'config', 'input', 'mapping', 'render', 'display', 'setup']
