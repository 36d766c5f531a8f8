"""
Input handling for the controller visualizer.

- Input, Button, Axis, Hat, Key: hashable identifiers for held inputs
- Joysticks: pygame joystick polling with axis calibration
- PygameKeyboard: window/keyboard events from pygame
- InputHandler: per-frame hotkey queries
"""

from .inputs import Input, Button, Axis, Hat, Key, Direction, format_inputs
from .axis_limits import AxisLimits, AxisZone, JoystickLimits
from .keyboard import HOTKEYS, Keyboard, KeyboardState
from .pygame_keyboard import PygameKeyboard
from .joysticks import KEYBOARD, InputState, Joysticks
from .input_handler import InputHandler

__all__ = [
    'Input',
    'Button',
    'Axis',
    'Hat',
    'Key',
    'Direction',
    'format_inputs',
    'AxisLimits',
    'AxisZone',
    'JoystickLimits',
    'HOTKEYS',
    'Keyboard',
    'KeyboardState',
    'PygameKeyboard',
    'KEYBOARD',
    'InputState',
    'Joysticks',
    'InputHandler',
]
