"""
Keyboard input abstraction.

Provides a unified interface for window/keyboard events so the controller
does not depend on pygame directly.
"""

from abc import ABC, abstractmethod
from typing import List, Set

# Keys reserved for controlling the application; never bound to sprites
HOTKEYS = ('f1', 'f2', 'escape')


class KeyboardState:
    """Represents the window event state for one frame."""

    def __init__(self):
        """Initialize keyboard state."""
        self.quit = False
        self.keys_pressed: List[str] = []  # Hotkeys pressed this frame, in order
        self.keys_held: Set[str] = set()  # Non-hotkey keys currently held down
        self.devices_added: List[int] = []  # Joystick device indices plugged in this frame
        self.devices_removed: List[int] = []  # Joystick instance ids unplugged this frame

    def __repr__(self) -> str:
        return (
            f"KeyboardState(quit={self.quit}, keys_pressed={self.keys_pressed}, "
            f"keys_held={sorted(self.keys_held)}, added={self.devices_added}, "
            f"removed={self.devices_removed})"
        )


class Keyboard(ABC):
    """
    Abstract base class for window/keyboard input.

    - PygameKeyboard: Uses the pygame event queue
    - tests use scripted implementations
    """

    @abstractmethod
    def poll(self) -> KeyboardState:
        """
        Poll for input and return current state.

        Returns:
            KeyboardState containing:
                - quit: Whether the window was closed
                - keys_pressed: Hotkeys pressed this frame
                - keys_held: All non-hotkey keys currently held down
                - devices_added / devices_removed: joystick hot-plug events
        """
        pass

    @abstractmethod
    def cleanup(self):
        """Clean up resources."""
        pass
