"""
Input handler - unified interface for processing hotkeys.

Wraps the per-frame keyboard state so the controller can ask simple
questions ("was F1 pressed?") without knowing about the event source.
"""

from typing import List, Set

from .keyboard import KeyboardState


class InputHandler:
    """
    Unified input handler that wraps keyboard state from the event source.
    """

    def __init__(self):
        """Initialize input handler."""
        self.quit_requested = False
        self.keys_pressed: List[str] = []
        self.keys_held: Set[str] = set()

    def update(self, state: KeyboardState):
        """
        Update input state from a polled KeyboardState.

        Args:
            state: State returned by Keyboard.poll()
        """
        self.quit_requested = state.quit
        self.keys_pressed = list(state.keys_pressed)
        self.keys_held = set(state.keys_held)

    def is_quit_requested(self) -> bool:
        """Check if the window was closed."""
        return self.quit_requested

    def is_key_pressed(self, *keys: str) -> bool:
        """
        Check if any of the given hotkeys was pressed this frame.

        Example:
            if input.is_key_pressed('f1'):
                wizard.advance()
        """
        return any(key in self.keys_pressed for key in keys)

    def get_held_keys(self) -> Set[str]:
        """Names of all non-hotkey keys currently held down."""
        return set(self.keys_held)

    def __repr__(self) -> str:
        return (
            f"InputHandler(quit={self.quit_requested}, "
            f"keys_pressed={self.keys_pressed}, "
            f"keys_held={sorted(self.keys_held)})"
        )
