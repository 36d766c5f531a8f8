"""
Pygame keyboard implementation.

Uses pygame's event queue for keyboard input, window close and joystick
hot-plug notifications.
"""

import logging
from typing import Any, Set

from .keyboard import HOTKEYS, Keyboard, KeyboardState

logger = logging.getLogger(__name__)


class PygameKeyboard(Keyboard):
    """
    Keyboard implementation using pygame events.

    Held keys are tracked from KEYDOWN/KEYUP pairs and reported by their
    pygame key name ('space', 'left shift', 'a', ...).
    """

    def __init__(self, pygame: Any):
        """
        Initialize pygame keyboard.

        Args:
            pygame: The pygame module (passed in to avoid import issues)
        """
        self.pygame = pygame
        self._held: Set[str] = set()

    def _key_name(self, event) -> str:
        return self.pygame.key.name(event.key)

    def poll(self) -> KeyboardState:
        """
        Poll pygame for input.

        Returns:
            KeyboardState with current state
        """
        state = KeyboardState()
        pygame = self.pygame

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                state.quit = True
            elif event.type == pygame.KEYDOWN:
                name = self._key_name(event)
                if name in HOTKEYS:
                    state.keys_pressed.append(name)
                elif name:
                    self._held.add(name)
            elif event.type == pygame.KEYUP:
                self._held.discard(self._key_name(event))
            elif event.type == pygame.JOYDEVICEADDED:
                state.devices_added.append(event.device_index)
            elif event.type == pygame.JOYDEVICEREMOVED:
                state.devices_removed.append(event.instance_id)
            elif event.type == pygame.WINDOWFOCUSLOST:
                # KEYUP events are not delivered while unfocused
                if self._held:
                    logger.debug("Focus lost, releasing held keys: %s", sorted(self._held))
                self._held.clear()

        state.keys_held = set(self._held)
        return state

    def cleanup(self):
        """Clean up pygame keyboard."""
        self._held.clear()
