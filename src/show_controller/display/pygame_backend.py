"""
Pygame display backend - the window captured by streaming software.
"""

import logging

import numpy as np

from .display_backend import DisplayBackend
from ..input.keyboard import KeyboardState
from ..input.pygame_keyboard import PygameKeyboard

logger = logging.getLogger(__name__)


class PygameBackend(DisplayBackend):
    """Pygame window backend."""

    def __init__(self, width: int, height: int, pygame_module=None, title: str = "Show Controller", **kwargs):
        """
        Initialize pygame backend.

        Args:
            width: Window width in pixels (background image width)
            height: Window height in pixels (background image height)
            pygame_module: pygame module to use (imported when not given)
            title: Window caption
            **kwargs: Additional arguments (ignored, for cross-backend compatibility)
        """
        super().__init__(width, height)

        if pygame_module is None:
            import pygame as pygame_module
        self.pygame = pygame_module

        self.pygame.init()

        # Create window
        self.screen = self.pygame.display.set_mode((self.width, self.height))
        self.pygame.display.set_caption(title)
        logger.info("Pygame window initialized: %d×%d", self.width, self.height)

        # Initialize keyboard input handler
        self.keyboard = PygameKeyboard(self.pygame)

    def show_framebuffer(self, framebuffer: np.ndarray):
        """
        Display a complete framebuffer via pygame.

        Args:
            framebuffer: Framebuffer of shape (height, width, 3)
        """
        # pygame surfaces are indexed (x, y)
        surface = self.pygame.surfarray.make_surface(
            np.transpose(framebuffer, (1, 0, 2))
        )

        self.screen.blit(surface, (0, 0))
        self.pygame.display.flip()

    def handle_events(self) -> KeyboardState:
        """Handle pygame events using keyboard abstraction."""
        return self.keyboard.poll()

    def cleanup(self):
        """Clean up pygame and keyboard."""
        self.keyboard.cleanup()
        self.pygame.quit()
