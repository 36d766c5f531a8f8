"""
Headless display backend - renders to memory only.

Used for smoke runs without a window and by the test suite.
"""

from typing import Optional

import numpy as np

from .display_backend import DisplayBackend
from ..input.keyboard import Keyboard, KeyboardState


class HeadlessBackend(DisplayBackend):
    """Keeps the last shown framebuffer instead of drawing a window."""

    def __init__(self, width: int, height: int, keyboard: Optional[Keyboard] = None, **kwargs):
        """
        Initialize headless backend.

        Args:
            width: Framebuffer width
            height: Framebuffer height
            keyboard: Event source (no events when omitted)
        """
        super().__init__(width, height)
        self.keyboard = keyboard
        self.frame_count = 0

    def show_framebuffer(self, framebuffer: np.ndarray):
        self.framebuffer[:, :] = framebuffer
        self.frame_count += 1

    def handle_events(self) -> KeyboardState:
        if self.keyboard is None:
            return KeyboardState()
        return self.keyboard.poll()

    def cleanup(self):
        if self.keyboard is not None:
            self.keyboard.cleanup()
