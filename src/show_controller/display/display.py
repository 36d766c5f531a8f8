"""
Unified display interface for the overlay window.

Provides multi-layer framebuffer compositing and rendering to a backend
(pygame window or headless).
"""

import logging
from typing import List

import numpy as np

from ..input.keyboard import KeyboardState

logger = logging.getLogger(__name__)


class Display:
    """
    Multi-layer display with backend abstraction.

    Renderers write to individual layers, the Display handles compositing
    and delegates final rendering to the backend.
    """

    def __init__(
        self,
        width: int,
        height: int,
        num_layers: int = 1,
        backend: str = 'pygame',
        **kwargs
    ):
        """
        Initialize display.

        Args:
            width: Display width in pixels
            height: Display height in pixels
            num_layers: Number of framebuffer layers (default 1)
            backend: Backend type ('pygame', 'headless')
            **kwargs: Additional backend-specific arguments
        """
        self.width = width
        self.height = height
        self.num_layers = num_layers

        self.backend_type = backend
        self.backend = self._create_backend(backend, width, height, **kwargs)

        # Create framebuffer layers
        self.layers: List[np.ndarray] = []
        for i in range(num_layers):
            layer = np.zeros((self.height, self.width, 3), dtype=np.uint8)
            self.layers.append(layer)

        logger.info("Display initialized: %d×%d (%s backend, %d layers)",
                    width, height, backend, num_layers)

    def _create_backend(self, backend: str, width: int, height: int, **kwargs):
        """
        Create backend instance.

        Args:
            backend: Backend type ('pygame' or 'headless')
            width: Display width
            height: Display height
            **kwargs: Backend-specific arguments

        Returns:
            Backend instance
        """
        if backend == 'pygame':
            from .pygame_backend import PygameBackend
            return PygameBackend(width, height, **kwargs)
        elif backend == 'headless':
            from .headless_backend import HeadlessBackend
            return HeadlessBackend(width, height, **kwargs)
        else:
            raise ValueError(f"Unknown backend type: {backend}")

    def get_layer(self, index: int) -> np.ndarray:
        """
        Get a layer framebuffer for rendering.

        Renderers can write directly to this layer array.

        Args:
            index: Layer index (0 = bottom, higher = on top)

        Returns:
            Numpy array of shape (height, width, 3) with dtype uint8
        """
        if index < 0 or index >= self.num_layers:
            raise IndexError(f"Layer index {index} out of range [0, {self.num_layers})")
        return self.layers[index]

    def show(self):
        """
        Composite layers and display to screen.

        This is the main display method that should be called each frame.
        """
        framebuffer = self.backend.compose_layers(self.layers)
        self.backend.show_framebuffer(framebuffer)

    def handle_events(self) -> KeyboardState:
        """Poll window, keyboard and device hot-plug events."""
        return self.backend.handle_events()

    def cleanup(self):
        """Clean up display resources."""
        self.backend.cleanup()
