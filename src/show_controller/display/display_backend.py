"""
Display backend abstraction for overlay rendering.
Supports a pygame window and an in-memory headless backend.
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import List

from ..input.keyboard import KeyboardState


class DisplayBackend(ABC):
    """Abstract base class for display backends."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.framebuffer = np.zeros((height, width, 3), dtype=np.uint8)

    def compose_layers(self, layers: List[np.ndarray]) -> np.ndarray:
        """
        Composite multiple layers into a single framebuffer.

        Layers are composited bottom-to-top, with black pixels (0,0,0)
        in upper layers treated as transparent.

        Args:
            layers: List of framebuffers to composite (bottom to top)

        Returns:
            Composited framebuffer
        """
        if len(layers) == 0:
            return np.zeros((self.height, self.width, 3), dtype=np.uint8)

        if len(layers) == 1:
            return layers[0].copy()

        # Start with bottom layer
        result = layers[0].copy()

        # Overlay each subsequent layer
        for layer in layers[1:]:
            # Create mask: True where layer is non-black (has content)
            mask = np.any(layer != 0, axis=2, keepdims=True)

            # Apply layer pixels where mask is True
            result = np.where(mask, layer, result)

        return result

    @abstractmethod
    def show_framebuffer(self, framebuffer: np.ndarray):
        """
        Display a complete framebuffer.

        Args:
            framebuffer: Framebuffer of shape (height, width, 3)
        """
        pass

    @abstractmethod
    def handle_events(self) -> KeyboardState:
        """Poll window, keyboard and device hot-plug events."""
        pass

    @abstractmethod
    def cleanup(self):
        """Clean up resources."""
        pass
