"""
Sprite renderer - composites the background and the selected sprites.

Images are loaded once with Pillow as RGBA numpy arrays. Each frame the
background is copied into the target layer and every selected sprite is
alpha-blended on top at the origin, in config order.
"""

import logging
from pathlib import Path
from typing import Dict, List

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..config.config_loader import Config, ConfigError

logger = logging.getLogger(__name__)


def load_image(path: Path) -> np.ndarray:
    """
    Load an image file as an RGBA array of shape (height, width, 4).

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file is not a readable image
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {path}")

    try:
        with Image.open(path) as image:
            return np.array(image.convert('RGBA'), dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise ConfigError(f"Cannot read image {path}: {e}") from e


class SpriteRenderer:
    """Renders the background plus a per-group sprite selection."""

    def __init__(self, config: Config):
        """
        Load the background and every sprite image.

        Args:
            config: Overlay configuration
        """
        self.config = config

        background = load_image(config.background)
        self.height, self.width = background.shape[:2]

        # Background alpha is blended over black once
        alpha = background[:, :, 3:4].astype(np.float32) / 255.0
        self.background = (background[:, :, :3].astype(np.float32) * alpha).astype(np.uint8)

        self.sprites: List[np.ndarray] = []
        for sprite in config.sprites:
            image = load_image(sprite.path)
            if image.shape[0] > self.height or image.shape[1] > self.width:
                logger.warning("Sprite '%s' (%d×%d) is larger than the background and will be clipped",
                               sprite.name, image.shape[1], image.shape[0])
            self.sprites.append(image[:self.height, :self.width])

        logger.info("Loaded background %d×%d and %d sprites", self.width, self.height, len(self.sprites))

    def blit(self, framebuffer: np.ndarray, index: int):
        """Alpha-blend sprite index onto framebuffer at the origin."""
        sprite = self.sprites[index]
        h, w = sprite.shape[:2]

        alpha = sprite[:, :, 3:4].astype(np.float32) / 255.0
        region = framebuffer[:h, :w].astype(np.float32)
        blended = sprite[:, :, :3].astype(np.float32) * alpha + region * (1.0 - alpha)

        framebuffer[:h, :w] = np.clip(blended + 0.5, 0, 255).astype(np.uint8)

    def render(self, framebuffer: np.ndarray, selection: Dict[int, int]):
        """
        Draw the background and the selected sprites.

        Args:
            framebuffer: Target of shape (height, width, 3)
            selection: group -> sprite index, at most one sprite per group
        """
        framebuffer[:, :] = self.background
        for index in sorted(selection.values()):
            self.blit(framebuffer, index)
