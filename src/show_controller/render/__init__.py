"""
Rendering: sprite compositing and bitmap text.
"""

from .sprite_renderer import SpriteRenderer, load_image
from .text_renderer import TextRenderer

__all__ = ['SpriteRenderer', 'TextRenderer', 'load_image']
