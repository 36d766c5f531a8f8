"""
Sprite bindings and selection.
"""

from .mapping import Mapping, PreferencesError, SpriteMapping
from .matcher import SpriteMatcher

__all__ = [
    'Mapping',
    'PreferencesError',
    'SpriteMapping',
    'SpriteMatcher',
]
