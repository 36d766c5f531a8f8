"""
Sprite selection - picks the one sprite each group displays.
"""

import logging
from typing import Dict, FrozenSet, Optional

from ..config.config_loader import Config
from ..input.inputs import Input
from .mapping import Mapping

logger = logging.getLogger(__name__)


class SpriteMatcher:
    """
    Chooses at most one sprite per group from the held inputs.

    For each group the most specific satisfied binding wins (ties go to the
    sprite listed first in the config). A group with no satisfied binding
    falls back to its default sprite, or shows nothing if it has none.
    """

    def __init__(self, config: Config, mapping: Mapping):
        self.config = config
        self.mapping = mapping
        self.defaults = config.default_sprites()

    def select(self, guid: Optional[str], pressed: FrozenSet[Input]) -> Dict[int, int]:
        """
        Select sprites for the current input state.

        Args:
            guid: Active device guid (None when no device is active)
            pressed: Inputs held on the active device

        Returns:
            Dict of group -> sprite index
        """
        selected: Dict[int, int] = {}
        sprite_count = len(self.config.sprites)

        if guid is not None and pressed:
            # entries are ordered most specific first, so the first hit per group wins
            for sprite in self.mapping.sprites(guid, pressed):
                if sprite >= sprite_count:
                    logger.debug("Ignoring binding to unknown sprite %d", sprite)
                    continue
                group = self.config.sprites[sprite].group
                selected.setdefault(group, sprite)

        for group, sprite in self.defaults.items():
            selected.setdefault(group, sprite)

        return selected
