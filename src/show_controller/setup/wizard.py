"""
Binding wizard - interactive recording of sprite bindings.

F1 starts the wizard. For each non-default sprite, in config order, the user
holds the inputs that should show it and presses F1 again. After the last
sprite the recorded bindings replace the live ones and are written to the
preferences file. Escape cancels and discards everything recorded.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..config.config_loader import Config
from ..input.inputs import format_inputs
from ..input.joysticks import InputState
from ..mapping.mapping import Mapping

logger = logging.getLogger(__name__)


class BindingWizard:
    """Steps through bindable sprites, recording held inputs for each."""

    def __init__(self, config: Config, mapping: Mapping, preferences_path: Path):
        """
        Initialize wizard.

        Args:
            config: Overlay configuration (defines the sprites to bind)
            mapping: Live mapping, replaced in place when the wizard finishes
            preferences_path: Where finished bindings are saved
        """
        self.config = config
        self.mapping = mapping
        self.preferences_path = Path(preferences_path)

        self.steps: List[int] = config.bindable_sprites()
        self.position = 0
        self.working: Optional[Mapping] = None
        self.device: Optional[str] = None

    @property
    def active(self) -> bool:
        return self.working is not None

    def current_sprite(self) -> Optional[int]:
        """Index of the sprite being bound, or None when idle."""
        if not self.active:
            return None
        return self.steps[self.position]

    def start(self):
        if not self.steps:
            logger.warning("No sprites to bind: every sprite is a default sprite")
            return

        self.working = self.mapping.copy()
        self.position = 0
        self.device = None
        logger.info("Binding wizard started (%d sprites)", len(self.steps))

    def observe(self, state: InputState):
        """Remember the last device that had input held during the wizard."""
        if self.active and state.active is not None and state.active_inputs():
            self.device = state.active

    def advance(self, state: InputState):
        """
        Handle F1: start the wizard, or record the current step and move on.

        Args:
            state: Current input state
        """
        if not self.active:
            self.start()
            return

        self.observe(state)
        sprite = self.steps[self.position]
        name = self.config.sprites[sprite].name
        inputs = state.active_inputs()

        if inputs:
            self.working.push(state.active, inputs, sprite)
            logger.info("Bound '%s' to [%s] on %s", name, format_inputs(inputs), state.active)
        elif self.device is not None:
            self.working.push(self.device, (), sprite)
            logger.info("Cleared bindings of '%s' on %s", name, self.device)
        else:
            logger.info("Skipped '%s' (nothing held)", name)

        self.position += 1
        if self.position >= len(self.steps):
            self.finish()

    def finish(self):
        """Commit recorded bindings and save them."""
        self.mapping.devices = self.working.devices
        self.working = None
        self.position = 0
        logger.info("Binding wizard finished")

        try:
            self.mapping.save(self.preferences_path)
        except OSError as e:
            logger.error("Could not save preferences to %s: %s", self.preferences_path, e)

    def cancel(self):
        """Discard recorded bindings."""
        if self.active:
            logger.info("Binding wizard cancelled")
        self.working = None
        self.position = 0
        self.device = None

    def prompt_lines(self, state: InputState) -> List[str]:
        """Text shown on the overlay while binding."""
        sprite = self.current_sprite()
        if sprite is None:
            return []

        entry = self.config.sprites[sprite]
        held = format_inputs(state.active_inputs()) or "-"
        return [
            f"BIND {self.position + 1}/{len(self.steps)}: {entry.name}",
            f"HELD: {held}",
            "HOLD INPUTS, F1 NEXT",
            "F2 RESET AXES, ESC CANCEL",
        ]
