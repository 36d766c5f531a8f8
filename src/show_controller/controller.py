"""
Overlay controller - the frame loop tying input, matching and rendering together.

Each frame:
- poll window/keyboard events and joystick hot-plug
- handle hotkeys (F1 wizard, F2 axis reset, Escape cancel/quit)
- poll every device into an InputState
- select one sprite per group and draw it over the background
"""

import logging
import time
from pathlib import Path
from typing import Dict, Optional

from show_controller.config import Config
from show_controller.display import Display
from show_controller.input import InputHandler, InputState, Joysticks, Keyboard
from show_controller.mapping import Mapping, SpriteMatcher
from show_controller.render import SpriteRenderer, TextRenderer
from show_controller.setup import BindingWizard

logger = logging.getLogger(__name__)


class ShowController:
    """
    Main controller for the visualizer.

    The controller handles:
    - Device hot-plug (delegated to Joysticks)
    - Hotkeys and the binding wizard
    - Main run loop
    """

    def __init__(self, config: Config, preferences_path: Path, fps: int = 60,
                 deadzone: float = 0.15, backend: str = 'pygame',
                 pygame_module=None, keyboard: Optional[Keyboard] = None):
        """
        Initialize the controller.

        Args:
            config: Overlay configuration
            preferences_path: Bindings file (loaded now, written by the wizard)
            fps: Target frames per second
            deadzone: Minimum axis travel from neutral that counts as pushed
            backend: Display backend ('pygame' or 'headless')
            pygame_module: pygame module (imported when not given)
            keyboard: Event source for the headless backend
        """
        if pygame_module is None:
            import pygame as pygame_module
        self.pygame = pygame_module

        self.config = config
        self.preferences_path = Path(preferences_path)
        self.fps = fps
        self.frame_time = 1.0 / fps

        # Load images first: the window takes the background's size
        self.sprite_renderer = SpriteRenderer(config)
        self.width = self.sprite_renderer.width
        self.height = self.sprite_renderer.height

        # Layer 0: background + sprites
        # Layer 1: wizard overlay (black is transparent)
        if backend == 'pygame':
            backend_kwargs = {'pygame_module': self.pygame}
        else:
            backend_kwargs = {'keyboard': keyboard}
        self.display = Display(self.width, self.height, num_layers=2, backend=backend, **backend_kwargs)
        self.sprite_layer = self.display.get_layer(0)
        self.overlay_layer = self.display.get_layer(1)
        self.text_renderer = TextRenderer(self.overlay_layer)

        self.mapping = Mapping.load(self.preferences_path)
        self.matcher = SpriteMatcher(config, self.mapping)
        self.wizard = BindingWizard(config, self.mapping, self.preferences_path)

        self.input_handler = InputHandler()
        self.joysticks = Joysticks(self.pygame, deadzone=deadzone)

        self.running = False
        self.frame_count = 0
        self.selection: Dict[int, int] = {}

    def step(self) -> bool:
        """
        Run a single frame.

        Returns:
            False when the application should exit
        """
        events = self.display.handle_events()
        self.input_handler.update(events)

        if self.input_handler.is_quit_requested():
            return False

        for device_index in events.devices_added:
            self.joysticks.add(device_index)
        for instance_id in events.devices_removed:
            self.joysticks.remove(instance_id)

        state = self.joysticks.poll(self.input_handler.get_held_keys())

        if self.input_handler.is_key_pressed('f2'):
            self.joysticks.reset_limits()
        if self.input_handler.is_key_pressed('escape'):
            if not self.wizard.active:
                return False
            self.wizard.cancel()
        elif self.input_handler.is_key_pressed('f1'):
            self.wizard.advance(state)

        self.wizard.observe(state)
        self._render(state)
        self.frame_count += 1
        return True

    def _render(self, state: InputState):
        sprite = self.wizard.current_sprite()
        if sprite is not None:
            self.selection = {self.config.sprites[sprite].group: sprite}
        else:
            self.selection = self.matcher.select(state.active, state.active_inputs())

        self.sprite_renderer.render(self.sprite_layer, self.selection)

        self.text_renderer.clear()
        if self.wizard.active:
            scale = 2 if self.width >= 320 else 1
            self.text_renderer.draw_panel(self.wizard.prompt_lines(state), scale=scale)

        self.display.show()

    def run(self, max_frames: int = 0):
        """
        Main run loop.

        Args:
            max_frames: Stop after this many frames (0 runs until quit)
        """
        logger.info("Starting controller at %d fps", self.fps)
        self.running = True

        while self.running:
            frame_start = time.time()

            if not self.step():
                break
            if max_frames and self.frame_count >= max_frames:
                break

            # Frame rate limiting
            elapsed = time.time() - frame_start
            if elapsed < self.frame_time:
                time.sleep(self.frame_time - elapsed)

        self.running = False

    def cleanup(self):
        """Release devices and close the window."""
        logger.info("Cleaning up...")
        self.joysticks.cleanup()
        self.display.cleanup()
