"""
Joystick polling via pygame.joystick.

Every connected joystick is opened and read each frame. Buttons, calibrated
axes and hats are turned into Input sets, grouped by device GUID, alongside
the keyboard's held keys under the pseudo device KEYBOARD.
"""

import logging
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .axis_limits import AxisZone, JoystickLimits
from .inputs import HAT_CENTER, Axis, Button, Hat, Input, Key, hat_state

logger = logging.getLogger(__name__)

KEYBOARD = 'Keyboard'


class InputState:
    """Inputs held on every device for one frame."""

    def __init__(self, pressed: Dict[str, FrozenSet[Input]], active: Optional[str]):
        """
        Args:
            pressed: device guid -> inputs currently held on it
            active: guid of the device that most recently pressed something
        """
        self.pressed = pressed
        self.active = active

    def active_inputs(self) -> FrozenSet[Input]:
        """Inputs held on the active device."""
        if self.active is None:
            return frozenset()
        return self.pressed.get(self.active, frozenset())

    def released(self) -> bool:
        """True when nothing is held on any device."""
        return not any(self.pressed.values())

    def __repr__(self) -> str:
        return f"InputState(active={self.active}, pressed={self.pressed})"


class Joysticks:
    """
    Open joysticks plus axis calibration.

    Compatible with the pygame joystick interface; the pygame module is
    passed in so tests can substitute a fake one.
    """

    def __init__(self, pygame_module, deadzone: float = 0.15):
        """
        Initialize joystick polling and open every connected device.

        Args:
            pygame_module: The pygame module (passed to avoid import issues)
            deadzone: Minimum axis travel from neutral that counts as pushed
        """
        self.pygame = pygame_module
        self.joysticks: Dict[int, Any] = {}  # instance id -> joystick
        self.limits = JoystickLimits(deadzone)
        self.active: Optional[str] = None
        self._previous: Dict[str, FrozenSet[Input]] = {}

        self.pygame.joystick.init()

        count = self.pygame.joystick.get_count()
        if count == 0:
            logger.warning("No gamepad/joystick detected; keyboard bindings only")

        for index in range(count):
            self.add(index)

    def add(self, device_index: int):
        """Open the joystick at device_index (hot-plug or startup)."""
        try:
            joystick = self.pygame.joystick.Joystick(device_index)
        except self.pygame.error as e:
            logger.warning("Could not open joystick %d: %s", device_index, e)
            return

        instance_id = joystick.get_instance_id()
        self.joysticks[instance_id] = joystick

        logger.info(
            "Gamepad connected: %s (guid %s, %d axes, %d buttons, %d hats)",
            joystick.get_name(), joystick.get_guid(),
            joystick.get_numaxes(), joystick.get_numbuttons(), joystick.get_numhats(),
        )

    def remove(self, instance_id: int):
        """Close the joystick with the given instance id."""
        joystick = self.joysticks.pop(instance_id, None)
        if joystick is None:
            return

        logger.info("Gamepad disconnected: %s", joystick.get_name())
        joystick.quit()

    def reset_limits(self):
        """Take the current axis positions as the new neutral values."""
        self.limits.reset()
        logger.info("Axis neutral positions reset")

    def _read(self, joystick, guid: str) -> Set[Input]:
        pressed: Set[Input] = set()

        for axis in range(joystick.get_numaxes()):
            value = joystick.get_axis(axis)
            self.limits.update(guid, axis, value)
            zone = self.limits.zone(guid, axis, value)
            if zone == AxisZone.MIN:
                pressed.add(Axis.min(axis))
            elif zone == AxisZone.MAX:
                pressed.add(Axis.max(axis))

        for button in range(joystick.get_numbuttons()):
            if joystick.get_button(button):
                pressed.add(Button(button))

        for hat in range(joystick.get_numhats()):
            state = hat_state(joystick.get_hat(hat))
            if state != HAT_CENTER:
                pressed.add(Hat(hat, state))

        return pressed

    def poll(self, keys_held: Iterable[str] = ()) -> InputState:
        """
        Read every device.

        Args:
            keys_held: Names of keyboard keys currently held

        Returns:
            InputState for this frame
        """
        pressed: Dict[str, Set[Input]] = {}

        for joystick in list(self.joysticks.values()):
            guid = joystick.get_guid()
            try:
                inputs = self._read(joystick, guid)
            except self.pygame.error as e:
                logger.warning("Error reading gamepad %s: %s", joystick.get_name(), e)
                continue
            pressed.setdefault(guid, set()).update(inputs)

        keys = {Key(name) for name in keys_held}
        if keys:
            pressed[KEYBOARD] = keys

        frozen = {guid: frozenset(inputs) for guid, inputs in pressed.items()}

        # The device that just pressed something new takes over
        for guid, inputs in frozen.items():
            if inputs - self._previous.get(guid, frozenset()):
                self.active = guid
        # An idle active device hands over to the last one still holding inputs
        if not frozen.get(self.active):
            holding = [guid for guid, inputs in frozen.items() if inputs]
            if holding:
                self.active = holding[-1]
        self._previous = frozen

        return InputState(frozen, self.active)

    def devices(self) -> List[Tuple[int, str, str]]:
        """List open devices as (instance id, name, guid) tuples."""
        return [
            (instance_id, joystick.get_name(), joystick.get_guid())
            for instance_id, joystick in self.joysticks.items()
        ]

    def cleanup(self):
        """Close all joysticks."""
        for instance_id in list(self.joysticks):
            self.remove(instance_id)

    def is_connected(self) -> bool:
        """Check if any joystick is connected."""
        return bool(self.joysticks)
