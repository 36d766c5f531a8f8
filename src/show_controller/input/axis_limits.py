"""
Axis calibration.

Analog axes do not all rest at zero: triggers usually rest at -1.0 and some
sticks drift. Every axis remembers the first value it reported as its
neutral position and widens its observed range as it moves, so that "pushed
towards min" and "pushed towards max" are judged relative to where the axis
actually rests.
"""

from typing import Dict, Tuple


class AxisZone:
    MIN = 'min'
    DEFAULT = 'default'
    MAX = 'max'


class AxisLimits:
    """Observed neutral value and range of a single axis."""

    def __init__(self, value: float):
        self.default = value
        self.min = value
        self.max = value

    def extend(self, value: float):
        """Widen the observed range to include value."""
        self.min = min(self.min, value)
        self.max = max(self.max, value)

    def zone(self, value: float, deadzone: float) -> str:
        """
        Classify value relative to the neutral position.

        Args:
            value: Current axis value
            deadzone: Minimum distance from neutral that counts as pushed

        Returns:
            AxisZone.MIN, AxisZone.DEFAULT or AxisZone.MAX
        """
        bound = max(deadzone, (self.max - self.min) / 8.0)

        if abs(value - self.default) < bound:
            return AxisZone.DEFAULT
        if value < self.default:
            return AxisZone.MIN
        return AxisZone.MAX

    def __repr__(self) -> str:
        return f"AxisLimits(default={self.default:+.2f}, min={self.min:+.2f}, max={self.max:+.2f})"


class JoystickLimits:
    """Axis limits for every (device guid, axis) pair seen so far."""

    def __init__(self, deadzone: float = 0.15):
        """
        Initialize limits.

        Args:
            deadzone: Minimum distance from neutral that counts as pushed
        """
        self.deadzone = deadzone
        self.limits: Dict[Tuple[str, int], AxisLimits] = {}

    def reset(self):
        """Forget all limits; the next reported values become the new neutrals."""
        self.limits.clear()

    def update(self, guid: str, axis: int, value: float):
        """Record an observed value."""
        key = (guid, axis)
        limits = self.limits.get(key)
        if limits is None:
            self.limits[key] = AxisLimits(value)
        else:
            limits.extend(value)

    def zone(self, guid: str, axis: int, value: float) -> str:
        """Classify value for the given axis (DEFAULT for unseen axes)."""
        limits = self.limits.get((guid, axis))
        if limits is None:
            return AxisZone.DEFAULT
        return limits.zone(value, self.deadzone)
