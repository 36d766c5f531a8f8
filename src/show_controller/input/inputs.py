"""
Physical input identifiers.

An Input names one thing a user can hold down: a joystick button, one end of
an axis, a hat direction, or a keyboard key. Inputs are hashable so the set
of currently held inputs can be compared against bindings.

Each input has a short text form which is what the preferences file stores:

    b3          button 3
    a1 min      axis 1 pushed towards its minimum
    a1 max      axis 1 pushed towards its maximum
    h0 ^>       hat 0 up-right
    k space     keyboard key "space"
"""

from dataclasses import dataclass
from typing import Tuple


class Direction:
    MIN = 'min'
    MAX = 'max'

    ALL = (MIN, MAX)


# pygame hat value (x, y) -> state symbol; y is +1 when pushed up
HAT_STATES = {
    (0, 1): '^',
    (1, 0): '>',
    (0, -1): 'v',
    (-1, 0): '<',
    (1, 1): '^>',
    (1, -1): 'v>',
    (-1, 1): '<^',
    (-1, -1): '<v',
}

HAT_CENTER = '*'


def hat_state(value: Tuple[int, int]) -> str:
    """Convert a pygame hat tuple to its state symbol ('*' when centered)."""
    return HAT_STATES.get(tuple(value), HAT_CENTER)


class Input:
    """Base class for all inputs."""

    def to_string(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_string()

    @staticmethod
    def parse(text: str) -> 'Input':
        """
        Parse the text form of an input.

        Raises:
            ValueError: If the text is not a valid input
        """
        if not isinstance(text, str):
            raise ValueError(f"Input must be a string, got {text!r}")

        text = text.strip()
        head, _, rest = text.partition(' ')
        rest = rest.strip()

        if head == 'k':
            if not rest:
                raise ValueError(f"Key input without a key name: {text!r}")
            return Key(rest)

        if len(head) < 2 or not head[1:].isdigit():
            raise ValueError(f"Unrecognized input: {text!r}")
        kind, number = head[0], int(head[1:])

        if kind == 'b' and not rest:
            return Button(number)
        if kind == 'a' and rest in Direction.ALL:
            return Axis(number, rest)
        if kind == 'h' and rest in HAT_STATES.values():
            return Hat(number, rest)

        raise ValueError(f"Unrecognized input: {text!r}")


@dataclass(frozen=True)
class Button(Input):
    button: int

    def to_string(self) -> str:
        return f"b{self.button}"


@dataclass(frozen=True)
class Axis(Input):
    axis: int
    direction: str

    @classmethod
    def min(cls, axis: int) -> 'Axis':
        return cls(axis, Direction.MIN)

    @classmethod
    def max(cls, axis: int) -> 'Axis':
        return cls(axis, Direction.MAX)

    def to_string(self) -> str:
        return f"a{self.axis} {self.direction}"


@dataclass(frozen=True)
class Hat(Input):
    hat: int
    state: str

    def to_string(self) -> str:
        return f"h{self.hat} {self.state}"


@dataclass(frozen=True)
class Key(Input):
    name: str

    def to_string(self) -> str:
        return f"k {self.name}"


def format_inputs(inputs) -> str:
    """Render a set of inputs as a stable, space-separated label."""
    return ", ".join(sorted(i.to_string() for i in inputs))
