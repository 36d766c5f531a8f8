"""
Shared fixtures: generated overlay images and a fake pygame module.
"""

from pathlib import Path
from types import SimpleNamespace

import pytest
import yaml
from PIL import Image

from show_controller.input.keyboard import Keyboard, KeyboardState

WIDTH, HEIGHT = 8, 4


def write_image(path: Path, color, size=(WIDTH, HEIGHT)):
    """Write a solid RGBA image."""
    Image.new("RGBA", size, color).save(path)
    return path


OVERLAY_SPRITES = [
    # name, group, default, color
    ("Idle", 1, True, (10, 10, 10, 255)),
    ("Up", 1, False, (200, 0, 0, 255)),
    ("Up Right", 1, False, (0, 200, 0, 255)),
    ("Rest", 2, True, (0, 0, 200, 255)),
    ("A", 2, False, (50, 60, 70, 255)),
]


@pytest.fixture
def overlay_dir(tmp_path):
    """Directory with a background, sprite images and config.yaml."""
    write_image(tmp_path / "background.png", (100, 100, 100, 255))

    sprites = []
    for index, (name, group, default, color) in enumerate(OVERLAY_SPRITES):
        file_name = f"sprite{index}.png"
        write_image(tmp_path / file_name, color)
        entry = {"group": group, "name": name, "path": file_name}
        if default:
            entry["default"] = True
        sprites.append(entry)

    with open(tmp_path / "config.yaml", "w") as f:
        yaml.safe_dump({"background": "background.png", "sprites": sprites}, f)

    return tmp_path


@pytest.fixture
def config_path(overlay_dir):
    return overlay_dir / "config.yaml"


class FakePygameError(Exception):
    pass


class FakeJoystick:
    """Scriptable stand-in for pygame.joystick.Joystick."""

    def __init__(self, instance_id, guid, name="Fake Pad", axes=None, buttons=None, hats=None):
        self.instance_id = instance_id
        self.guid = guid
        self.name = name
        self.axes = list(axes or [])
        self.buttons = list(buttons or [])
        self.hats = list(hats or [])
        self.closed = False
        self.fail = False

    def get_instance_id(self):
        return self.instance_id

    def get_guid(self):
        return self.guid

    def get_name(self):
        return self.name

    def get_numaxes(self):
        return len(self.axes)

    def get_axis(self, i):
        if self.fail:
            raise FakePygameError("read failed")
        return self.axes[i]

    def get_numbuttons(self):
        return len(self.buttons)

    def get_button(self, i):
        return self.buttons[i]

    def get_numhats(self):
        return len(self.hats)

    def get_hat(self, i):
        return self.hats[i]

    def quit(self):
        self.closed = True


class FakePygame:
    """Minimal pygame replacement covering joystick, event and key APIs."""

    QUIT = 256
    KEYDOWN = 768
    KEYUP = 769
    JOYDEVICEADDED = 1541
    JOYDEVICEREMOVED = 1542
    WINDOWFOCUSLOST = 32784

    error = FakePygameError

    def __init__(self, devices=None):
        self.devices = list(devices or [])
        self.queue = []
        pygame = self

        self.joystick = SimpleNamespace(
            init=lambda: None,
            get_count=lambda: len(pygame.devices),
            Joystick=pygame._open,
        )
        self.event = SimpleNamespace(get=pygame._drain)
        self.key = SimpleNamespace(name=lambda key: key)

    def _open(self, index):
        if index >= len(self.devices):
            raise FakePygameError(f"Invalid joystick device number {index}")
        return self.devices[index]

    def _drain(self):
        events, self.queue = self.queue, []
        return events

    def post(self, type, **attrs):
        self.queue.append(SimpleNamespace(type=type, **attrs))


@pytest.fixture
def fake_pygame():
    return FakePygame()


class ScriptedKeyboard(Keyboard):
    """Keyboard returning queued states, then empty ones."""

    def __init__(self):
        self.states = []
        self.held = set()
        self.cleaned_up = False

    def press(self, *keys):
        state = KeyboardState()
        state.keys_pressed = list(keys)
        self.states.append(state)

    def quit(self):
        state = KeyboardState()
        state.quit = True
        self.states.append(state)

    def poll(self):
        state = self.states.pop(0) if self.states else KeyboardState()
        state.keys_held = set(self.held)
        return state

    def cleanup(self):
        self.cleaned_up = True


@pytest.fixture
def keyboard():
    return ScriptedKeyboard()
