"""
Sprite bindings - which held inputs show which sprite, per device.

Bindings are recorded by the binding wizard and persisted as YAML in the
user preferences file.
"""

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Union

import yaml

from ..input.inputs import Input

logger = logging.getLogger(__name__)


class PreferencesError(ValueError):
    """Raised when the preferences file cannot be parsed."""


class SpriteMapping:
    """A set of inputs that, when all held, selects a sprite."""

    def __init__(self, inputs: Iterable[Input], sprite: int):
        self.inputs: FrozenSet[Input] = frozenset(inputs)
        self.sprite = sprite

    def matches(self, pressed: FrozenSet[Input]) -> bool:
        """True when every bound input is currently held."""
        return self.inputs <= pressed

    def sort_key(self):
        # Most specific bindings first, then config order
        return (-len(self.inputs), self.sprite)

    def to_dict(self) -> dict:
        return {
            'inputs': sorted(i.to_string() for i in self.inputs),
            'sprite': self.sprite,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, SpriteMapping):
            return NotImplemented
        return self.inputs == other.inputs and self.sprite == other.sprite

    def __hash__(self) -> int:
        return hash((self.inputs, self.sprite))

    def __repr__(self) -> str:
        names = ", ".join(sorted(i.to_string() for i in self.inputs))
        return f"SpriteMapping([{names}] -> {self.sprite})"


class Mapping:
    """Per-device ordered lists of sprite mappings."""

    def __init__(self, devices: Optional[Dict[str, List[SpriteMapping]]] = None):
        self.devices: Dict[str, List[SpriteMapping]] = devices or {}

    def push(self, guid: str, inputs: Iterable[Input], sprite: int):
        """
        Bind inputs to sprite on a device.

        An empty input set removes every binding of sprite on that device.
        """
        inputs = frozenset(inputs)
        entries = self.devices.setdefault(guid, [])

        if not inputs:
            entries[:] = [sm for sm in entries if sm.sprite != sprite]
            if not entries:
                del self.devices[guid]
            return

        sprite_mapping = SpriteMapping(inputs, sprite)
        if sprite_mapping not in entries:
            entries.append(sprite_mapping)
            entries.sort(key=SpriteMapping.sort_key)

    def entries(self, guid: str) -> List[SpriteMapping]:
        """Mappings for a device, most specific first."""
        return self.devices.get(guid, [])

    def bindings(self, guid: str, sprite: int) -> List[FrozenSet[Input]]:
        """Input sets bound to sprite on a device."""
        return [sm.inputs for sm in self.entries(guid) if sm.sprite == sprite]

    def sprites(self, guid: str, pressed: FrozenSet[Input]) -> List[int]:
        """Sprites whose bindings are satisfied by pressed, most specific first."""
        return [sm.sprite for sm in self.entries(guid) if sm.matches(pressed)]

    def copy(self) -> 'Mapping':
        return Mapping({guid: list(entries) for guid, entries in self.devices.items()})

    def to_dict(self) -> dict:
        return {
            'joysticks': {
                guid: [sm.to_dict() for sm in entries]
                for guid, entries in self.devices.items()
            }
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'Mapping':
        """
        Create Mapping from dictionary (loaded from YAML).

        Raises:
            PreferencesError: If the structure or an input string is invalid
        """
        mapping = cls()
        if data is None:
            return mapping
        if not isinstance(data, dict):
            raise PreferencesError("Preferences must be a mapping with a 'joysticks' key")

        joysticks = data.get('joysticks') or {}
        if not isinstance(joysticks, dict):
            raise PreferencesError("'joysticks' must be a mapping of device guid to bindings")

        for guid, entries in joysticks.items():
            if not isinstance(entries, list):
                raise PreferencesError(f"Bindings for {guid} must be a list")
            for entry in entries:
                if not isinstance(entry, dict) or 'sprite' not in entry:
                    raise PreferencesError(f"Invalid binding for {guid}: {entry!r}")
                sprite = entry['sprite']
                if isinstance(sprite, bool) or not isinstance(sprite, int) or sprite < 0:
                    raise PreferencesError(f"Invalid sprite index for {guid}: {sprite!r}")
                try:
                    inputs = [Input.parse(text) for text in entry.get('inputs') or []]
                except ValueError as e:
                    raise PreferencesError(f"Invalid binding for {guid}: {e}") from e
                if inputs:
                    mapping.push(str(guid), inputs, sprite)

        return mapping

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'Mapping':
        """
        Load bindings from a YAML preferences file.

        A missing file yields an empty mapping.
        """
        path = Path(path)
        if not path.exists():
            logger.info("No preferences at %s, starting without bindings", path)
            return cls()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise PreferencesError(f"Invalid YAML in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise PreferencesError(f"{path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise PreferencesError(f"Cannot read {path}: {e}") from e

        mapping = cls.from_dict(data)
        logger.info("Loaded bindings for %d devices from %s", len(mapping.devices), path)
        return mapping

    def save(self, path: Union[str, Path]):
        """Write bindings to a YAML preferences file, creating its directory."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)

        logger.info("Saved bindings for %d devices to %s", len(self.devices), path)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.devices == other.devices

    def __repr__(self) -> str:
        return f"Mapping({self.devices})"
