"""
Overlay configuration loader - reads the YAML file describing the
background image and the sprite list.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the overlay configuration file is malformed."""


class SpriteEntry:
    """Single sprite declared in the configuration."""

    def __init__(self, group: int, name: str, path: Path, default: bool = False):
        """
        Initialize sprite entry.

        Args:
            group: Group identifier (sprites in a group are mutually exclusive)
            name: Human-readable label shown by the binding wizard
            path: Image file path
            default: Whether this sprite is the group's fallback
        """
        self.group = group
        self.name = name
        self.path = path
        self.default = default

    def __repr__(self):
        flag = ", default" if self.default else ""
        return f"SpriteEntry(group={self.group}, name='{self.name}'{flag})"


class Config:
    """Overlay configuration: background image plus ordered sprites."""

    def __init__(self, background: Path, sprites: List[SpriteEntry]):
        self.background = background
        self.sprites = sprites

    def groups(self) -> List[int]:
        """Group identifiers in order of first appearance."""
        seen: List[int] = []
        for sprite in self.sprites:
            if sprite.group not in seen:
                seen.append(sprite.group)
        return seen

    def default_sprites(self) -> Dict[int, int]:
        """
        Map each group to the index of its default sprite.

        Groups without a default sprite are absent from the result.
        """
        defaults: Dict[int, int] = {}
        for index, sprite in enumerate(self.sprites):
            if sprite.default and sprite.group not in defaults:
                defaults[sprite.group] = index
        return defaults

    def bindable_sprites(self) -> List[int]:
        """Indices of sprites the binding wizard steps through (non-default)."""
        return [index for index, sprite in enumerate(self.sprites) if not sprite.default]

    @classmethod
    def from_dict(cls, config_dict: dict, base_dir: Optional[Path] = None) -> 'Config':
        """
        Create Config from dictionary (loaded from YAML).

        Args:
            config_dict: Configuration dictionary
            base_dir: Directory relative image paths are resolved against

        Returns:
            Config instance
        """
        if not isinstance(config_dict, dict):
            raise ConfigError("Configuration must be a mapping with 'background' and 'sprites'")

        base_dir = base_dir or Path('.')

        if 'background' not in config_dict:
            raise ConfigError("Missing required key 'background'")
        background = _resolve_path(config_dict['background'], base_dir, 'background')

        sprites_data = config_dict.get('sprites') or []
        if not isinstance(sprites_data, list):
            raise ConfigError("'sprites' must be a list")

        sprites = []
        for position, s in enumerate(sprites_data):
            if not isinstance(s, dict):
                raise ConfigError(f"Sprite #{position} must be a mapping")

            missing = [key for key in ('group', 'name', 'path') if key not in s]
            if missing:
                raise ConfigError(f"Sprite #{position} is missing {', '.join(missing)}")

            group = s['group']
            if isinstance(group, bool) or not isinstance(group, int):
                raise ConfigError(f"Sprite #{position} group must be an integer, got {group!r}")

            default = s.get('default', False)
            if not isinstance(default, bool):
                raise ConfigError(f"Sprite #{position} default must be true or false, got {default!r}")

            sprites.append(SpriteEntry(
                group=group,
                name=str(s['name']),
                path=_resolve_path(s['path'], base_dir, f"sprite #{position} path"),
                default=default,
            ))

        config = cls(background, sprites)
        _check_defaults(config)
        return config


def _resolve_path(value: Union[str, Path], base_dir: Path, what: str) -> Path:
    if not isinstance(value, (str, Path)) or not str(value):
        raise ConfigError(f"{what} must be a file path, got {value!r}")
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path


def _check_defaults(config: Config):
    counts: Dict[int, int] = {}
    for sprite in config.sprites:
        if sprite.default:
            counts[sprite.group] = counts.get(sprite.group, 0) + 1

    duplicated = sorted(group for group, count in counts.items() if count > 1)
    if duplicated:
        raise ConfigError(f"Groups with more than one default sprite: {duplicated}")


def load_config(config_path: Union[str, Path]) -> Config:
    """
    Load overlay configuration from YAML file.

    Args:
        config_path: Path to config file

    Returns:
        Config instance

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file is unreadable, not valid YAML or not a valid config
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{config_path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    try:
        config = Config.from_dict(config_dict, base_dir=config_path.parent)
    except ConfigError as e:
        raise ConfigError(f"{config_path}: {e}") from e

    logger.info("Loaded %d sprites in %d groups from %s",
                len(config.sprites), len(config.groups()), config_path)
    return config
