"""
Overlay configuration: background image and sprite list loaded from YAML.
"""

from .config_loader import Config, ConfigError, SpriteEntry, load_config

__all__ = [
    'Config',
    'ConfigError',
    'SpriteEntry',
    'load_config',
]
