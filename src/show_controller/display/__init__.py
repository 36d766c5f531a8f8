"""
Display system: layered framebuffers shown through a pygame window or
kept in memory (headless).
"""

from .display import Display
from .display_backend import DisplayBackend
from .headless_backend import HeadlessBackend

__all__ = ['Display', 'DisplayBackend', 'HeadlessBackend']
