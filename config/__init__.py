"""
Configuration package for platform-specific settings.

Provides the abstract configuration interface and the desktop implementation
read from the environment.
"""
from .base import BaseConfiguration, ConfigurationError
from .desktop import DesktopConfiguration

__all__ = [
    'BaseConfiguration',
    'ConfigurationError',
    'DesktopConfiguration'
]
