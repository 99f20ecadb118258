"""Utilities for the REDAXO image generator."""

from .config_manager import ConfigManager

__all__ = [
    'ConfigManager',
]
