"""
Storage Layer.

This package handles reading the user's settings file.
"""

from .config_manager import ConfigManager

__all__ = ["ConfigManager"]
