"""
Data Models Layer.

This package contains Pydantic models that define the core data structures
used throughout the application: the parsed command line, the settings file,
yt-dlp's info JSON and the resolved download intent.
"""

from .config import DownloadConfig, Preset, Settings
from .info import InfoJson, MediaFormat
from .intent import DownloadIntent

__all__ = [
    "DownloadConfig",
    "DownloadIntent",
    "InfoJson",
    "MediaFormat",
    "Preset",
    "Settings",
]
