"""
Utilities for file names, output templates and the user's directories.
"""

import os
from pathlib import Path

import platformdirs
from pathvalidate import sanitize_filename


def get_settings_file() -> Path:
    """Location of the settings file; MD_CONFIG overrides the default."""
    if override := os.getenv("MD_CONFIG"):
        return Path(override).expanduser()
    return Path(platformdirs.user_config_dir("md")) / "config.ini"


def output_template(title: str) -> str:
    """
    Builds a yt-dlp output template from a user supplied title.

    The title is reduced to a single file name and '%' is escaped so yt-dlp
    does not read it as a template field. An empty title falls back to the
    media's own title.
    """
    name = sanitize_filename(title.strip(), platform="auto")
    if not name:
        return "%(title)s.%(ext)s"
    return f"{name.replace('%', '%%')}.%(ext)s"


def user_media_dir(audio: bool) -> Path:
    """
    Returns the user's music directory for audio, the videos directory otherwise.

    On Linux this honours the XDG user-dirs.dirs file and the XDG_MUSIC_DIR /
    XDG_VIDEOS_DIR variables, falling back to ~/Music or ~/Videos.
    """
    if audio:
        return Path(platformdirs.user_music_dir())
    return Path(platformdirs.user_videos_dir())
