"""
The download intent: what the user decided to download and how.
"""

from pydantic import BaseModel, ConfigDict

from .config import Preset


class DownloadIntent(BaseModel):
    """Resolved answers of the prompt flow, consumed once to build the command."""

    model_config = ConfigDict(frozen=True)

    preset: Preset
    format_selector: str
    title: str
    embed_thumbnail: bool = False
    embed_chapters: bool = False
    subtitle_language: str | None = None
