"""
Models for the subset of yt-dlp's info JSON that md relies on.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MediaFormat(BaseModel):
    """A single downloadable format of a media item."""

    model_config = ConfigDict(extra="ignore")

    format_id: str
    format_note: str | None = None
    ext: str | None = None
    acodec: str | None = None
    vcodec: str | None = None
    width: int | None = None
    height: int | None = None
    resolution: str | None = None
    asr: int | None = None
    filesize: int | None = None
    filesize_approx: float | None = None
    tbr: float | None = None

    @field_validator("acodec", "vcodec", "resolution", mode="before")
    @classmethod
    def literal_none(cls, v: Any) -> Any:
        # yt-dlp writes the string "none" for an absent codec or resolution
        if v == "none":
            return None
        return v

    @property
    def is_video_only(self) -> bool:
        return self.vcodec is not None and self.acodec is None

    @property
    def is_audio_only(self) -> bool:
        return self.acodec is not None and self.vcodec is None

    @property
    def size(self) -> float | None:
        return self.filesize or self.filesize_approx


class InfoJson(BaseModel):
    """Metadata of a media item as written by `yt-dlp --write-info-json`."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str = ""
    formats: list[MediaFormat] = Field(default_factory=list)
    categories: list[str] | None = None
    subtitles: dict[str, Any] | None = None
    automatic_captions: dict[str, Any] | None = None

    @property
    def is_music(self) -> bool:
        """True if any category is 'music', ignoring case."""
        return any(c.lower() == "music" for c in self.categories or [])

    def video_formats(self) -> list[MediaFormat]:
        """Video-only formats, widest first."""
        formats = [f for f in self.formats if f.is_video_only]
        return sorted(formats, key=lambda f: f.width or 0, reverse=True)

    def audio_formats(self) -> list[MediaFormat]:
        """Audio-only formats, highest sample rate first."""
        formats = [f for f in self.formats if f.is_audio_only]
        return sorted(formats, key=lambda f: f.asr or 0, reverse=True)

    def subtitle_languages(self) -> list[str]:
        return sorted(self.subtitles or {})
