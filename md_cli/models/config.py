"""
Pydantic models for the command-line configuration and the user settings.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Preset(str, Enum):
    """Format-selection policies offered to the user."""

    CUSTOM = "custom"
    BEST = "best"
    BEST_AUDIO = "best-audio"
    BEST_VIDEO = "best-video"
    # Prompt-only: the user types the selector.
    MANUAL = "manual"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ")


# Presets that can be pinned with -p/--preset
CLI_PRESETS = [
    Preset.CUSTOM.value,
    Preset.BEST.value,
    Preset.BEST_AUDIO.value,
    Preset.BEST_VIDEO.value,
]

# Presets whose selector is fixed rather than chosen interactively
DEFAULT_FORMAT_SELECTORS = {
    Preset.BEST: "bv*+ba/b",
    Preset.BEST_AUDIO: "bestaudio",
    Preset.BEST_VIDEO: "bestvideo",
}


class DownloadConfig(BaseModel):
    """The options given on the command line. Immutable once parsed."""

    model_config = ConfigDict(frozen=True)

    url: str
    preset: Preset | None = None
    verbosity: int = Field(default=0, ge=0)
    quiet: bool = False
    use_xdg_dirs: bool = False
    extras: tuple[str, ...] = ()

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("URL cannot be empty.")
        return v


class Settings(BaseModel):
    """A validated model of the optional settings file."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    downloader: str = "yt-dlp"
    thumbnail_probe: str = "mutagen-inspect"
    format_selectors: dict[Preset, str] = Field(
        default_factory=lambda: dict(DEFAULT_FORMAT_SELECTORS)
    )

    @field_validator("downloader")
    @classmethod
    def validate_downloader(cls, v: str) -> str:
        if not v:
            raise ValueError("Downloader executable cannot be empty.")
        return v

    @field_validator("format_selectors")
    @classmethod
    def validate_selectors(cls, v: dict[Preset, str]) -> dict[Preset, str]:
        """Only fixed presets may be mapped, and each needs a selector."""
        for preset, selector in v.items():
            if preset not in DEFAULT_FORMAT_SELECTORS:
                raise ValueError(
                    f"Preset '{preset.value}' is chosen interactively and cannot"
                    " be mapped to a selector."
                )
            if not selector.strip():
                raise ValueError(f"Selector for '{preset.value}' cannot be empty.")
        return {**DEFAULT_FORMAT_SELECTORS, **v}

    def selector_for(self, preset: Preset) -> str:
        return self.format_selectors[preset]
