"""
The interactive prompt flow that turns a configuration into a download intent.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from md_cli.cli.formatters import format_audio_option, format_video_option
from md_cli.exceptions import MetadataError
from md_cli.models.config import DownloadConfig, Preset, Settings
from md_cli.models.info import InfoJson
from md_cli.models.intent import DownloadIntent

log = logging.getLogger(__name__)

PRESET_ORDER = [
    Preset.CUSTOM,
    Preset.BEST,
    Preset.BEST_AUDIO,
    Preset.BEST_VIDEO,
    Preset.MANUAL,
]
MUSIC_PRESET_ORDER = [
    Preset.BEST_AUDIO,
    Preset.CUSTOM,
    Preset.BEST,
    Preset.BEST_VIDEO,
    Preset.MANUAL,
]


class Prompter(Protocol):
    """Asks the user questions. An empty answer always selects the default."""

    def ensure_interactive(self) -> None: ...

    def choose(self, message: str, options: Sequence[str], default: int = 0) -> int:
        """Returns the index of the selected option."""
        ...

    def confirm(self, message: str, default: bool) -> bool: ...

    def text(self, message: str, default: str = "", hint: str | None = None) -> str: ...


class PromptFlow:
    """
    Asks, in order: preset (unless pinned), formats for the custom and manual
    presets, title, thumbnail embedding, chapter embedding, subtitle language.
    """

    def __init__(
        self, prompter: Prompter, settings: Settings, thumbnail_supported: bool
    ):
        self.prompter = prompter
        self.settings = settings
        self.thumbnail_supported = thumbnail_supported

    def resolve(self, config: DownloadConfig, info: InfoJson) -> DownloadIntent:
        preset = config.preset or self.ask_preset(info)
        log.debug(f"Using preset '{preset.value}'")

        selector = self.ask_format(preset, info)
        title = self.prompter.text("Title?", default=info.title)

        embed_thumbnail = self.prompter.confirm(
            "Embed thumbnail?",
            default=(
                preset in (Preset.BEST_AUDIO, Preset.BEST_VIDEO)
                and self.thumbnail_supported
            ),
        )

        embed_chapters = False
        subtitle_language = None
        if preset is not Preset.BEST_AUDIO:
            embed_chapters = self.prompter.confirm(
                "Embed chapters?",
                default=preset in (Preset.BEST, Preset.BEST_VIDEO),
            )
            subtitle_language = self.ask_subtitles(info)

        return DownloadIntent(
            preset=preset,
            format_selector=selector,
            title=title,
            embed_thumbnail=embed_thumbnail,
            embed_chapters=embed_chapters,
            subtitle_language=subtitle_language,
        )

    def ask_preset(self, info: InfoJson) -> Preset:
        presets = MUSIC_PRESET_ORDER if info.is_music else PRESET_ORDER
        index = self.prompter.choose(
            "Which preset do you want to use?", [p.label for p in presets]
        )
        return presets[index]

    def ask_format(self, preset: Preset, info: InfoJson) -> str:
        """Returns the yt-dlp format selector for the preset."""
        if preset is Preset.CUSTOM:
            video = info.video_formats()
            audio = info.audio_formats()
            if not video or not audio:
                raise MetadataError(
                    "No separate video and audio formats are available for a custom"
                    " selection. Try the 'best' preset instead."
                )
            video_index = self.prompter.choose(
                "Which video format do you want?",
                [format_video_option(f) for f in video],
            )
            audio_index = self.prompter.choose(
                "Which audio format do you want?",
                [format_audio_option(f) for f in audio],
            )
            return f"{video[video_index].format_id}+{audio[audio_index].format_id}"

        if preset is Preset.MANUAL:
            selector = self.prompter.text(
                "Format?", default=self.settings.selector_for(Preset.BEST)
            )
            return selector.strip() or self.settings.selector_for(Preset.BEST)

        return self.settings.selector_for(preset)

    def ask_subtitles(self, info: InfoJson) -> str | None:
        languages = info.subtitle_languages()
        hint = f"available: {', '.join(languages)}" if languages else None
        answer = self.prompter.text(
            "Subtitle language? (empty for none)", default="", hint=hint
        )
        return answer.strip() or None
