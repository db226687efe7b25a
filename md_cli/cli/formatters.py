"""
Functions for formatting and displaying data in the console using Rich.
"""

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from md_cli.exceptions import (
    ConfigurationError,
    DownloaderError,
    DownloaderNotFoundError,
    InputError,
    MetadataError,
)
from md_cli.models.info import MediaFormat
from md_cli.utils.formatting import format_size


def _append_details(parts: list[str], media_format: MediaFormat) -> None:
    if media_format.size:
        parts.append(format_size(media_format.size))
    if media_format.format_note:
        parts.append(media_format.format_note)


def format_video_option(media_format: MediaFormat) -> str:
    """Label for a video-only format, e.g. 'avc1 1920x1080 12.3 MB 1080p'."""
    parts = [f"{media_format.vcodec or '':4.4}"]
    if media_format.resolution:
        parts.append(media_format.resolution)
    _append_details(parts, media_format)
    return f"{media_format.format_id} - {' '.join(parts)}"


def format_audio_option(media_format: MediaFormat) -> str:
    """Label for an audio-only format, e.g. 'opus 48k 3.1 MB medium'."""
    parts = [f"{media_format.acodec or '':4.4}"]
    if media_format.asr:
        parts.append(f"{media_format.asr // 1000}k")
    _append_details(parts, media_format)
    return f"{media_format.format_id} - {' '.join(parts)}"


def format_options_table(options: list[str], default: int = 0) -> Table:
    """Numbered list of choices; the default is highlighted."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()
    for index, option in enumerate(options):
        style = "bold" if index == default else ""
        table.add_row(f"{index + 1}.", Text(option, style=style))
    return table


ERROR_SUGGESTIONS = {
    InputError: [
        "md asks questions before downloading; run it from a terminal.",
        "Do not pipe or redirect standard input.",
    ],
    DownloaderNotFoundError: [
        "Install yt-dlp and make sure it is on your PATH.",
        "Or set 'downloader' in the settings file to its full path.",
    ],
    DownloaderError: [
        "Check the yt-dlp output above for the cause.",
        "Try updating yt-dlp: `yt-dlp -U`.",
        "Run the command with -vv to pass --verbose to yt-dlp.",
    ],
    MetadataError: [
        "Make sure the URL points to a single media item.",
        "Try another preset with the -p flag.",
    ],
    ConfigurationError: [
        "Check the settings file (see MD_CONFIG).",
        "Preset selectors belong in the [formats] section.",
    ],
}
DEFAULT_SUGGESTIONS = ["Run the command with -vv for detailed logs."]


def suggestions_for(error: Exception) -> list[str]:
    """Suggestions of the closest known exception class."""
    for cls in type(error).__mro__:
        if cls in ERROR_SUGGESTIONS:
            return ERROR_SUGGESTIONS[cls]
    return DEFAULT_SUGGESTIONS


def format_error_with_suggestions(error: Exception) -> Panel:
    """Renders an error and what the user can do about it as a Rich Panel."""
    body = Text()
    body.append(f"{type(error).__name__}: ", style="bold red")
    body.append(str(error))
    body.append("\n\nSuggestions\n", style="bold yellow")
    body.append("\n".join(f"• {line}" for line in suggestions_for(error)))

    return Panel(
        body,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )
