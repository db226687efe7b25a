"""
Assembles yt-dlp argument lists from the configuration and the download intent.
"""

from pathlib import Path

from md_cli.models.config import DownloadConfig, Preset, Settings
from md_cli.models.intent import DownloadIntent
from md_cli.utils.path import output_template


def build_probe_command(
    config: DownloadConfig, settings: Settings, workdir: Path
) -> list[str]:
    """Command that writes the media's info JSON into `workdir` without downloading."""
    command = [settings.downloader]
    if config.quiet:
        command.append("--quiet")
    command += [
        "--write-info-json",
        "--skip-download",
        "--no-playlist",
        "-P",
        str(workdir),
        config.url,
    ]
    command += config.extras
    return command


def build_download_command(
    config: DownloadConfig,
    intent: DownloadIntent,
    info_json_path: Path,
    settings: Settings,
    output_dir: Path | None = None,
) -> list[str]:
    """
    Command that downloads the media described by the info JSON at `info_json_path`.

    Flags follow a fixed order and the pass-through extras always come last, so
    identical inputs always yield an identical list.
    """
    command = [settings.downloader]

    if config.quiet:
        command.append("--quiet")
    if config.verbosity >= 2:
        command.append("--verbose")

    if output_dir is not None:
        command += ["-P", str(output_dir)]

    if intent.preset is Preset.BEST_AUDIO:
        command.append("-x")

    command.append(
        "--embed-thumbnail" if intent.embed_thumbnail else "--no-embed-thumbnail"
    )
    command.append(
        "--embed-chapters" if intent.embed_chapters else "--no-embed-chapters"
    )
    if intent.subtitle_language:
        command += ["--embed-subs", "--sub-langs", intent.subtitle_language]

    command += [
        "--load-info-json",
        str(info_json_path),
        "--no-playlist",
        "-o",
        output_template(intent.title),
        "-f",
        intent.format_selector,
    ]
    command += config.extras
    return command
