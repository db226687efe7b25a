"""
The session coordinator: fetch metadata, ask the user, run the download.
"""

import logging
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path

from md_cli.core.flow import Prompter, PromptFlow
from md_cli.core.invocation import build_download_command
from md_cli.core.metadata import InfoJsonProbe
from md_cli.core.runner import CommandRunner
from md_cli.exceptions import DownloaderError
from md_cli.models.config import DownloadConfig, Preset, Settings
from md_cli.utils.path import user_media_dir

log = logging.getLogger(__name__)


class DownloadManager:
    """Drives one md invocation from parsed configuration to finished download."""

    def __init__(
        self,
        config: DownloadConfig,
        settings: Settings,
        prompter: Prompter,
        runner: CommandRunner | None = None,
        media_dir: Callable[[bool], Path] = user_media_dir,
    ):
        self.config = config
        self.settings = settings
        self.prompter = prompter
        self.runner = runner or CommandRunner()
        self.media_dir = media_dir

    def thumbnail_supported(self) -> bool:
        """yt-dlp needs mutagen to embed thumbnails into audio files."""
        return shutil.which(self.settings.thumbnail_probe) is not None

    def execute(self) -> None:
        """
        Runs the whole session.

        Raises:
            InputError: If standard input is not interactive.
            DownloaderError: If either yt-dlp run exits unsuccessfully.
            MetadataError: If the metadata is unusable.
        """
        self.prompter.ensure_interactive()

        with tempfile.TemporaryDirectory(prefix="md-") as tmp:
            workdir = Path(tmp)
            probe = InfoJsonProbe(self.runner, self.settings)
            info_json_path, info = probe.fetch(self.config, workdir)

            flow = PromptFlow(self.prompter, self.settings, self.thumbnail_supported())
            intent = flow.resolve(self.config, info)

            output_dir = None
            if self.config.use_xdg_dirs:
                output_dir = self.media_dir(intent.preset is Preset.BEST_AUDIO)
                log.info(f"Saving to '{output_dir}'")

            command = build_download_command(
                self.config, intent, info_json_path, self.settings, output_dir
            )
            returncode = self.runner.run(command)

        if returncode != 0:
            raise DownloaderError(
                f"yt-dlp failed to download '{intent.title or info.title}' "
                f"(exit status {returncode}).",
                returncode,
            )
