"""
Fetches the media's metadata by letting yt-dlp write its info JSON.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from md_cli.core.invocation import build_probe_command
from md_cli.core.runner import CommandRunner
from md_cli.exceptions import DownloaderError, MetadataError
from md_cli.models.config import DownloadConfig, Settings
from md_cli.models.info import InfoJson

log = logging.getLogger(__name__)


class InfoJsonProbe:
    """Runs yt-dlp in metadata-only mode and loads the result."""

    def __init__(self, runner: CommandRunner, settings: Settings):
        self.runner = runner
        self.settings = settings

    def fetch(self, config: DownloadConfig, workdir: Path) -> tuple[Path, InfoJson]:
        """
        Writes the info JSON for `config.url` into `workdir` and parses it.

        Returns:
            The path of the info JSON file and its parsed content.

        Raises:
            DownloaderError: If yt-dlp exits unsuccessfully.
            MetadataError: If no usable info JSON was written.
        """
        command = build_probe_command(config, self.settings, workdir)
        returncode = self.runner.run(command)
        if returncode != 0:
            raise DownloaderError(
                f"Fetching metadata for '{config.url}' failed "
                f"(exit status {returncode}).",
                returncode,
            )

        path = self._find_info_json(workdir)
        return path, self.load(path)

    @staticmethod
    def load(path: Path) -> InfoJson:
        """Parses an info JSON file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise MetadataError(
                f"Unable to read the info JSON file '{path}': {e}"
            ) from e

        try:
            info = InfoJson.model_validate(data)
        except ValidationError as e:
            raise MetadataError(f"Unexpected info JSON in '{path}':\n{e}") from e

        log.debug(f"Loaded metadata for '{info.title}' ({len(info.formats)} formats)")
        return info

    @staticmethod
    def _find_info_json(workdir: Path) -> Path:
        files = sorted(workdir.glob("*.info.json")) or sorted(
            p for p in workdir.iterdir() if p.is_file()
        )
        if not files:
            raise MetadataError(
                "yt-dlp did not write any metadata. Is the URL a single media item?"
            )
        return files[0]
