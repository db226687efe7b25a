"""
Shared fixtures: a scripted prompter, a recording runner and sample metadata.
"""

import json
from collections.abc import Sequence
from pathlib import Path

import pytest

from md_cli.exceptions import InputError
from md_cli.models.config import Settings
from md_cli.models.info import InfoJson

SAMPLE_INFO = {
    "id": "abc123",
    "title": "Some Song",
    "categories": ["Music"],
    "subtitles": {"en": [{"ext": "vtt", "url": "https://x/en"}], "de": []},
    "formats": [
        {
            "format_id": "140",
            "ext": "m4a",
            "acodec": "mp4a.40.2",
            "vcodec": "none",
            "asr": 44100,
            "filesize": 2_000_000,
            "format_note": "low",
            "resolution": "audio only",
        },
        {
            "format_id": "251",
            "ext": "webm",
            "acodec": "opus",
            "vcodec": "none",
            "asr": 48000,
            "filesize": 3_300_000,
            "format_note": "medium",
            "resolution": "audio only",
        },
        {
            "format_id": "136",
            "ext": "mp4",
            "acodec": "none",
            "vcodec": "avc1.4d401f",
            "width": 1280,
            "height": 720,
            "resolution": "1280x720",
            "format_note": "720p",
        },
        {
            "format_id": "137",
            "ext": "mp4",
            "acodec": "none",
            "vcodec": "avc1.640028",
            "width": 1920,
            "height": 1080,
            "resolution": "1920x1080",
            "filesize": 50_000_000,
            "format_note": "1080p",
        },
        {
            "format_id": "18",
            "ext": "mp4",
            "acodec": "mp4a.40.2",
            "vcodec": "avc1.42001E",
            "width": 640,
            "height": 360,
            "resolution": "640x360",
        },
    ],
    "webpage_url": "https://example.com/watch?v=abc123",
    "_type": "video",
}


class ScriptedPrompter:
    """Answers prompts by message; unscripted prompts get their default."""

    def __init__(self, answers: dict | None = None, interactive: bool = True):
        self.answers = dict(answers or {})
        self.interactive = interactive
        self.asked: list[str] = []

    def ensure_interactive(self) -> None:
        if not self.interactive:
            raise InputError("not a terminal")

    def _answer(self, message: str, default):
        self.ensure_interactive()
        self.asked.append(message)
        return self.answers.get(message, default)

    def choose(self, message: str, options: Sequence[str], default: int = 0) -> int:
        return self._answer(message, default)

    def confirm(self, message: str, default: bool) -> bool:
        return self._answer(message, default)

    def text(self, message: str, default: str = "", hint: str | None = None) -> str:
        return self._answer(message, default)


class FakeRunner:
    """
    Records commands instead of spawning them. Probe commands get an info JSON
    written into their -P directory.
    """

    def __init__(
        self, info: dict | None = None, probe_code: int = 0, download_code: int = 0
    ):
        self.info = SAMPLE_INFO if info is None else info
        self.probe_code = probe_code
        self.download_code = download_code
        self.commands: list[list[str]] = []

    def run(self, command: Sequence[str]) -> int:
        command = list(command)
        self.commands.append(command)
        if "--write-info-json" in command:
            if self.probe_code == 0 and self.info:
                workdir = Path(command[command.index("-P") + 1])
                path = workdir / f"{self.info['id']}.info.json"
                path.write_text(json.dumps(self.info), encoding="utf-8")
            return self.probe_code
        return self.download_code


@pytest.fixture
def settings() -> Settings:
    return Settings(thumbnail_probe="md-test-no-such-binary")


@pytest.fixture
def sample_info() -> InfoJson:
    return InfoJson.model_validate(SAMPLE_INFO)


@pytest.fixture
def video_info() -> InfoJson:
    return InfoJson.model_validate({**SAMPLE_INFO, "categories": ["Education"]})


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Never read the real user's settings file."""
    monkeypatch.setenv("MD_CONFIG", str(tmp_path / "no-config.ini"))
