"""
Tests for md_cli.core.runner — spawning the downloader.
"""

import io
import logging
import signal
import subprocess
import sys

import pytest
from rich.console import Console
from rich.logging import RichHandler

from md_cli.core.runner import CommandRunner
from md_cli.exceptions import DownloaderError, DownloaderNotFoundError

SLEEPER = [sys.executable, "-c", "import time; time.sleep(30)"]


def interrupting_popen(interrupts: int):
    """A Popen whose first `interrupts` waits raise KeyboardInterrupt, like Ctrl-C."""

    class InterruptingPopen(subprocess.Popen):
        instances: list[subprocess.Popen] = []
        remaining = interrupts

        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            InterruptingPopen.instances.append(self)

        def wait(self, timeout=None):
            if InterruptingPopen.remaining > 0:
                InterruptingPopen.remaining -= 1
                raise KeyboardInterrupt
            return super().wait(timeout)

    return InterruptingPopen


@pytest.fixture
def runner_log():
    """Captures the runner's log records through a markup-enabled RichHandler."""
    output = io.StringIO()
    handler = RichHandler(
        console=Console(file=output, width=300),
        show_time=False,
        show_path=False,
        show_level=False,
        markup=True,
    )
    logger = logging.getLogger("md_cli.core.runner")
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield output
    logger.removeHandler(handler)
    logger.setLevel(previous_level)


class TestCommandRunner:
    def test_exit_code_is_returned(self):
        code = CommandRunner().run([sys.executable, "-c", "import sys; sys.exit(3)"])
        assert code == 3

    def test_success(self):
        assert CommandRunner().run([sys.executable, "-c", "pass"]) == 0

    def test_missing_executable(self):
        with pytest.raises(DownloaderNotFoundError) as exc:
            CommandRunner().run(["md-test-no-such-binary", "--version"])
        assert exc.value.exit_code == 127

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
    def test_killed_by_signal(self):
        kill_self = "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"
        code = CommandRunner().run([sys.executable, "-c", kill_self])
        assert code == -signal.SIGTERM
        assert DownloaderError("killed", code).exit_code == 128 + signal.SIGTERM


class TestCommandEcho:
    def test_selector_brackets_survive(self, runner_log):
        CommandRunner().run([sys.executable, "-c", "pass", "bv*[height<=1080]+ba/b"])
        assert "bv*[height<=1080]+ba/b" in runner_log.getvalue()

    def test_closing_tag_lookalike(self, runner_log):
        CommandRunner().run([sys.executable, "-c", "pass", "[/red]"])
        assert "[/red]" in runner_log.getvalue()


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
class TestInterrupt:
    def test_child_terminated_after_grace_period(self, monkeypatch):
        popen = interrupting_popen(1)
        monkeypatch.setattr(subprocess, "Popen", popen)
        with pytest.raises(KeyboardInterrupt):
            CommandRunner(interrupt_grace_period=0.2).run(SLEEPER)
        (process,) = popen.instances
        assert process.returncode == -signal.SIGTERM

    def test_child_finishing_in_grace_period_is_left_alone(self, monkeypatch):
        popen = interrupting_popen(1)
        monkeypatch.setattr(subprocess, "Popen", popen)
        with pytest.raises(KeyboardInterrupt):
            CommandRunner(interrupt_grace_period=10).run(
                [sys.executable, "-c", "pass"]
            )
        (process,) = popen.instances
        assert process.returncode == 0

    def test_second_interrupt_still_terminates_child(self, monkeypatch):
        popen = interrupting_popen(2)
        monkeypatch.setattr(subprocess, "Popen", popen)
        with pytest.raises(KeyboardInterrupt):
            CommandRunner(interrupt_grace_period=10).run(SLEEPER)
        (process,) = popen.instances
        assert process.returncode == -signal.SIGTERM
