"""
Defines the command-line interface for the application using Typer.

Everything after a literal `--` is split off before option parsing and handed
to yt-dlp untouched.
"""

import logging
import sys
from collections.abc import Mapping, Sequence
from typing import Any

import click
import typer
from rich.console import Console
from rich.logging import RichHandler

from md_cli import __version__
from md_cli.core.download_manager import DownloadManager
from md_cli.models.config import CLI_PRESETS, DownloadConfig, Preset
from md_cli.storage.config_manager import ConfigManager
from md_cli.utils.path import get_settings_file

from .prompter import RichPrompter

PROG_NAME = "md"
PASSTHROUGH_SEPARATOR = "--"

console = Console()
err_console = Console(stderr=True)

logging.basicConfig(
    level="WARNING",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=err_console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("md_cli")

app = typer.Typer(
    name=PROG_NAME,
    help="Interactively pick download options, then run yt-dlp with them.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{PROG_NAME} {__version__}", highlight=False)
        raise typer.Exit()


def split_passthrough(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """
    Splits argv at the first `--`.

    Returns the tokens md parses itself and the extras for yt-dlp, which are
    kept verbatim and in order even when they look like options.
    """
    args = list(argv)
    if PASSTHROUGH_SEPARATOR not in args:
        return args, []
    index = args.index(PASSTHROUGH_SEPARATOR)
    return args[:index], args[index + 1 :]


def build_config(params: Mapping[str, Any], extras: Sequence[str]) -> DownloadConfig:
    """Turns parsed Click parameters into a DownloadConfig."""
    preset = params.get("preset")
    return DownloadConfig(
        url=params["url"],
        preset=Preset(preset) if preset else None,
        verbosity=params.get("verbose", 0),
        quiet=params.get("quiet", False),
        use_xdg_dirs=params.get("dirs", False),
        extras=tuple(extras),
    )


def parse_args(argv: Sequence[str]) -> DownloadConfig:
    """
    Parses a full argument list without running anything.

    Raises:
        click.UsageError: On a missing URL, an unknown option or an invalid preset.
    """
    own, extras = split_passthrough(argv)
    command = typer.main.get_command(app)
    with command.make_context(PROG_NAME, own, obj=extras) as ctx:
        return build_config(ctx.params, extras)


def configure_logging(config: DownloadConfig) -> None:
    level = "WARNING"
    if config.verbosity >= 2:
        level = "DEBUG"
    elif config.verbosity == 1:
        level = "INFO"
    elif config.quiet:
        level = "ERROR"
    logging.getLogger("md_cli").setLevel(level)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def download(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL of the media to download.", metavar="URL"),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Show the executed commands (-vv also makes yt-dlp verbose).",
    ),
    quiet: bool = typer.Option(False, "--quiet", help="Make yt-dlp output quiet."),
    preset: str | None = typer.Option(
        None,
        "--preset",
        "-p",
        click_type=click.Choice(CLI_PRESETS),
        help="Preset to use instead of asking.",
    ),
    dirs: bool = typer.Option(
        False,
        "--dirs",
        "-d",
        help="Save into the XDG music or videos directory (~/Music or ~/Videos).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """
    Download URL with yt-dlp after asking for the format, title and embeds.

    Arguments after [cyan]--[/cyan] are passed to yt-dlp unchanged.
    """
    config = build_config(ctx.params, ctx.obj or [])
    configure_logging(config)
    log.debug(f"Configuration: {config!r}")

    settings = ConfigManager(get_settings_file()).load_settings()
    manager = DownloadManager(config, settings, RichPrompter(console))
    try:
        manager.execute()
    except (KeyboardInterrupt, EOFError):
        err_console.print("\n[yellow]⚠️  Operation cancelled by user.[/yellow]")
        raise typer.Exit(code=130) from None


def run(argv: Sequence[str] | None = None) -> None:
    """Runs md in Click's standalone mode; exits the process when done."""
    args = sys.argv[1:] if argv is None else argv
    own, extras = split_passthrough(args)
    command = typer.main.get_command(app)
    command.main(args=own, prog_name=PROG_NAME, obj=extras)
