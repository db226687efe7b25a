"""
Helper functions for formatting data into human-readable strings.
"""

import shlex
from collections.abc import Sequence


def format_size(bytes_size: float) -> str:
    """Formats bytes into a human-readable size string (e.g., '145.3 MB')."""
    if bytes_size <= 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    while bytes_size >= 1024 and i < len(units) - 1:
        bytes_size /= 1024
        i += 1
    return f"{bytes_size:.1f} {units[i]}"


def format_command(command: Sequence[str]) -> str:
    """Renders an argument list as a shell-quoted command line."""
    return shlex.join(str(arg) for arg in command)
