"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class MdCliError(Exception):
    """Base exception for all application-specific errors."""

    exit_code = 1


class InputError(MdCliError):
    """Raised when a prompt is attempted while standard input is not a terminal."""


class MetadataError(MdCliError):
    """Raised when the media metadata cannot be fetched or offers nothing to select."""


class ConfigurationError(MdCliError):
    """Raised for issues related to settings loading or validation."""


class DownloaderError(MdCliError):
    """
    Raised when the external downloader exits unsuccessfully.
    Its exit code becomes the exit code of md; a child killed by signal N
    (negative return code) maps to 128 + N, as shells report it.
    """

    def __init__(self, message: str, returncode: int):
        super().__init__(message)
        self.returncode = returncode
        self.exit_code = 128 - returncode if returncode < 0 else returncode


class DownloaderNotFoundError(DownloaderError):
    """Raised when the downloader executable cannot be found."""

    def __init__(self, executable: str):
        super().__init__(
            f"Could not find the downloader executable '{executable}'.", 127
        )
        self.executable = executable
