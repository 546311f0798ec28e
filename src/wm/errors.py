"""Error types raised by wm.

Every error here is fatal to the command that raised it. The CLI catches
WmError, prints the message on stderr and exits non-zero.
"""

from pathlib import Path


class WmError(Exception):
    """Base class for wm errors."""
    pass


class ParseError(WmError):
    """A date string or search term could not be parsed."""

    def __init__(self, message: str, value: str):
        super().__init__(message)
        self.value = value


class HomeDirectoryError(WmError):
    """The current user's home directory could not be determined."""
    pass


class FileSystemError(WmError):
    """Creating, reading or writing a file or directory failed."""

    def __init__(self, message: str, path: Path, cause: OSError):
        super().__init__(f"{message} '{path}': {cause}")
        self.path = path
        self.cause = cause


class ProcessError(WmError):
    """The editor process could not be started."""

    def __init__(self, message: str, command: str):
        super().__init__(message)
        self.command = command


class UpdateError(ProcessError):
    """The editor exited non-zero while editing the configuration."""

    def __init__(self, message: str, command: str, returncode: int):
        super().__init__(message, command)
        self.returncode = returncode


class ConfigError(WmError):
    """The configuration file is unreadable, undecodable or invalid."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
