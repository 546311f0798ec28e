"""Launch the configured editor on a file."""

import logging
import os
import shlex
import subprocess
from pathlib import Path

from .errors import ProcessError, UpdateError

logger = logging.getLogger(__name__)


def editor_command(command: str, path: Path) -> list[str]:
    """Split the configured editor command and append the file to open.

    Allows commands with arguments such as 'code --wait' or 'emacsclient -t'.

    Raises:
        ProcessError: If the command is empty or its quoting is unbalanced
    """
    try:
        argv = shlex.split(command, posix=(os.name != "nt"))
    except ValueError as e:
        raise ProcessError(f"could not parse editor command {command!r}: {e}", command) from e
    if not argv:
        raise ProcessError("no editor configured", command)
    return argv + [str(path)]


def open_detached(command: str, path: Path) -> subprocess.Popen:
    """Start the editor on a file and return without waiting for it.
    
    On POSIX the editor gets its own session so it outlives wm.
    
    Args:
        command: Editor command line, e.g. 'notepad' or 'code --new-window'
        path: File to open; appended as the last argument
        
    Returns:
        The running editor process
        
    Raises:
        ProcessError: If the editor cannot be started
    """
    argv = editor_command(command, path)
    logger.debug("Launching %s (detached)", argv)
    try:
        return subprocess.Popen(argv, start_new_session=(os.name == "posix"))
    except OSError as e:
        raise ProcessError(f"failed to open '{path}' using {command}: {e}", command) from e


def edit_and_wait(command: str, path: Path) -> None:
    """Open a file in the editor and block until the editor exits.
    
    Raises:
        ProcessError: If the editor cannot be started
        UpdateError: If the editor exits with a non-zero status
    """
    argv = editor_command(command, path)
    logger.debug("Launching %s (waiting)", argv)
    try:
        completed = subprocess.run(argv, check=False)
    except OSError as e:
        raise ProcessError(f"failed to open '{path}' using {command}: {e}", command) from e

    if completed.returncode != 0:
        raise UpdateError(
            f"'{path}' failed to update: {command} exited with status {completed.returncode}",
            command,
            completed.returncode,
        )
