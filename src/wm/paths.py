"""Path management for the working memory log tree.

Logs live at {root}/{year}/{month}/{day}.txt with no zero padding, one
plain text file per calendar day.
"""

import os
from pathlib import Path

from .errors import HomeDirectoryError
from .models.log import CalendarDate

LOG_SUFFIX = ".txt"


def expand_root(root: str) -> Path:
    """Expand a leading '~' and normalize separators for this platform.

    Args:
        root: Root directory as written in the configuration

    Returns:
        Path to the root directory

    Raises:
        HomeDirectoryError: If '~' is used and the home directory is unknown
    """
    path = Path(os.path.normpath(root))
    if not path.parts or not path.parts[0].startswith("~"):
        return path
    try:
        return path.expanduser()
    except RuntimeError as e:
        raise HomeDirectoryError(f"failed to convert '~' to the user's home directory: {e}") from e


def log_path(date: CalendarDate, root: str) -> Path:
    """Get path to the log file for a specific date.

    Args:
        date: Calendar date of the log
        root: Root directory as written in the configuration

    Returns:
        Path to {root}/{year}/{month}/{day}.txt
    """
    return expand_root(root) / str(date.year) / str(date.month) / f"{date.day}{LOG_SUFFIX}"


def _log_sort_key(path: Path) -> tuple[int, int, int]:
    return int(path.parent.parent.name), int(path.parent.name), int(path.stem)


def find_log_files(root: str) -> list[Path]:
    """List every stored log under the root, oldest first.

    Matches {root}/<digits>/<digits>/<digits>.txt. The digit groups are
    not checked against the calendar.
    """
    base = expand_root(root)
    if not base.is_dir():
        return []

    found = []
    for candidate in base.glob(f"[0-9]*/[0-9]*/[0-9]*{LOG_SUFFIX}"):
        year, month = candidate.parent.parent.name, candidate.parent.name
        if not (year.isdecimal() and month.isdecimal() and candidate.stem.isdecimal()):
            continue
        if candidate.is_file():
            found.append(candidate)
    return sorted(found, key=_log_sort_key)
