"""Daily log file creation for wm."""

import logging
from pathlib import Path

from .errors import FileSystemError
from .models.log import CalendarDate

logger = logging.getLogger(__name__)

LOG_TITLE = "Working Memory File"
LOG_SEPARATOR = "-------------------"


def render_header(date: CalendarDate) -> str:
    """Build the header written at the top of a new log.

    Title line, the date as month/day/year, a separator, then a blank line.
    """
    return f"{LOG_TITLE}\n{date.header_stamp()}\n{LOG_SEPARATOR}\n\n"


def ensure_log_file(path: Path, date: CalendarDate) -> bool:
    """Make sure the log for a date exists, creating it with a header if needed.
    
    This is idempotent - an existing log is never overwritten.
    
    Args:
        path: Path to the log file
        date: Calendar date the log belongs to
        
    Returns:
        True if the file was created, False if it already existed
        
    Raises:
        FileSystemError: If the directory or file cannot be created
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemError("failed to create directory for working memory file", path.parent, e) from e

    try:
        # Exclusive create: an existing file is left untouched
        with open(path, "x", encoding="utf-8") as f:
            f.write(render_header(date))
    except FileExistsError:
        logger.debug("Log already exists: %s", path)
        return False
    except OSError as e:
        raise FileSystemError("working memory file could not be created at", path, e) from e

    logger.info("Created log %s", path)
    return True
