"""Resolve free-form date strings into calendar dates."""

from datetime import datetime, timedelta
from typing import Optional

from .errors import ParseError
from .models.log import CalendarDate

# Tried in order; the first format that parses wins. Numeric dates are
# therefore read month-first before day-first.
DATE_FORMATS: list[tuple[str, str]] = [
    ("1/2/2006", "%m/%d/%Y"),
    ("1-2-2006", "%m-%d-%Y"),
    ("Jan 2 2006", "%b %d %Y"),
    ("Jan 2, 2006", "%b %d, %Y"),
    ("2 Jan 2006", "%d %b %Y"),
    ("2 Jan, 2006", "%d %b, %Y"),
    ("2/1/2006", "%d/%m/%Y"),
    ("2-1-2006", "%d-%m-%Y"),
    ("2-Jan-2006", "%d-%b-%Y"),
    ("January 2 2006", "%B %d %Y"),
    ("January 2, 2006", "%B %d, %Y"),
    ("2 January 2006", "%d %B %Y"),
    ("2 January, 2006", "%d %B, %Y"),
]

ONE_DAY = timedelta(hours=24)

RELATIVE_OFFSETS: dict[str, timedelta] = {
    "": timedelta(0),
    "today": timedelta(0),
    "yesterday": -ONE_DAY,
    "tomorrow": ONE_DAY,
}


def resolve_date(text: Optional[str], now: Optional[datetime] = None) -> CalendarDate:
    """Turn a user supplied string into a CalendarDate.

    Recognizes "today" (or an empty string), "yesterday" and "tomorrow",
    then falls back to the formats in DATE_FORMATS.

    Args:
        text: Date string as typed by the user; None means today
        now: Reference time for relative dates (default: datetime.now())

    Returns:
        The resolved CalendarDate

    Raises:
        ParseError: If no literal or format matches
    """
    original = text or ""
    cleaned = original.strip().lower()

    if cleaned in RELATIVE_OFFSETS:
        reference = now if now is not None else datetime.now()
        return CalendarDate.from_date(reference + RELATIVE_OFFSETS[cleaned])

    for _example, fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
        return CalendarDate.from_date(parsed)

    raise ParseError(f"unable to parse '{original}'", original)
