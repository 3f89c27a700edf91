"""Fixed-format date parsing and formatting ('Jan 02, 2024')"""

import datetime
import re

from mdsite.errors import DateFormatError


MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Month names are matched against MONTHS rather than %b so parsing ignores the locale.
DATE_RE = re.compile(r'([A-Z][a-z]{2}) ([0-9]{2}), ([0-9]{4})')


def parse_date(text: str) -> datetime.date:
    """Parse 'Mon DD, YYYY' into a date; raise DateFormatError on any deviation."""
    m = DATE_RE.fullmatch(text)
    if not m:
        raise DateFormatError(text)
    month, day, year = m.groups()
    if month not in MONTHS:
        raise DateFormatError(text, f"unknown month {month!r}")
    try:
        return datetime.date(int(year), MONTHS.index(month) + 1, int(day))
    except ValueError as e:
        raise DateFormatError(text, str(e)) from e


def format_date(date: datetime.date) -> str:
    """Format a date back into 'Mon DD, YYYY'."""
    return f"{MONTHS[date.month - 1]} {date.day:02d}, {date.year:04d}"
