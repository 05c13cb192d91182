"""Clock-time and calendar helpers shared by validation and the metrics engines."""

import math
import re
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from app.config import settings
from app.core.errors import FormatError

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def time_to_minutes(value: str) -> int:
    """Parse "HH:MM" into minutes since midnight (0..1439)."""
    if not isinstance(value, str):
        raise FormatError(f"Time must be a string in HH:MM format, got {value!r}")
    m = _TIME_RE.match(value.strip())
    if not m:
        raise FormatError(f"Time must be in HH:MM format, got {value!r}")
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        raise FormatError(f"Time out of range: {value!r}")
    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    """Render minutes as zero-padded "HH:MM", wrapping into a single day."""
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def duration_between(start: int, end: int) -> int:
    """Minutes from start to end clock minute; an end before start means it crossed midnight."""
    d = end - start
    if d < 0:
        d += MINUTES_PER_DAY
    return d


def normalize_time(value: str) -> str:
    """Canonical zero-padded form ("7:05" -> "07:05")."""
    return minutes_to_time(time_to_minutes(value))


def round_half_up(value: float) -> int:
    # round() is banker's rounding; percentages and averages round .5 up
    return math.floor(value + 0.5)


def parse_month(value: str) -> date:
    """Parse "YYYY-MM" and return the first day of that month."""
    m = _MONTH_RE.match(str(value).strip())
    if not m:
        raise FormatError(f"Month must be in YYYY-MM format, got {value!r}")
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise FormatError(f"Month out of range: {value!r}")
    return date(year, month, 1)


def month_bounds(first_day: date) -> tuple[date, date]:
    """(first day of the month, first day of the following month)."""
    start = first_day.replace(day=1)
    next_month = (start + timedelta(days=32)).replace(day=1)
    return start, next_month


def format_duration(minutes: int) -> str:
    return f"{minutes // 60}h {minutes % 60:02d}m"


def local_now() -> datetime:
    """Current wall-clock time in the configured zone (server local time when unset)."""
    if settings.timezone:
        return datetime.now(ZoneInfo(settings.timezone))
    return datetime.now()
