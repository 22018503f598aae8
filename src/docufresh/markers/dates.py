"""Date and time markers.

All markers read the wall clock through `now()` so callers (and tests) can
pin the current moment in one place. Unparseable dates never raise: they
render as `NaN`.
"""

import math
import re
from datetime import datetime
from typing import Optional, Sequence

from .. import config
from .coerce import NAN, first_param, format_number, parse_int

MONTHS = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]

# Textual forms tried after ISO-8601
DATE_FORMATS = (
    '%Y',
    '%Y-%m',
    '%Y/%m/%d',
    '%m/%d/%Y',
    '%B %d, %Y',
    '%b %d, %Y',
    '%d %B %Y',
    '%d %b %Y',
)

_YEAR_ONLY = re.compile(r'[0-9]{4}')


def now() -> datetime:
    """Current local time."""
    return datetime.now()


def parse_date(text: str) -> Optional[datetime]:
    """Parse a date string into a naive local datetime.

    Args:
        text: ISO-8601 date or date-time, or one of DATE_FORMATS

    Returns:
        The parsed datetime, or None if the text is not a recognizable date
    """
    text = text.strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError:
        parsed = None
    if parsed is None:
        for fmt in DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _elapsed_days(start: datetime, end: datetime) -> float:
    """Milliseconds from start to end expressed in days (fractional)."""
    return (end - start).total_seconds() * 1000 / config.MS_PER_DAY


def current_year(params: Sequence[str]) -> str:
    """Current 4-digit year."""
    return str(now().year)


def current_month(params: Sequence[str]) -> str:
    """Full name of the current month."""
    return MONTHS[now().month - 1]


def current_date(params: Sequence[str]) -> str:
    """Today's date, M/D/YYYY unless DOCUFRESH_DATE_FORMAT is set."""
    current = now()
    if config.DATE_FORMAT:
        return current.strftime(config.DATE_FORMAT)
    return f"{current.month}/{current.day}/{current.year}"


def current_time(params: Sequence[str]) -> str:
    """Current time, H:MM:SS AM/PM unless DOCUFRESH_TIME_FORMAT is set."""
    current = now()
    if config.TIME_FORMAT:
        return current.strftime(config.TIME_FORMAT)
    hour = current.hour % 12 or 12
    suffix = 'AM' if current.hour < 12 else 'PM'
    return f"{hour}:{current.minute:02d}:{current.second:02d} {suffix}"


def timestamp(params: Sequence[str]) -> str:
    """Milliseconds since the Unix epoch."""
    return str(int(now().timestamp() * 1000))


def days_since(params: Sequence[str]) -> str:
    """Whole days between a date and now, in either direction."""
    target = parse_date(first_param(params))
    if target is None:
        return format_number(NAN)
    return str(math.floor(abs(_elapsed_days(target, now()))))


def days_until(params: Sequence[str]) -> str:
    """Days from now until a date, rounded up; negative once it has passed."""
    target = parse_date(first_param(params))
    if target is None:
        return format_number(NAN)
    return str(math.ceil(_elapsed_days(now(), target)))


def years_since(params: Sequence[str]) -> str:
    """Calendar years between a year (or date) and the current year."""
    value = first_param(params)
    if _YEAR_ONLY.fullmatch(value):
        target_year = float(value)
    else:
        parts = value.split('-')
        if len(parts) >= 3:
            target_year = parse_int(parts[0])
        else:
            target = parse_date(value)
            target_year = float(target.year) if target is not None else NAN
    return format_number(now().year - target_year)


def age(params: Sequence[str]) -> str:
    """Age in whole years for a birthdate."""
    birth = parse_date(first_param(params))
    if birth is None:
        return format_number(NAN)
    current = now()
    years = current.year - birth.year
    # Birthday not reached yet this year
    if (current.month, current.day) < (birth.month, birth.day):
        years -= 1
    return str(years)


def _unit(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def relative_time(params: Sequence[str]) -> str:
    """Human phrase for a date relative to today, e.g. "3 weeks ago"."""
    target = parse_date(first_param(params))
    if target is None:
        return format_number(NAN)
    diff_days = math.floor(_elapsed_days(target, now()))

    if diff_days == 0:
        return 'today'
    if diff_days == 1:
        return 'yesterday'
    if diff_days == -1:
        return 'tomorrow'

    days = abs(diff_days)
    if days < 7:
        phrase = _unit(days, 'day')
    elif days < 30:
        phrase = _unit(days // 7, 'week')
    elif days < 365:
        phrase = _unit(days // 30, 'month')
    else:
        phrase = _unit(days // 365, 'year')
    return f"in {phrase}" if diff_days < 0 else f"{phrase} ago"


DATE_MARKERS = {
    'current_year': current_year,
    'current_month': current_month,
    'current_date': current_date,
    'current_time': current_time,
    'days_since': days_since,
    'days_until': days_until,
    'years_since': years_since,
    'age': age,
    'relative_time': relative_time,
    'timestamp': timestamp,
}
