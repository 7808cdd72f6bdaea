"""
Calendar Arithmetic.

Pure conversions between calendar dates, day offsets and the ISO
``YYYY-MM-DD`` strings used on the wire. Everything here works on local
calendar days; no timezone conversion ever happens.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Union

DateLike = Union[date, datetime]

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_SECONDS_PER_DAY = 86400.0


class InvalidDateFormat(ValueError):
    """Raised when a string is not a valid YYYY-MM-DD calendar date."""


def start_of_day(value: DateLike) -> date:
    """Truncate to the local calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _as_midnight(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def add_days(value: DateLike, days: int) -> date:
    return start_of_day(value) + timedelta(days=days)


def diff_days(a: DateLike, b: DateLike) -> int:
    """
    Whole-day difference ``b - a``.

    Datetimes may carry a DST-shifted wall clock; rounding to the nearest
    day keeps the result on calendar days.
    """
    delta = _as_midnight(b) - _as_midnight(a)
    return int(round(delta.total_seconds() / _SECONDS_PER_DAY))


def parse_date_only(iso: str) -> date:
    """Parse ``YYYY-MM-DD`` as a local calendar date."""
    if not isinstance(iso, str):
        raise InvalidDateFormat(f"Expected YYYY-MM-DD string, got {type(iso).__name__}")
    match = _ISO_DATE_RE.match(iso.strip())
    if not match:
        raise InvalidDateFormat(f"Invalid date '{iso}', expected YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateFormat(f"Invalid date '{iso}': {exc}") from exc


def format_date_only(value: DateLike) -> str:
    d = start_of_day(value)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def format_short_date(value: DateLike) -> str:
    """Short header label, e.g. ``Jan 5``."""
    d = start_of_day(value)
    return f"{d.strftime('%b')} {d.day}"


def format_month_label(value: DateLike) -> str:
    """Month header label, e.g. ``Jan 2026``."""
    d = start_of_day(value)
    return f"{d.strftime('%b')} {d.year}"


def format_dot_date(value: Optional[DateLike]) -> str:
    """Display form used by the date inputs: ``MM.DD.YYYY``."""
    if value is None:
        return ""
    d = start_of_day(value)
    return f"{d.month:02d}.{d.day:02d}.{d.year:04d}"


def today(clock: Optional[Callable[[], DateLike]] = None) -> date:
    now = clock() if clock else datetime.now()
    return start_of_day(now)
