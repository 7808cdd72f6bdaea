"""Calendar arithmetic for the scheduling board."""

from workboard.calendar_core.dates import (
    InvalidDateFormat,
    add_days,
    diff_days,
    format_date_only,
    format_dot_date,
    format_month_label,
    format_short_date,
    parse_date_only,
    start_of_day,
    today,
)

__all__ = [
    "InvalidDateFormat",
    "add_days",
    "diff_days",
    "format_date_only",
    "format_dot_date",
    "format_month_label",
    "format_short_date",
    "parse_date_only",
    "start_of_day",
    "today",
]
