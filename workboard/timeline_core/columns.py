"""
Column Builder.

Produces the header/grid columns for a zoom level. Day columns are uniform,
week columns are fixed seven-day buckets and month columns follow the real
calendar so their widths vary.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Iterable, List

from workboard.calendar_core.dates import add_days, format_month_label, format_short_date
from workboard.timeline_core.models import GridColumn, HeaderColumn, TimelineColumn, ZoomLevel

DAYS_PER_WEEK = 7


def build_day_columns(anchor: date, total_days: int) -> List[TimelineColumn]:
    return [
        TimelineColumn(key=f"d-{i}", label=format_short_date(add_days(anchor, i)), span_days=1)
        for i in range(total_days)
    ]


def build_week_columns(anchor: date, total_days: int) -> List[TimelineColumn]:
    """
    ceil(total_days / 7) columns. A partial final week keeps the full
    seven-day span so every week column has the same width.
    """
    weeks = math.ceil(total_days / DAYS_PER_WEEK)
    columns = []
    for i in range(weeks):
        first = add_days(anchor, i * DAYS_PER_WEEK)
        last = add_days(first, DAYS_PER_WEEK - 1)
        columns.append(
            TimelineColumn(
                key=f"w-{i}",
                label=f"{format_short_date(first)}–{format_short_date(last)}",
                span_days=DAYS_PER_WEEK,
            )
        )
    return columns


def build_month_columns(anchor: date, total_days: int) -> List[TimelineColumn]:
    """
    One column per calendar month touched by [anchor, anchor + total_days).
    Each span counts only the days of that month inside the window.
    """
    columns = []
    consumed = 0
    cursor = anchor
    while consumed < total_days:
        month_start = cursor
        span = 0
        while cursor.month == month_start.month and consumed + span < total_days:
            cursor = add_days(cursor, 1)
            span += 1
        columns.append(
            TimelineColumn(
                key=f"m-{month_start.year}-{month_start.month}",
                label=format_month_label(month_start),
                span_days=span,
            )
        )
        consumed += span
    return columns


_BUILDERS = {
    ZoomLevel.DAY: build_day_columns,
    ZoomLevel.WEEK: build_week_columns,
    ZoomLevel.MONTH: build_month_columns,
}


def build_columns(anchor: date, total_days: int, zoom: ZoomLevel) -> List[TimelineColumn]:
    if total_days < 0:
        raise ValueError("total_days must be non-negative")
    return _BUILDERS[ZoomLevel(zoom)](anchor, total_days)


def total_span_days(columns: Iterable[TimelineColumn]) -> int:
    return sum(c.span_days for c in columns)


def column_width_px(column: TimelineColumn, pixels_per_day: float) -> float:
    return column.span_days * pixels_per_day


def header_columns(columns: Iterable[TimelineColumn], pixels_per_day: float) -> List[HeaderColumn]:
    return [
        HeaderColumn(key=c.key, label=c.label, width_px=column_width_px(c, pixels_per_day))
        for c in columns
    ]


def grid_columns(columns: Iterable[TimelineColumn], pixels_per_day: float) -> List[GridColumn]:
    return [GridColumn(key=c.key, width_px=column_width_px(c, pixels_per_day)) for c in columns]
