"""Timeline geometry: zoom levels, columns and coordinate mapping."""

from workboard.timeline_core.columns import build_columns, total_span_days
from workboard.timeline_core.mapper import CoordinateMapper
from workboard.timeline_core.models import (
    BarGeometry,
    PointerIntent,
    TimelineColumn,
    ZoomLevel,
)
from workboard.timeline_core.view import TimelineViewState, default_anchor

__all__ = [
    "BarGeometry",
    "CoordinateMapper",
    "PointerIntent",
    "TimelineColumn",
    "TimelineViewState",
    "ZoomLevel",
    "build_columns",
    "default_anchor",
    "total_span_days",
]
