"""
Timeline Core Models.

Defines the geometry data structures for the scheduling board timeline.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import ConfigDict, Field

from workboard.common.wire import WireModel


class ZoomLevel(str, Enum):
    """Zoom level of the timeline."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    @property
    def pixels_per_day(self) -> int:
        return _ZOOM_METRICS[self][0]

    @property
    def total_visible_days(self) -> int:
        return _ZOOM_METRICS[self][1]


# level -> (pixels per day, visible days)
_ZOOM_METRICS = {
    ZoomLevel.DAY: (56, 29),
    ZoomLevel.WEEK: (20, 112),
    ZoomLevel.MONTH: (8, 365),
}


class TimelineColumn(WireModel):
    """
    One header/grid cell of the timeline.
    """
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    span_days: int = Field(..., ge=1)


class HeaderColumn(WireModel):
    key: str
    label: str
    width_px: float


class GridColumn(WireModel):
    key: str
    width_px: float


class BarGeometry(WireModel):
    model_config = ConfigDict(frozen=True)

    left_px: float
    width_px: float


class PointerIntent(WireModel):
    """
    A pointer location relative to the scrollable track.
    Produced by pointer and keyboard handlers alike.
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float = 0.0


class TimelineMetrics(WireModel):
    zoom: ZoomLevel
    pixels_per_day: int
    total_visible_days: int
    total_width_px: float
    today_offset_px: float
    scroll_left: Optional[float] = None


class TimelineSnapshot(WireModel):
    """Rendered column layout for one zoom level."""
    metrics: TimelineMetrics
    header: List[HeaderColumn] = Field(default_factory=list)
    grid: List[GridColumn] = Field(default_factory=list)
