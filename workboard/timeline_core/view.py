"""
Timeline view state.

Holds the current zoom level and everything derived from it. A zoom change
rebuilds the columns immediately, but re-centering on today needs the
container width, which the renderer only knows after the new layout has
been applied. The re-center is therefore queued and runs from
``commit_layout``.
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import date
from typing import Callable, Deque, List, Optional

from workboard.calendar_core.dates import add_days
from workboard.calendar_core.dates import today as current_day
from workboard.timeline_core.columns import build_columns, grid_columns, header_columns
from workboard.timeline_core.mapper import CoordinateMapper
from workboard.timeline_core.models import TimelineColumn, TimelineMetrics, TimelineSnapshot, ZoomLevel

logger = logging.getLogger(__name__)

DEFAULT_ANCHOR_OFFSET_DAYS = 14

AfterRenderTask = Callable[[float], None]


def default_anchor(today: Optional[date] = None, offset_days: int = DEFAULT_ANCHOR_OFFSET_DAYS) -> date:
    """Day-index 0: ``offset_days`` before today."""
    return add_days(today or current_day(), -offset_days)


class TimelineViewState:
    """Current zoom level plus derived metrics, columns and scroll position."""

    def __init__(
        self,
        anchor: date,
        zoom: ZoomLevel = ZoomLevel.DAY,
        today_fn: Optional[Callable[[], date]] = None,
    ) -> None:
        self._mapper = CoordinateMapper(anchor)
        self._today_fn = today_fn or current_day
        self._zoom = ZoomLevel(zoom)
        self._columns: List[TimelineColumn] = []
        self._after_render: Deque[AfterRenderTask] = deque()
        self._scroll_left = 0.0
        self.rebuild_count = 0

        self._apply_timescale()
        self._after_render.append(self._center_on_today)

    @property
    def zoom(self) -> ZoomLevel:
        return self._zoom

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def anchor(self) -> date:
        return self._mapper.anchor

    @property
    def pixels_per_day(self) -> int:
        return self._zoom.pixels_per_day

    @property
    def total_visible_days(self) -> int:
        return self._zoom.total_visible_days

    @property
    def columns(self) -> List[TimelineColumn]:
        return list(self._columns)

    @property
    def total_width_px(self) -> float:
        return self._mapper.total_width_px(self.total_visible_days, self.pixels_per_day)

    @property
    def scroll_left(self) -> float:
        return self._scroll_left

    @property
    def pending_after_render(self) -> int:
        return len(self._after_render)

    def today(self) -> date:
        return self._today_fn()

    def set_timescale(self, zoom: ZoomLevel) -> bool:
        """
        Switch zoom level. Returns False when already at that level, in
        which case nothing is rebuilt or scheduled.
        """
        zoom = ZoomLevel(zoom)
        if zoom == self._zoom:
            return False
        self._zoom = zoom
        self._apply_timescale()
        self._after_render.append(self._center_on_today)
        return True

    def _apply_timescale(self) -> None:
        self._columns = build_columns(self.anchor, self.total_visible_days, self._zoom)
        self.rebuild_count += 1
        logger.debug(
            "Rebuilt %d %s columns (%dpx/day, %d days)",
            len(self._columns),
            self._zoom.value,
            self.pixels_per_day,
            self.total_visible_days,
        )

    def commit_layout(self, container_width_px: float) -> float:
        """
        Called by the renderer once the current column layout is on screen.
        Drains queued after-render work and returns the scroll offset.
        """
        while self._after_render:
            task = self._after_render.popleft()
            task(container_width_px)
        return self._scroll_left

    def scroll_to(self, scroll_left: float) -> None:
        self._scroll_left = max(0.0, scroll_left)

    def _center_on_today(self, container_width_px: float) -> None:
        self._scroll_left = self._mapper.center_scroll_left(
            self.pixels_per_day, container_width_px, self.today()
        )

    def today_line_offset_px(self) -> float:
        return self._mapper.today_line_offset_px(self.pixels_per_day, self.today())

    def snapshot(self) -> TimelineSnapshot:
        return TimelineSnapshot(
            metrics=TimelineMetrics(
                zoom=self._zoom,
                pixels_per_day=self.pixels_per_day,
                total_visible_days=self.total_visible_days,
                total_width_px=self.total_width_px,
                today_offset_px=self.today_line_offset_px(),
                scroll_left=self._scroll_left,
            ),
            header=header_columns(self._columns, self.pixels_per_day),
            grid=grid_columns(self._columns, self.pixels_per_day),
        )
