"""
Coordinate Mapper.

Converts between calendar dates, day indices relative to the anchor date
and pixel positions on the timeline track.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Optional, Tuple

from workboard.calendar_core.dates import add_days, diff_days, start_of_day
from workboard.calendar_core.dates import today as current_day
from workboard.timeline_core.models import BarGeometry, PointerIntent

DEFAULT_DRAFT_SPAN_DAYS = 7


class CoordinateMapper:
    """
    Maps dates to day indices and pixels.
    The anchor is day-index 0 and never moves, so indices survive zoom changes.
    """

    def __init__(self, anchor: date):
        self._anchor = start_of_day(anchor)

    @property
    def anchor(self) -> date:
        return self._anchor

    def date_to_day_index(self, value: date) -> int:
        return diff_days(self._anchor, value)

    def day_index_to_date(self, day_index: int) -> date:
        return add_days(self._anchor, day_index)

    def bar_geometry(
        self,
        start: date,
        end: date,
        pixels_per_day: float,
        gutter_px: float = 0.0,
    ) -> BarGeometry:
        """
        Left offset and width of a bar covering [start, end] inclusive.
        The gutter insets both sides and is purely visual.
        """
        start_day = self.date_to_day_index(start)
        end_day = self.date_to_day_index(end)
        day_count = max(1, end_day - start_day + 1)

        left_px = start_day * pixels_per_day
        width_px = day_count * pixels_per_day
        if gutter_px:
            left_px += gutter_px
            width_px = max(0.0, width_px - 2 * gutter_px)
        return BarGeometry(left_px=left_px, width_px=width_px)

    @staticmethod
    def pixel_position_to_day_index(x_px: float, pixels_per_day: float) -> int:
        return math.floor(x_px / pixels_per_day)

    def pointer_to_day_index(self, intent: PointerIntent, scroll_left: float, pixels_per_day: float) -> int:
        return self.pixel_position_to_day_index(intent.x + scroll_left, pixels_per_day)

    def default_draft_range(self, start_day: int, span_days: int = DEFAULT_DRAFT_SPAN_DAYS) -> Tuple[date, date]:
        """Inclusive range used to prefill a new work order."""
        return self.day_index_to_date(start_day), self.day_index_to_date(start_day + span_days - 1)

    def today_line_offset_px(self, pixels_per_day: float, today: Optional[date] = None) -> float:
        day = today if today is not None else current_day()
        return self.date_to_day_index(day) * pixels_per_day + pixels_per_day / 2

    def center_scroll_left(
        self,
        pixels_per_day: float,
        container_width_px: float,
        today: Optional[date] = None,
    ) -> float:
        """Scroll offset that puts the today line in the middle of the viewport."""
        target = self.today_line_offset_px(pixels_per_day, today) - container_width_px / 2
        return max(0.0, target)

    @staticmethod
    def total_width_px(total_days: int, pixels_per_day: float) -> float:
        return total_days * pixels_per_day
