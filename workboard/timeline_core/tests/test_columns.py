"""
Tests for the timeline column builder.
"""

import pytest
from datetime import date

from workboard.timeline_core.columns import (
    build_columns,
    build_month_columns,
    build_week_columns,
    column_width_px,
    grid_columns,
    header_columns,
    total_span_days,
)
from workboard.timeline_core.models import TimelineColumn, ZoomLevel

ANCHOR = date(2026, 1, 5)


class TestColumnBuilder:

    def test_day_columns(self):
        cols = build_columns(ANCHOR, 29, ZoomLevel.DAY)
        assert len(cols) == 29
        assert all(c.span_days == 1 for c in cols)
        assert cols[0].key == "d-0"
        assert cols[0].label == "Jan 5"
        assert cols[27].label == "Feb 1"
        assert cols[-1].key == "d-28"

    def test_week_columns_label_range(self):
        cols = build_columns(ANCHOR, 112, ZoomLevel.WEEK)
        assert len(cols) == 16
        assert cols[0].key == "w-0"
        assert cols[0].label == "Jan 5–Jan 11"
        assert cols[1].label == "Jan 12–Jan 18"
        assert all(c.span_days == 7 for c in cols)

    def test_partial_final_week_keeps_full_width(self):
        cols = build_week_columns(ANCHOR, 30)
        assert len(cols) == 5
        assert cols[-1].span_days == 7
        assert total_span_days(cols) == 35

    def test_month_columns_follow_calendar(self):
        cols = build_month_columns(ANCHOR, 365)
        assert cols[0].key == "m-2026-1"
        assert cols[0].label == "Jan 2026"
        assert cols[0].span_days == 27  # Jan 5..Jan 31
        assert cols[1].key == "m-2026-2"
        assert cols[1].span_days == 28
        assert cols[2].span_days == 31
        assert cols[-1].key == "m-2027-1"
        assert total_span_days(cols) == 365

    def test_month_columns_from_first_of_month(self):
        cols = build_month_columns(date(2026, 1, 1), 365)
        assert len(cols) == 12
        assert [c.span_days for c in cols] == [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

    def test_month_columns_short_window(self):
        cols = build_month_columns(date(2026, 1, 30), 5)
        assert [(c.key, c.span_days) for c in cols] == [("m-2026-1", 2), ("m-2026-2", 3)]

    @pytest.mark.parametrize("zoom", list(ZoomLevel))
    def test_span_covers_visible_days(self, zoom):
        for anchor in (date(2026, 1, 5), date(2024, 2, 29), date(2025, 12, 31)):
            cols = build_columns(anchor, zoom.total_visible_days, zoom)
            assert total_span_days(cols) >= zoom.total_visible_days

    @pytest.mark.parametrize("zoom", list(ZoomLevel))
    def test_keys_unique_and_stable(self, zoom):
        first = build_columns(ANCHOR, zoom.total_visible_days, zoom)
        second = build_columns(ANCHOR, zoom.total_visible_days, zoom)
        keys = [c.key for c in first]
        assert len(keys) == len(set(keys))
        assert keys == [c.key for c in second]

    def test_zero_days(self):
        assert build_columns(ANCHOR, 0, ZoomLevel.MONTH) == []

    def test_negative_days_rejected(self):
        with pytest.raises(ValueError):
            build_columns(ANCHOR, -1, ZoomLevel.DAY)


def test_column_widths():
    col = TimelineColumn(key="m-2026-1", label="Jan 2026", span_days=27)
    assert column_width_px(col, 8) == 216

    header = header_columns([col], 8)
    grid = grid_columns([col], 8)
    assert header[0].label == "Jan 2026"
    assert header[0].width_px == 216
    assert grid[0].key == "m-2026-1"
    assert grid[0].width_px == 216


def test_zoom_metrics():
    assert (ZoomLevel.DAY.pixels_per_day, ZoomLevel.DAY.total_visible_days) == (56, 29)
    assert (ZoomLevel.WEEK.pixels_per_day, ZoomLevel.WEEK.total_visible_days) == (20, 112)
    assert (ZoomLevel.MONTH.pixels_per_day, ZoomLevel.MONTH.total_visible_days) == (8, 365)
