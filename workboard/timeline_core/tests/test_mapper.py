import pytest
from datetime import date, timedelta

from workboard.timeline_core.mapper import CoordinateMapper
from workboard.timeline_core.models import PointerIntent

ANCHOR = date(2026, 1, 1)


@pytest.fixture
def mapper():
    return CoordinateMapper(ANCHOR)


def test_day_index_round_trip(mapper):
    for offset in range(-400, 400, 13):
        d = ANCHOR + timedelta(days=offset)
        assert mapper.day_index_to_date(mapper.date_to_day_index(d)) == d


def test_day_index_relative_to_anchor(mapper):
    assert mapper.date_to_day_index(ANCHOR) == 0
    assert mapper.date_to_day_index(date(2026, 1, 3)) == 2
    assert mapper.date_to_day_index(date(2025, 12, 31)) == -1
    assert mapper.day_index_to_date(31) == date(2026, 2, 1)


def test_bar_geometry_day_mode(mapper):
    geom = mapper.bar_geometry(date(2026, 1, 3), date(2026, 1, 7), 56)
    assert geom.left_px == 2 * 56
    assert geom.width_px == 5 * 56


def test_bar_geometry_single_day(mapper):
    geom = mapper.bar_geometry(date(2026, 1, 3), date(2026, 1, 3), 20)
    assert geom.width_px == 20


def test_bar_geometry_clamps_reversed_range(mapper):
    geom = mapper.bar_geometry(date(2026, 1, 10), date(2026, 1, 3), 8)
    assert geom.left_px == 9 * 8
    assert geom.width_px == 8


def test_bar_geometry_gutter(mapper):
    geom = mapper.bar_geometry(date(2026, 1, 3), date(2026, 1, 7), 56, gutter_px=4)
    assert geom.left_px == 2 * 56 + 4
    assert geom.width_px == 5 * 56 - 8

    narrow = mapper.bar_geometry(date(2026, 1, 3), date(2026, 1, 3), 8, gutter_px=6)
    assert narrow.width_px == 0


def test_pixel_position_to_day_index(mapper):
    assert mapper.pixel_position_to_day_index(0, 56) == 0
    assert mapper.pixel_position_to_day_index(55.9, 56) == 0
    assert mapper.pixel_position_to_day_index(56, 56) == 1
    assert mapper.pixel_position_to_day_index(-1, 56) == -1


def test_pointer_adds_scroll_offset(mapper):
    intent = PointerIntent(x=30, y=10)
    assert mapper.pointer_to_day_index(intent, scroll_left=200, pixels_per_day=20) == 11


def test_default_draft_range_is_seven_inclusive_days(mapper):
    start, end = mapper.default_draft_range(4)
    assert start == date(2026, 1, 5)
    assert end == date(2026, 1, 11)
    assert (end - start).days == 6


def test_today_line_offset(mapper):
    assert mapper.today_line_offset_px(56, today=date(2026, 1, 15)) == 14 * 56 + 28
    assert mapper.today_line_offset_px(8, today=date(2026, 1, 15)) == 14 * 8 + 4


def test_center_scroll_left(mapper):
    assert mapper.center_scroll_left(56, 400, today=date(2026, 1, 15)) == 14 * 56 + 28 - 200
    assert mapper.center_scroll_left(56, 4000, today=date(2026, 1, 15)) == 0


def test_total_width(mapper):
    assert mapper.total_width_px(29, 56) == 1624
