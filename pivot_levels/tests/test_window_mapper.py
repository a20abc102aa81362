# pivot_levels/tests/test_window_mapper.py
"""
Module: Window Mapper Tests
Purpose: Seed/display day selection, window bounds, label anchoring, extend-lines
"""

import pandas as pd
import pytest

from pivot_levels.calculations.windows import WindowMapper, label_anchor, map_window
from pivot_levels.tests.conftest import START, make_daily, make_intraday


def ts(value: str) -> pd.Timestamp:
    return pd.Timestamp(value, tz='UTC')


class TestMapWindow:
    """Index selection and time bounds"""

    def test_most_recent_day(self, daily_bars, intraday_bars):
        window = map_window(1, daily_bars, intraday_bars)

        # calc index 8 (Jan 9), display index 9 (Jan 10, last bar)
        assert window.calc_time == ts('2024-01-09')
        assert window.start_time == ts('2024-01-10')
        assert window.end_time == window.start_time + pd.Timedelta(hours=24)
        assert window.days_back == 1

    def test_end_is_next_daily_open(self, daily_bars, intraday_bars):
        window = map_window(2, daily_bars, intraday_bars)

        assert window.calc_time == ts('2024-01-08')
        assert window.start_time == ts('2024-01-09')
        assert window.end_time == ts('2024-01-10')

    def test_end_follows_gaps_in_daily_series(self, intraday_bars):
        # Drop a weekend-style gap: Jan 6 and Jan 7 missing
        daily = make_daily(10)
        daily = daily.drop([ts('2024-01-06'), ts('2024-01-07')])

        window = map_window(4, daily, intraday_bars)

        assert window.start_time == ts('2024-01-05')
        assert window.end_time == ts('2024-01-08')

    @pytest.mark.parametrize("days_back", [10, 11, 100])
    def test_insufficient_history(self, daily_bars, intraday_bars, days_back):
        assert map_window(days_back, daily_bars, intraday_bars) is None

    def test_zero_offset_has_no_display_day(self, daily_bars, intraday_bars):
        assert map_window(0, daily_bars, intraday_bars) is None

    def test_single_daily_bar(self, intraday_bars):
        assert map_window(1, make_daily(1), intraday_bars) is None

    def test_skip_is_repeatable(self, daily_bars, intraday_bars):
        assert map_window(20, daily_bars, intraday_bars) is None
        assert map_window(20, daily_bars, intraday_bars) is None


class TestExtendLines:
    """Single-day extend override"""

    def test_extend_single_day(self, daily_bars, intraday_bars):
        window = map_window(1, daily_bars, intraday_bars, days_to_show=1, extend_lines=True)

        assert window.start_time == intraday_bars.index[0]
        assert window.end_time == ts('2024-01-11')

    def test_extend_ignored_for_multiple_days(self, daily_bars, intraday_bars):
        window = map_window(1, daily_bars, intraday_bars, days_to_show=3, extend_lines=True)

        assert window.start_time == ts('2024-01-10')

    def test_label_uses_unextended_window(self, daily_bars, intraday_bars):
        plain = map_window(1, daily_bars, intraday_bars, days_to_show=1, extend_lines=False)
        extended = map_window(1, daily_bars, intraday_bars, days_to_show=1, extend_lines=True)

        assert extended.label_time == plain.label_time
        assert extended.start_time != plain.start_time

    def test_mapper_extends_property(self):
        assert WindowMapper(days_to_show=1, extend_lines=True).extends
        assert not WindowMapper(days_to_show=2, extend_lines=True).extends
        assert not WindowMapper(days_to_show=1, extend_lines=False).extends


class TestLabelAnchor:
    """Backward scan with fixed bars-from-end offset"""

    def test_anchor_five_bars_before_window_end(self, intraday_bars):
        start, end = ts('2024-01-10'), ts('2024-01-11')

        # Last bar inside the window is Jan 10 23:00 (index 239)
        anchor = label_anchor(intraday_bars, start, end, 5)

        assert anchor == intraday_bars.index[239 - 5]
        assert anchor == ts('2024-01-10 18:00')

    def test_anchor_inside_earlier_window(self, intraday_bars):
        anchor = label_anchor(intraday_bars, ts('2024-01-09'), ts('2024-01-10'))
        assert anchor == ts('2024-01-09 18:00')

    def test_end_bound_is_exclusive(self):
        bars = make_intraday(30)
        # Bar 24 opens exactly at the window end and must not count
        anchor = label_anchor(bars, START, ts('2024-01-02'), 5)
        assert anchor == bars.index[23 - 5]

    def test_too_few_bars_falls_back(self):
        bars = make_intraday(3)
        end = ts('2024-01-02')

        assert label_anchor(bars, START, end, 5) == end - pd.Timedelta(minutes=60)

    def test_index_exactly_offset(self):
        bars = make_intraday(6)
        # Last contained bar is index 5, so the anchor is bar 0
        assert label_anchor(bars, START, ts('2024-01-02'), 5) == bars.index[0]

    def test_window_without_bars_falls_back(self, intraday_bars):
        end = ts('2024-02-02')
        assert label_anchor(intraday_bars, ts('2024-02-01'), end) == ts('2024-02-01 23:00')

    def test_empty_series_falls_back(self):
        bars = make_intraday(0)
        end = ts('2024-01-02')
        assert label_anchor(bars, START, end) == ts('2024-01-01 23:00')

    def test_naive_bounds_are_treated_as_utc(self, intraday_bars):
        anchor = label_anchor(intraday_bars, pd.Timestamp('2024-01-10'), pd.Timestamp('2024-01-11'))
        assert anchor == ts('2024-01-10 18:00')

    def test_mapper_anchor_uses_configured_offset(self, intraday_bars):
        mapper = WindowMapper(bars_from_end=2)
        assert mapper.anchor(intraday_bars, ts('2024-01-10'), ts('2024-01-11')) == ts('2024-01-10 21:00')
