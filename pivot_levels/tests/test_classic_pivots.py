# pivot_levels/tests/test_classic_pivots.py
"""
Module: Classic Pivot Tests
Purpose: Verify the floor-trader formulas and the non-positive price guard
"""

import math

import pandas as pd
import pytest

from pivot_levels.calculations.pivots import PivotCalculator, compute_pivots
from pivot_levels.tests.conftest import make_daily


class TestComputePivots:
    """Formula checks against known values"""

    def test_reference_fixture(self):
        pivots = compute_pivots(110.0, 100.0, 105.0)

        assert pivots.pp == 105.0
        assert pivots.s1 == 100.0
        assert pivots.r1 == 110.0
        assert pivots.s2 == 95.0
        assert pivots.r2 == 115.0
        assert pivots.s3 == 90.0
        assert pivots.r3 == 120.0

    @pytest.mark.parametrize("high,low,close", [
        (110.0, 100.0, 105.0),
        (1.10452, 1.09871, 1.10003),
        (4821.25, 4777.5, 4810.75),
        (52.3, 50.1, 50.2),
    ])
    def test_algebraic_relations(self, high, low, close):
        pivots = compute_pivots(high, low, close)

        assert math.isclose(pivots.pp, (high + low + close) / 3)
        assert math.isclose(pivots.r1 - pivots.s1, high - low)
        assert math.isclose(pivots.s1 + pivots.r1, 4 * pivots.pp - high - low)
        assert math.isclose(pivots.r2 - pivots.s2, 2 * (high - low))
        assert math.isclose(pivots.r3 - pivots.s3, 3 * (high - low))

    def test_no_rounding(self):
        pivots = compute_pivots(1.0, 0.5, 0.7)
        assert pivots.pp == (1.0 + 0.5 + 0.7) / 3

    @pytest.mark.parametrize("high,low,close", [
        (0.0, 100.0, 105.0),
        (110.0, 0.0, 105.0),
        (110.0, 100.0, 0.0),
        (-1.0, 100.0, 105.0),
        (110.0, float('nan'), 105.0),
    ])
    def test_non_positive_inputs_skip(self, high, low, close):
        assert compute_pivots(high, low, close) is None

    def test_levels_order(self):
        names = [name for name, _ in compute_pivots(110.0, 100.0, 105.0).levels()]
        assert names == ['PP', 'R1', 'R2', 'R3', 'S1', 'S2', 'S3']


class TestPivotCalculator:
    """Reading seed values from the daily series"""

    def test_calculate_for_day(self):
        daily = make_daily(10)
        pivots = PivotCalculator().calculate_for_day(daily, 8)

        # Day 8: H=118, L=108, C=113
        assert pivots.pp == pytest.approx(113.0)
        assert pivots.r1 == pytest.approx(118.0)
        assert pivots.s1 == pytest.approx(108.0)

    @pytest.mark.parametrize("index", [-1, 10, 50])
    def test_out_of_range_index(self, index):
        assert PivotCalculator().calculate_for_day(make_daily(10), index) is None

    def test_zero_bar_is_skipped(self):
        daily = make_daily(3)
        daily.iloc[0, daily.columns.get_loc('close')] = 0.0

        calculator = PivotCalculator()
        assert calculator.calculate_for_day(daily, 0) is None
        assert calculator.calculate_for_day(daily, 1) is not None

    def test_calculate_matches_function(self):
        assert PivotCalculator().calculate(110.0, 100.0, 105.0) == compute_pivots(110.0, 100.0, 105.0)

    def test_empty_series(self):
        empty = make_daily(0)
        assert isinstance(empty, pd.DataFrame)
        assert PivotCalculator().calculate_for_day(empty, 0) is None
