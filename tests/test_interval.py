import math

import numpy as np
import pytest

from interval import UNIT, Interval


class TestInterval:
    def test_is_empty(self):
        assert Interval(1, 1, True, True).is_empty()
        assert Interval(1, 1).is_empty()
        assert Interval.closed(2, 1).is_empty()
        assert not Interval.closed(1, 1).is_empty()
        assert not UNIT.is_empty()

    @pytest.mark.parametrize("interval, expected", [
        (Interval.closed(0, 1), [True, True, True]),
        (Interval(0, 1, True, True), [False, True, False]),
        (Interval(0, 1), [True, True, False]),
        (Interval(0, 1, True, False), [False, True, True]),
    ])
    def test_open_ends(self, interval, expected):
        assert interval.mask([0.0, 0.5, 1.0]).tolist() == expected

    def test_tolerance_widens_both_ends(self):
        values = [-1e-12, 0.5, 1 + 1e-12, 2.0, math.nan, -math.inf]
        expected = np.array([True, True, True, False, False, False])
        assert np.array_equal(UNIT.mask(values, 1e-9), expected)
        assert not UNIT.mask([1 + 1e-6], 1e-9).any()
        assert Interval(0, 1, True, True).mask([0.0], 1e-9).all()

    def test_empty_masks_nothing(self):
        assert UNIT.mask(np.array([]), 1e-9).shape == (0,)
        assert not Interval.closed(2, 1).mask([1.5]).any()
