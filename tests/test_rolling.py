"""Tests for the fixed-window rolling average."""

import numpy as np
import pytest

from colorcet_maps.rolling import InvalidCapacity, RollingAverage


class TestRollingAverage:
    """Test push/average/count behavior."""

    def test_empty(self):
        avg = RollingAverage(4)
        assert avg.average() == 0
        assert avg.count() == 0

    def test_capacity_three(self):
        avg = RollingAverage(3)
        expected = [(1, 1.0, 1), (2, 1.5, 2), (3, 2.0, 3), (4, 3.0, 3)]
        for value, mean, count in expected:
            avg.push(value)
            assert avg.average() == pytest.approx(mean)
            assert avg.count() == count

    def test_capacity_one(self):
        avg = RollingAverage(1)
        for value in (5.0, -2.0, 7.5, 0.0):
            avg.push(value)
            assert avg.average() == value
            assert avg.count() == 1

    def test_not_diluted_by_prefill(self):
        """Test that zero-filled slots are ignored before the window fills."""
        avg = RollingAverage(100)
        avg.push(10)
        avg.push(20)
        assert avg.average() == pytest.approx(15.0)

    def test_matches_window_mean_after_many_pushes(self):
        rng = np.random.default_rng(0)
        values = rng.uniform(0, 33, size=500)
        avg = RollingAverage(60)
        for v in values:
            avg.push(v)
        assert avg.count() == 60
        assert avg.average() == pytest.approx(values[-60:].mean())

    def test_capacity_property(self):
        assert RollingAverage(8).capacity == 8


class TestInvalidCapacity:
    """Test construction-time validation."""

    @pytest.mark.parametrize("capacity", [0, -1, 2.5, "3", None, True])
    def test_rejects(self, capacity):
        with pytest.raises(InvalidCapacity, match="positive integer"):
            RollingAverage(capacity)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            RollingAverage(0)
