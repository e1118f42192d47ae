"""Unit tests for size drop detection."""

import pytest

from fireworks_verifier.counts import (
    greater_than_or_equal_to_5_percent_drop,
    is_percent_drop,
)


class TestFivePercentDrop:
    """Tests for greater_than_or_equal_to_5_percent_drop."""

    def test_drop_above_threshold(self):
        # 6 / 106 is about 5.66%
        assert greater_than_or_equal_to_5_percent_drop(100, 106) is True

    def test_drop_below_threshold(self):
        # 4 / 104 is about 3.85%
        assert greater_than_or_equal_to_5_percent_drop(100, 104) is False

    def test_exactly_five_percent_is_a_drop(self):
        assert greater_than_or_equal_to_5_percent_drop(95, 100) is True

    def test_just_under_five_percent(self):
        assert greater_than_or_equal_to_5_percent_drop(9501, 10000) is False

    @pytest.mark.parametrize("actual", [100, 150, 10_000])
    def test_growth_or_same_size_is_not_a_drop(self, actual):
        assert greater_than_or_equal_to_5_percent_drop(actual, 100) is False

    def test_zero_expected_size_is_never_a_drop(self):
        assert greater_than_or_equal_to_5_percent_drop(0, 0) is False

    def test_empty_current_file_is_a_drop(self):
        assert greater_than_or_equal_to_5_percent_drop(0, 100) is True


class TestIsPercentDrop:
    """Tests for the general threshold form."""

    def test_custom_threshold(self):
        assert is_percent_drop(90, 100, 10) is True
        assert is_percent_drop(91, 100, 10) is False

    def test_zero_percent_flags_any_shrink(self):
        assert is_percent_drop(99, 100, 0) is True
