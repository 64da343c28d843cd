"""
Core Type Tests

Tests for LineRange.
"""

import pytest

from monoscan.types import LineRange


class TestLineRange:
    """Tests for LineRange."""

    def test_line_count(self):
        assert LineRange(3, 18).line_count == 16
        assert LineRange(0, 0).line_count == 1

    def test_strictly_contains_excludes_ends(self):
        r = LineRange(3, 18)
        assert r.strictly_contains(4)
        assert not r.strictly_contains(3)
        assert not r.strictly_contains(18)

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            LineRange(-1, 2)

    def test_end_before_start_rejected(self):
        with pytest.raises(ValueError):
            LineRange(5, 4)

    def test_frozen(self):
        r = LineRange(1, 2)
        with pytest.raises(AttributeError):
            r.start = 0  # type: ignore[misc]
