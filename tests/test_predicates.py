"""Tests for the predicate builders."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from klaw_variant import _, any_, range_


class TestWildcard:
    def test_always_true(self):
        assert _() is True
        assert _(None) is True
        assert _(1, 2, 3) is True


class TestRange:
    """Tests for range_ bounds handling."""

    @pytest.mark.parametrize(
        ("inclusive", "value", "expected"),
        [
            ((True, True), 5, True),
            ((True, True), 0, True),
            ((True, True), 10, True),
            ((False, False), 5, True),
            ((False, False), 0, False),
            ((False, False), 10, False),
            ((False, True), 0, False),
            ((False, True), 10, True),
            ((True, False), 0, True),
            ((True, False), 10, False),
            ((True, False), 9, True),
        ],
    )
    def test_bounds(self, inclusive, value, expected):
        assert range_(0, 10, inclusive)(value) is expected

    def test_default_is_inclusive(self):
        assert range_(0, 10)(10) is True
        assert range_(0, 10)(11) is False
        assert range_(0, 10)(-1) is False

    def test_no_value(self):
        assert range_(0, 10)() is False

    def test_floats(self):
        assert range_(0.5, 1.5)(1.0) is True

    @given(st.integers(), st.integers(), st.integers())
    def test_inclusive_matches_chained_comparison(self, lower: int, upper: int, value: int):
        assert range_(lower, upper)(value) is (lower <= value <= upper)


class TestAny:
    """Tests for any_ membership."""

    def test_membership(self):
        any_fn = any_(["turing", "curry", "berners-lee"])
        assert any_fn("turing") is True
        assert any_fn("berners-lee") is True
        assert any_fn("torvalds") is False
        assert any_fn("") is False

    def test_no_value(self):
        assert any_(["a", "b"])() is False

    def test_not_member(self):
        assert any_(["a", "b"])("c") is False

    def test_accepts_generators_once(self):
        any_fn = any_(x for x in [1, 2])
        assert any_fn(1) is True
        assert any_fn(1) is True

    def test_unhashable_candidates(self):
        assert any_([[1], [2]])([2]) is True
