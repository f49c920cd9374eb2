"""Tests for the listing option models."""

import pytest
from pydantic import ValidationError

from snoowire.services.options import (
    DuplicateOptions,
    ListOptions,
    ListPostOptions,
    SearchOptions,
)


class TestListOptions:
    """Test ListOptions validation and rendering."""

    def test_empty(self):
        assert ListOptions().to_params() == {}

    def test_params(self):
        assert ListOptions(limit=50, after="t3_abc123").to_params() == {
            "limit": 50,
            "after": "t3_abc123",
        }

    @pytest.mark.parametrize("limit", [0, 101, -5])
    def test_limit_range(self, limit):
        with pytest.raises(ValidationError):
            ListOptions(limit=limit)

    @pytest.mark.parametrize("cursor", ["abc123", "t9_abc", "t3_", "T3_ABC"])
    def test_cursor_must_be_full_id(self, cursor):
        with pytest.raises(ValidationError):
            ListOptions(after=cursor)

    def test_single_anchor(self):
        with pytest.raises(ValidationError):
            ListOptions(after="t3_a", before="t3_b")

    def test_unknown_option(self):
        with pytest.raises(ValidationError):
            ListOptions(count=5)


class TestListPostOptions:
    """Test the time filter."""

    def test_time_filter_param_name(self):
        assert ListPostOptions(limit=10, time_filter="week").to_params() == {"limit": 10, "t": "week"}

    def test_invalid_time_filter(self):
        with pytest.raises(ValidationError):
            ListPostOptions(time_filter="decade")


class TestSearchOptions:
    """Test search sort."""

    def test_params(self):
        params = SearchOptions(sort="new", time_filter="all", before="t3_x").to_params()
        assert params == {"sort": "new", "t": "all", "before": "t3_x"}

    def test_invalid_sort(self):
        with pytest.raises(ValidationError):
            SearchOptions(sort="best")


class TestDuplicateOptions:
    """Test duplicate listing options."""

    def test_defaults_left_out(self):
        assert DuplicateOptions().to_params() == {}

    def test_params(self):
        params = DuplicateOptions(subreddit="python", sort="new", crossposts_only=True).to_params()
        assert params == {"sr": "python", "sort": "new", "crossposts_only": "true"}
