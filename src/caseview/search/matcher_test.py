"""
Tests for free-text search matching.

Run with: pytest src/caseview/search/matcher_test.py -v
"""

from decimal import Decimal

import pytest

from caseview.search.matcher import matches_search, searchable_text


class TestMatchesSearch:
    """Tests for matches_search()"""

    def test_substring_match_ignores_case(self):
        record = {"name": "Ann", "email": "ann@x.io"}

        assert matches_search(record, ["name", "email"], "AN") is True

    def test_no_field_contains_query(self):
        assert matches_search({"name": "Bob"}, ["name"], "ann") is False

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_blank_query_matches_everything(self, query):
        assert matches_search({"name": "Bob"}, ["name"], query) is True
        assert matches_search({}, [], query) is True

    def test_numbers_searched_by_decimal_rendering(self):
        assert matches_search({"age": 25}, ["age"], "25") is True
        assert matches_search({"age": 25.0}, ["age"], "25") is True
        assert matches_search({"amount": Decimal("12.50")}, ["amount"], "12.5") is True

    def test_booleans_and_objects_not_searchable(self):
        record = {"done": True, "tags": ["true"], "nested": {"a": "true"}}

        assert matches_search(record, ["done", "tags", "nested"], "true") is False

    def test_missing_and_none_fields_skipped(self):
        record = {"name": None}

        assert matches_search(record, ["name", "email"], "a") is False

    def test_fields_outside_list_ignored(self):
        record = {"name": "Ann", "secret": "needle"}

        assert matches_search(record, ["name"], "needle") is False

    def test_query_whitespace_is_part_of_needle(self):
        record = {"name": "Ann"}

        assert matches_search(record, ["name"], " ann") is False
        assert matches_search({"name": "Ann Smit"}, ["name"], "ann ") is True


class TestSearchableText:
    """Tests for searchable_text()"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("text", "text"),
            (7, "7"),
            (7.0, "7"),
            (7.25, "7.25"),
            (Decimal("3.10"), "3.10"),
            (True, None),
            (None, None),
            (float("nan"), None),
            (["a"], None),
        ],
    )
    def test_searchable_text(self, value, expected):
        assert searchable_text(value) == expected
