"""
Tests for the combined search and filter pass.

Run with: pytest src/caseview/filters/engine_test.py -v
"""

import pytest

from caseview.filters.descriptor import BooleanChoice, FilterDescriptor, FilterKind
from caseview.filters.engine import FilterEngine, build_predicate, filter_records


class TestFilterRecords:
    """Tests for filter_records()"""

    def test_search_and_filter_combined(self, people):
        result = filter_records(people, ["name"], "a", {"status": ["active"]})

        assert [r["name"] for r in result] == ["Ann"]

    def test_empty_query_and_state_keeps_everything(self, people):
        result = filter_records(people, ["name"], "", {})

        assert result == people

    def test_preserves_input_order(self, people):
        reversed_people = list(reversed(people))

        result = filter_records(reversed_people, ["name"], "", {"status": ["active"]})

        assert [r["name"] for r in result] == ["Cid", "Ann"]

    def test_returns_new_list(self, people):
        result = filter_records(people, ["name"], "", {})

        assert result is not people

    def test_inactive_filters_ignored(self, people):
        state = {"status": [], "city": "", "other": {"start": None, "end": None}}

        assert filter_records(people, ["name"], "", state) == people

    def test_no_matches(self, people):
        assert filter_records(people, ["name"], "zzz", {}) == []

    def test_custom_predicate(self, people):
        state = {"city": "dam"}
        predicates = {"city": lambda record, value: record["city"].endswith(value)}

        result = filter_records(people, ["name"], "", state, predicates)

        assert [r["name"] for r in result] == ["Bob", "Cid"]


class TestBuildPredicate:
    """Tests for build_predicate()"""

    def test_logical_and(self, people):
        predicate = build_predicate(["name", "city"], "dam", {"status": ["active"]})

        assert [r["name"] for r in people if predicate(r)] == ["Cid"]

    @pytest.mark.parametrize(
        "query,state,expected",
        [
            ("", {}, ["Ann", "Bob", "Cid"]),
            ("b", {}, ["Bob"]),
            ("", {"status": "active"}, ["Ann", "Cid"]),
            ("an", {"status": ("inactive",)}, []),
        ],
    )
    def test_table(self, people, query, state, expected):
        predicate = build_predicate(["name"], query, state)

        assert [r["name"] for r in people if predicate(r)] == expected


class TestFilterEngine:
    """Tests for FilterEngine"""

    def test_descriptor_lookup(self):
        status = FilterDescriptor("status", FilterKind.STATUS_SET, "Status")
        engine = FilterEngine(["name"], [status])

        assert engine.descriptor("status") is status
        assert engine.descriptor("unknown") is None

    def test_filter_uses_configuration(self):
        records = [
            {"id": 1, "name": "Ann", "intake": True},
            {"id": 2, "name": "Anton", "intake": False},
        ]
        engine = FilterEngine(["name"], [FilterDescriptor("intake", FilterKind.BOOLEAN)])

        result = engine.filter(records, "an", {"intake": BooleanChoice.FALSE})

        assert [r["id"] for r in result] == [2]

    def test_predicate_helper(self):
        engine = FilterEngine(["name"], custom_predicates={"x": lambda record, value: False})
        predicate = engine.predicate("", {"x": "anything"})

        assert predicate({"name": "Ann"}) is False
