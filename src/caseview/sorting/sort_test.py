"""
Tests for sorting and the column toggle.

Run with: pytest src/caseview/sorting/sort_test.py -v
"""

from datetime import date

import pytest

from caseview.sorting.sort import (
    UNSORTED,
    SortDirection,
    SortState,
    next_sort_state,
    sort_records,
)


class TestNextSortState:
    """Tests for next_sort_state()"""

    def test_cycle_on_same_column(self):
        state = UNSORTED

        state = next_sort_state(state, "name")
        assert state == SortState("name", SortDirection.ASCENDING)

        state = next_sort_state(state, "name")
        assert state == SortState("name", SortDirection.DESCENDING)

        state = next_sort_state(state, "name")
        assert state == UNSORTED
        assert state.is_sorted is False

    def test_other_column_starts_ascending(self):
        state = SortState("name", SortDirection.DESCENDING)

        assert next_sort_state(state, "age") == SortState("age", SortDirection.ASCENDING)

    def test_fourth_toggle_equals_first(self):
        states = [UNSORTED]
        for _ in range(4):
            states.append(next_sort_state(states[-1], "name"))

        assert states[4] == states[1]
        assert states[3] == states[0]


class TestSortRecords:
    """Tests for sort_records()"""

    def test_ascending_and_descending(self, people):
        names = lambda records: [r["name"] for r in records]  # noqa: E731

        assert names(sort_records(people, SortState("name", SortDirection.DESCENDING))) == [
            "Cid",
            "Bob",
            "Ann",
        ]
        assert names(sort_records(people, SortState("name", SortDirection.ASCENDING))) == [
            "Ann",
            "Bob",
            "Cid",
        ]

    def test_unsorted_keeps_order_and_copies(self, people):
        result = sort_records(people, UNSORTED)

        assert result == people
        assert result is not people

    def test_stable_for_equal_keys(self, people):
        result = sort_records(people, SortState("status", SortDirection.ASCENDING))

        assert [r["name"] for r in result] == ["Ann", "Cid", "Bob"]

    def test_numbers_compare_numerically(self):
        records = [{"n": 10}, {"n": 9}, {"n": 100}]

        result = sort_records(records, SortState("n", SortDirection.ASCENDING))

        assert [r["n"] for r in result] == [9, 10, 100]

    def test_missing_values_first_ascending_last_descending(self):
        records = [{"id": 1, "d": "2024-02-01"}, {"id": 2}, {"id": 3, "d": None}, {"id": 4, "d": "2024-01-01"}]

        ascending = sort_records(records, SortState("d", SortDirection.ASCENDING))
        descending = sort_records(records, SortState("d", SortDirection.DESCENDING))

        assert [r["id"] for r in ascending] == [2, 3, 4, 1]
        assert [r["id"] for r in descending][:2] == [1, 4]
        assert {r["id"] for r in descending[2:]} == {2, 3}

    def test_mixed_types_do_not_raise(self):
        records = [{"v": "text"}, {"v": 3}, {"v": date(2024, 1, 1)}, {"v": None}, {"v": ["x"]}]

        result = sort_records(records, SortState("v", SortDirection.ASCENDING))

        assert [r["v"] for r in result] == [None, 3, date(2024, 1, 1), "text", ["x"]]

    def test_input_not_mutated(self, people):
        before = list(people)

        sort_records(people, SortState("name", SortDirection.DESCENDING))

        assert people == before

    @pytest.mark.parametrize("direction", [SortDirection.ASCENDING, SortDirection.DESCENDING])
    def test_sorted_output_is_permutation(self, people, direction):
        result = sort_records(people, SortState("city", direction))

        assert sorted(r["id"] for r in result) == [1, 2, 3]
