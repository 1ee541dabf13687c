"""
Tests for debounced search state.

Run with: pytest src/caseview/search/state_test.py -v
"""

import pytest

from caseview.search.state import SearchState


class TestSetRaw:
    """Tests for SearchState.set_raw() and poll()"""

    def test_rapid_keystrokes_publish_only_last(self, clock):
        state = SearchState(window_ms=300, clock=clock)
        published = []

        for text in ["a", "an", "ann"]:
            state.set_raw(text)
            clock.advance(100)
            if state.poll():
                published.append(state.debounced_query)

        clock.advance(300)
        if state.poll():
            published.append(state.debounced_query)

        assert published == ["ann"]

    def test_not_published_before_window(self, clock):
        state = SearchState(window_ms=300, clock=clock)

        state.set_raw("ann")
        clock.advance(299)

        assert state.poll() is False
        assert state.debounced_query == ""
        assert state.raw_query == "ann"
        assert state.pending is True

    def test_published_once_window_elapses(self, clock):
        state = SearchState(window_ms=300, clock=clock)

        state.set_raw("ann")
        clock.advance(300)

        assert state.poll() is True
        assert state.debounced_query == "ann"
        assert state.pending is False
        assert state.poll() is False

    def test_keystroke_rearms_deadline(self, clock):
        state = SearchState(window_ms=300, clock=clock)

        state.set_raw("a")
        clock.advance(250)
        state.set_raw("an")
        clock.advance(250)

        assert state.poll() is False

        clock.advance(60)

        assert state.poll() is True
        assert state.debounced_query == "an"

    def test_zero_window_publishes_immediately(self, clock):
        state = SearchState(window_ms=0, clock=clock)

        state.set_raw("ann")

        assert state.debounced_query == "ann"
        assert state.pending is False

    def test_typing_back_to_published_value_reports_no_change(self, clock):
        state = SearchState(window_ms=300, clock=clock, initial="ann")

        state.set_raw("an")
        state.set_raw("ann")
        clock.advance(300)

        assert state.poll() is False
        assert state.debounced_query == "ann"

    def test_negative_window_rejected(self):
        with pytest.raises(ValueError, match="Debounce window"):
            SearchState(window_ms=-1)


class TestFlushAndReset:
    """Tests for SearchState.flush() and reset()"""

    def test_flush_publishes_pending(self, clock):
        state = SearchState(window_ms=300, clock=clock)
        state.set_raw("bob")

        assert state.flush() is True
        assert state.debounced_query == "bob"
        assert state.flush() is False

    def test_reset_drops_pending(self, clock):
        state = SearchState(window_ms=300, clock=clock)
        state.set_raw("bob")

        state.reset()
        clock.advance(1000)

        assert state.poll() is False
        assert state.raw_query == ""
        assert state.debounced_query == ""
