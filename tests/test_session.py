"""Tests for session state."""

from blueprints.session.state import SessionState
from blueprints.summaries.aggregator import summarize


class TestSessionState:

    def test_starts_unset(self):
        session = SessionState()
        assert session.get_current_author() is None
        assert session.current_view is None

    def test_set_current_author(self):
        session = SessionState()
        session.set_current_author("johnconnor")
        assert session.get_current_author() == "johnconnor"

    def test_remember_view_for_current_author(self, house):
        session = SessionState()
        session.set_current_author("johnconnor")
        view = summarize("johnconnor", [house])
        session.remember_view(view)
        assert session.current_view == view

    def test_new_author_discards_view(self, house):
        session = SessionState()
        session.set_current_author("johnconnor")
        session.remember_view(summarize("johnconnor", [house]))
        session.set_current_author("maria")
        assert session.current_view is None

    def test_view_for_other_author_ignored(self, house):
        session = SessionState()
        session.set_current_author("maria")
        session.remember_view(summarize("johnconnor", [house]))
        assert session.current_view is None

    def test_reset(self, house):
        session = SessionState()
        session.set_current_author("johnconnor")
        session.remember_view(summarize("johnconnor", [house]))
        session.reset()
        assert session.get_current_author() is None
        assert session.current_view is None
