# ==============================================================================
# Tests for SessionSet
# ==============================================================================
"""
Unit tests for the bisect-backed ordered session container.
"""

import pytest

from sessiontop.core.models import Session
from sessiontop.core.session_set import SessionSet


def _set_of(*bounds: tuple[int, int]) -> SessionSet:
    sessions = SessionSet()
    for start, end in bounds:
        sessions.add(Session(start=start, end=end))
    return sessions


class TestLookups:
    """floor() and higher() queries."""

    def test_empty_set(self):
        sessions = SessionSet()
        assert sessions.floor(10) is None
        assert sessions.higher(10) is None
        assert len(sessions) == 0

    def test_floor_includes_equal_start(self):
        sessions = _set_of((10, 20), (50, 60))
        assert sessions.floor(50).start == 50
        assert sessions.floor(49).start == 10
        assert sessions.floor(9) is None

    def test_higher_excludes_equal_start(self):
        sessions = _set_of((10, 20), (50, 60))
        assert sessions.higher(10).start == 50
        assert sessions.higher(9).start == 10
        assert sessions.higher(50) is None


class TestMutation:
    """add(), remove() and move_start()."""

    def test_add_keeps_order(self):
        sessions = _set_of((50, 60), (10, 20), (30, 30))
        assert sessions.as_tuples() == ((10, 20), (30, 30), (50, 60))

    def test_add_duplicate_start_raises(self):
        sessions = _set_of((10, 20))
        with pytest.raises(ValueError, match="already exists"):
            sessions.add(Session(start=10, end=10))

    def test_remove(self):
        sessions = _set_of((10, 20), (50, 60))
        sessions.remove(sessions.floor(50))
        assert sessions.as_tuples() == ((10, 20),)

    def test_remove_unknown_raises(self):
        sessions = _set_of((10, 20))
        with pytest.raises(KeyError):
            sessions.remove(Session(start=10, end=20))

    def test_move_start_updates_lookup_key(self):
        sessions = _set_of((10, 20), (50, 60))
        sessions.move_start(sessions.floor(50), 30)

        assert sessions.as_tuples() == ((10, 20), (30, 60))
        assert sessions.floor(35).start == 30
        assert sessions.higher(20).start == 30

    def test_move_start_cannot_pass_previous(self):
        sessions = _set_of((10, 20), (50, 60))
        with pytest.raises(ValueError, match="would pass"):
            sessions.move_start(sessions.floor(50), 10)

    def test_move_start_forward_rejected(self):
        sessions = _set_of((10, 20))
        with pytest.raises(ValueError, match="only move backward"):
            sessions.move_start(sessions.floor(10), 15)
