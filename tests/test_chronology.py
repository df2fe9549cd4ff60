# ==============================================================================
# Tests for the Source Chronology Resolver
# ==============================================================================
"""
Unit tests for resolve_chronology() using in-memory event sources.
"""

import logging

from sessiontop.base.source import EventSource
from sessiontop.core.chronology import first_timestamp, resolve_chronology
from sessiontop.core.models import PageViewEvent


class ListSource(EventSource):
    """In-memory source; counts how many events were read."""

    def __init__(self, name: str, timestamps: list[int]):
        self._name = name
        self._timestamps = timestamps
        self.reads = 0

    @property
    def name(self) -> str:
        return self._name

    def events(self):
        for ts in self._timestamps:
            self.reads += 1
            yield PageViewEvent(user_id="u", timestamp=ts)


class TestFirstTimestamp:
    """Tests for sampling a single source."""

    def test_reads_only_first_event(self):
        source = ListSource("a", [500, 600, 700])
        assert first_timestamp(source) == 500
        assert source.reads == 1

    def test_empty_source(self):
        assert first_timestamp(ListSource("empty", [])) is None


class TestResolveChronology:
    """Tests for ordering several sources."""

    def test_sorted_by_first_timestamp(self):
        late = ListSource("late", [3000, 3100])
        early = ListSource("early", [1000, 4000])
        middle = ListSource("middle", [2000])

        resolved = resolve_chronology([late, early, middle])

        assert [r.source.name for r in resolved] == ["early", "middle", "late"]
        assert [r.first_timestamp for r in resolved] == [1000, 2000, 3000]

    def test_ties_keep_input_order(self):
        first = ListSource("first", [1000])
        second = ListSource("second", [1000])
        earliest = ListSource("earliest", [10])

        resolved = resolve_chronology([first, second, earliest])
        assert [r.source.name for r in resolved] == ["earliest", "first", "second"]

    def test_empty_sources_dropped_with_warning(self, caplog):
        empty = ListSource("nothing.log", [])
        full = ListSource("full.log", [1000])

        with caplog.at_level(logging.WARNING, logger="sessiontop.core.chronology"):
            resolved = resolve_chronology([empty, full])

        assert [r.source.name for r in resolved] == ["full.log"]
        assert "nothing.log" in caplog.text

    def test_no_sources(self):
        assert resolve_chronology([]) == []
