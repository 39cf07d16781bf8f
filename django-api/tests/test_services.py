"""Unit tests for EventService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from datetime import timedelta

import pytest

from events.domain import PriceFilter
from events.domain.errors import BackendError, EventNotFoundError, InvalidEventIdError
from events.domain.filtering import EventFilters
from events.services import EventService
from helpers import NOW, make_event


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, event_store):
        with pytest.raises(InvalidEventIdError):
            EventService(event_store).get_event("not-a-uuid")

    def test_get_event_not_found_raises_error(self, event_store):
        with pytest.raises(EventNotFoundError):
            EventService(event_store).get_event("6f0d2c1e-9f43-4d1c-8f44-1f5bb3f6d2a1")

    def test_get_event_returns_event(self, backend, event_store):
        event = backend.add_event(make_event())
        assert EventService(event_store).get_event(str(event.id)) == event

    def test_list_upcoming_excludes_past_and_sorts_ascending(self, backend, event_store):
        later = backend.add_event(make_event(title="Later", event_date=NOW + timedelta(days=9)))
        backend.add_event(make_event(title="Gone", event_date=NOW - timedelta(minutes=1)))
        sooner = backend.add_event(make_event(title="Sooner", event_date=NOW + timedelta(days=1)))
        now_event = backend.add_event(make_event(title="Now", event_date=NOW))

        assert EventService(event_store).list_upcoming(NOW) == [now_event, sooner, later]

    def test_browse_applies_filters(self, backend, event_store):
        free = backend.add_event(make_event(title="Open Day", price="0"))
        backend.add_event(make_event(title="Gala", price="80.00"))

        result = EventService(event_store).browse(NOW, EventFilters(price=PriceFilter.FREE))

        assert result == [free]

    def test_store_failure_surfaces_generic_error(self, backend, event_store):
        backend.failing.add("list_upcoming_events")
        with pytest.raises(BackendError) as excinfo:
            EventService(event_store).list_upcoming(NOW)
        assert excinfo.value.message == "Failed to load events."
