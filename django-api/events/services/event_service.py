"""Event service - listing, filtering and detail lookups.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from datetime import datetime

from loguru import logger

from events.domain.errors import BackendError, EventNotFoundError
from events.domain.filtering import EventFilters, filter_events
from events.domain.models import Event
from events.services.ids import parse_event_id
from events.stores.interfaces import EventStore, StoreError


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_upcoming(self, now: datetime) -> list[Event]:
        """Return events dated at or after now, soonest first."""
        try:
            return self._store.list_upcoming_events(now)
        except StoreError:
            logger.exception("Error loading events")
            raise BackendError("Failed to load events.") from None

    def browse(self, now: datetime, filters: EventFilters) -> list[Event]:
        """Load the upcoming events and apply the listing filters in memory."""
        return filter_events(self.list_upcoming(now), filters)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            BackendError: If the store could not be read.
        """
        parsed = parse_event_id(event_id)
        try:
            event = self._store.get_event(parsed)
        except StoreError:
            logger.exception("Error loading event {}", event_id)
            raise BackendError("Failed to load event.") from None
        if event is None:
            raise EventNotFoundError(event_id)
        return event
