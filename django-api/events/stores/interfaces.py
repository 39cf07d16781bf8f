"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Any backend failure is
raised as StoreError; stores never retry.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from events.domain import (
    Booking,
    BookingId,
    BookingWithEvent,
    Event,
    EventDraft,
    EventId,
    NewBooking,
    Order,
    OrderId,
    OrderStatus,
    Profile,
    ProfileId,
    Role,
)


class StoreError(Exception):
    """The backing data store rejected or failed a request."""


class ProfileStore(ABC):
    """Interface for profile persistence operations."""

    @abstractmethod
    def list_profiles(self) -> list[Profile]:
        """Return all profiles ordered by created_at descending."""
        ...

    @abstractmethod
    def get_profile(self, profile_id: ProfileId) -> Profile | None:
        """Return a profile by ID, or None if not found."""
        ...

    @abstractmethod
    def get_profile_for_account(self, account_id: int) -> Profile | None:
        """Return the profile keyed by an auth account, or None."""
        ...

    @abstractmethod
    def set_role(self, profile_id: ProfileId, role: Role) -> Profile | None:
        """Write a new role; return the updated profile or None if missing."""
        ...


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by event_date ascending."""
        ...

    @abstractmethod
    def list_upcoming_events(self, now: datetime) -> list[Event]:
        """Return events dated at or after now, ordered by event_date ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def insert_event(self, draft: EventDraft) -> Event:
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, draft: EventDraft) -> Event | None:
        """Overwrite the editable fields; None means the event does not exist."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Hard delete. Returns False when nothing was deleted."""
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def insert_booking(self, new_booking: NewBooking) -> Booking:
        """Write a booking row. Does not touch the event's seat counter."""
        ...

    @abstractmethod
    def insert_booking_with_seat_decrement(self, new_booking: NewBooking) -> Booking | None:
        """Decrement seats and write the booking in one transaction.

        Returns None, writing nothing, when the event has fewer available
        seats than requested.
        """
        ...

    @abstractmethod
    def list_bookings_for_user(self, user_id: ProfileId) -> list[BookingWithEvent]:
        """Return a user's bookings joined with events, newest first."""
        ...

    @abstractmethod
    def cancel_booking(self, booking_id: BookingId, user_id: ProfileId) -> bool:
        """Set status to cancelled. False when the user has no such booking."""
        ...


class OrderStore(ABC):
    """Interface for admin order operations."""

    @abstractmethod
    def list_orders(self) -> list[Order]:
        """Return orders joined with profile and event display fields, newest first."""
        ...

    @abstractmethod
    def set_status(self, order_id: OrderId, status: OrderStatus) -> Order | None:
        ...
