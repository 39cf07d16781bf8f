"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from events.domain.value_objects import (
    BookingId,
    BookingStatus,
    Capacity,
    EventId,
    EventStatus,
    Money,
    OrderId,
    OrderStatus,
    ProfileId,
    Role,
)


@dataclass(frozen=True)
class Profile:
    """Domain representation of a user's profile row."""

    id: ProfileId
    email: str
    full_name: str | None
    role: Role
    created_at: datetime
    updated_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    location: str
    event_date: datetime
    price: Money
    category: str
    capacity: Capacity
    available_seats: Capacity
    status: EventStatus
    image_url: str | None
    organizer_id: ProfileId | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    event_id: EventId
    user_id: ProfileId
    num_tickets: int
    total_price: Money
    status: BookingStatus
    created_at: datetime

    def __post_init__(self) -> None:
        if self.num_tickets < 1:
            raise ValueError("A booking holds at least one ticket")


@dataclass(frozen=True)
class BookingWithEvent:
    """A booking joined with its event; event is None once the event is deleted."""

    booking: Booking
    event: Event | None


@dataclass(frozen=True)
class Order:
    """Domain representation of an admin-facing Order with display joins."""

    id: OrderId
    user_id: ProfileId
    event_id: EventId
    quantity: int
    total_amount: Money
    status: OrderStatus
    created_at: datetime
    user_full_name: str | None = None
    user_email: str | None = None
    event_title: str | None = None


@dataclass(frozen=True)
class EventDraft:
    """Editable event fields submitted from the admin console."""

    title: str
    description: str
    location: str
    event_date: datetime
    price: Decimal
    category: str
    capacity: int
    available_seats: int | None = None
    status: EventStatus | None = None
    image_url: str | None = None
    organizer_id: ProfileId | None = None


@dataclass(frozen=True)
class NewBooking:
    """Booking row to be written by the booking workflow."""

    event_id: EventId
    user_id: ProfileId
    num_tickets: int
    total_price: Money
    status: BookingStatus = BookingStatus.CONFIRMED


@dataclass(frozen=True)
class Dashboard:
    """A user's bookings split into upcoming and past-or-cancelled."""

    upcoming: tuple[BookingWithEvent, ...] = ()
    past_or_cancelled: tuple[BookingWithEvent, ...] = ()


@dataclass(frozen=True)
class AdminOverview:
    """Headline numbers shown on the admin console."""

    total_revenue: Money
    total_users: int
    admin_users: int
    active_events: int
    total_events: int
    pending_orders: int
    total_orders: int


@dataclass(frozen=True)
class AdminConsole:
    """Everything the admin console renders in one load."""

    overview: AdminOverview
    profiles: tuple[Profile, ...] = ()
    events: tuple[Event, ...] = ()
    orders: tuple[Order, ...] = ()
    filtered_profiles: tuple[Profile, ...] = field(default=())
    filtered_orders: tuple[Order, ...] = field(default=())
