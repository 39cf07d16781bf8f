"""In-memory implementation of the stores.

Used by unit tests and local experiments. All four stores share one
InMemoryBackend; naming an operation in ``failing`` makes it raise
StoreError, which is how tests simulate an unavailable backend.
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from events.domain import (
    Booking,
    BookingId,
    BookingStatus,
    BookingWithEvent,
    Capacity,
    Event,
    EventDraft,
    EventId,
    EventStatus,
    Money,
    NewBooking,
    Order,
    OrderId,
    OrderStatus,
    Profile,
    ProfileId,
    Role,
)
from events.stores.interfaces import BookingStore, EventStore, OrderStore, ProfileStore, StoreError


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class InMemoryBackend:
    profiles: dict[ProfileId, Profile] = field(default_factory=dict)
    accounts: dict[int, ProfileId] = field(default_factory=dict)
    events: dict[EventId, Event] = field(default_factory=dict)
    bookings: dict[BookingId, Booking] = field(default_factory=dict)
    orders: dict[OrderId, Order] = field(default_factory=dict)
    failing: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)

    def record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failing:
            raise StoreError(f"{operation} failed")

    def add_profile(self, profile: Profile, account_id: int | None = None) -> Profile:
        self.profiles[profile.id] = profile
        if account_id is not None:
            self.accounts[account_id] = profile.id
        return profile

    def add_event(self, event: Event) -> Event:
        self.events[event.id] = event
        return event

    def add_booking(self, booking: Booking) -> Booking:
        self.bookings[booking.id] = booking
        return booking

    def add_order(self, order: Order) -> Order:
        self.orders[order.id] = order
        return order


class InMemoryProfileStore(ProfileStore):
    def __init__(self, backend: InMemoryBackend) -> None:
        self._backend = backend

    def list_profiles(self) -> list[Profile]:
        self._backend.record("list_profiles")
        return sorted(self._backend.profiles.values(), key=lambda p: p.created_at, reverse=True)

    def get_profile(self, profile_id: ProfileId) -> Profile | None:
        self._backend.record("get_profile")
        return self._backend.profiles.get(profile_id)

    def get_profile_for_account(self, account_id: int) -> Profile | None:
        self._backend.record("get_profile_for_account")
        profile_id = self._backend.accounts.get(account_id)
        return self._backend.profiles.get(profile_id) if profile_id else None

    def set_role(self, profile_id: ProfileId, role: Role) -> Profile | None:
        self._backend.record("set_role")
        profile = self._backend.profiles.get(profile_id)
        if profile is None:
            return None
        updated = replace(profile, role=role, updated_at=_now())
        self._backend.profiles[profile_id] = updated
        return updated


class InMemoryEventStore(EventStore):
    def __init__(self, backend: InMemoryBackend) -> None:
        self._backend = backend

    def list_events(self) -> list[Event]:
        self._backend.record("list_events")
        return sorted(self._backend.events.values(), key=lambda e: e.event_date)

    def list_upcoming_events(self, now: datetime) -> list[Event]:
        self._backend.record("list_upcoming_events")
        upcoming = [event for event in self._backend.events.values() if event.event_date >= now]
        return sorted(upcoming, key=lambda e: e.event_date)

    def get_event(self, event_id: EventId) -> Event | None:
        self._backend.record("get_event")
        return self._backend.events.get(event_id)

    def insert_event(self, draft: EventDraft) -> Event:
        self._backend.record("insert_event")
        now = _now()
        try:
            event = Event(
                id=EventId(uuid.uuid4()),
                title=draft.title,
                description=draft.description,
                location=draft.location,
                event_date=draft.event_date,
                price=Money(draft.price),
                category=draft.category,
                capacity=Capacity(draft.capacity),
                available_seats=Capacity(
                    draft.capacity if draft.available_seats is None else draft.available_seats
                ),
                status=draft.status or EventStatus.DRAFT,
                image_url=draft.image_url,
                organizer_id=draft.organizer_id,
                created_at=now,
                updated_at=now,
            )
        except ValueError as exc:
            raise StoreError(str(exc)) from exc
        self._check_constraints(event)
        self._backend.events[event.id] = event
        return event

    def update_event(self, event_id: EventId, draft: EventDraft) -> Event | None:
        self._backend.record("update_event")
        current = self._backend.events.get(event_id)
        if current is None:
            return None
        try:
            updated = replace(
                current,
                title=draft.title,
                description=draft.description,
                location=draft.location,
                event_date=draft.event_date,
                price=Money(draft.price),
                category=draft.category,
                capacity=Capacity(draft.capacity),
                available_seats=(
                    current.available_seats
                    if draft.available_seats is None
                    else Capacity(draft.available_seats)
                ),
                status=draft.status or current.status,
                image_url=draft.image_url,
                organizer_id=draft.organizer_id,
                updated_at=_now(),
            )
        except ValueError as exc:
            raise StoreError(str(exc)) from exc
        self._check_constraints(updated)
        self._backend.events[event_id] = updated
        return updated

    def delete_event(self, event_id: EventId) -> bool:
        self._backend.record("delete_event")
        return self._backend.events.pop(event_id, None) is not None

    @staticmethod
    def _check_constraints(event: Event) -> None:
        if event.available_seats.value > event.capacity.value:
            raise StoreError("available_seats exceeds capacity")


class InMemoryBookingStore(BookingStore):
    def __init__(self, backend: InMemoryBackend) -> None:
        self._backend = backend

    def _write(self, new_booking: NewBooking) -> Booking:
        booking = Booking(
            id=BookingId(uuid.uuid4()),
            event_id=new_booking.event_id,
            user_id=new_booking.user_id,
            num_tickets=new_booking.num_tickets,
            total_price=new_booking.total_price,
            status=new_booking.status,
            created_at=_now(),
        )
        self._backend.bookings[booking.id] = booking
        return booking

    def insert_booking(self, new_booking: NewBooking) -> Booking:
        self._backend.record("insert_booking")
        return self._write(new_booking)

    def insert_booking_with_seat_decrement(self, new_booking: NewBooking) -> Booking | None:
        self._backend.record("insert_booking_with_seat_decrement")
        event = self._backend.events.get(new_booking.event_id)
        if event is None or event.available_seats.value < new_booking.num_tickets:
            return None
        self._backend.events[event.id] = replace(
            event, available_seats=Capacity(event.available_seats.value - new_booking.num_tickets)
        )
        return self._write(new_booking)

    def list_bookings_for_user(self, user_id: ProfileId) -> list[BookingWithEvent]:
        self._backend.record("list_bookings_for_user")
        mine = [b for b in self._backend.bookings.values() if b.user_id == user_id]
        mine.sort(key=lambda b: b.created_at, reverse=True)
        return [BookingWithEvent(booking=b, event=self._backend.events.get(b.event_id)) for b in mine]

    def cancel_booking(self, booking_id: BookingId, user_id: ProfileId) -> bool:
        self._backend.record("cancel_booking")
        booking = self._backend.bookings.get(booking_id)
        if booking is None or booking.user_id != user_id:
            return False
        self._backend.bookings[booking_id] = replace(booking, status=BookingStatus.CANCELLED)
        return True


class InMemoryOrderStore(OrderStore):
    def __init__(self, backend: InMemoryBackend) -> None:
        self._backend = backend

    def _joined(self, order: Order) -> Order:
        profile = self._backend.profiles.get(order.user_id)
        event = self._backend.events.get(order.event_id)
        return replace(
            order,
            user_full_name=profile.full_name if profile else None,
            user_email=profile.email if profile else None,
            event_title=event.title if event else None,
        )

    def list_orders(self) -> list[Order]:
        self._backend.record("list_orders")
        orders = sorted(self._backend.orders.values(), key=lambda o: o.created_at, reverse=True)
        return [self._joined(order) for order in orders]

    def set_status(self, order_id: OrderId, status: OrderStatus) -> Order | None:
        self._backend.record("set_order_status")
        order = self._backend.orders.get(order_id)
        if order is None:
            return None
        updated = replace(order, status=status)
        self._backend.orders[order_id] = updated
        return self._joined(updated)
