"""Django ORM implementation of the stores.

Each method queries the ORM and converts rows to domain models. Database
errors are re-raised as StoreError.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from uuid import UUID

from django.db import DatabaseError, transaction
from django.db.models import F

from events import models
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


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        raise StoreError(f"{operation} failed: {exc}") from exc


def _to_profile(row: models.Profile) -> Profile:
    return Profile(
        id=ProfileId(row.id),
        email=row.email,
        full_name=row.full_name,
        role=Role(row.role),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description,
        location=row.location,
        event_date=row.event_date,
        price=Money(row.price),
        category=row.category,
        capacity=Capacity(row.capacity),
        available_seats=Capacity(row.available_seats),
        status=EventStatus(row.status),
        image_url=row.image_url,
        organizer_id=ProfileId(row.organizer_id) if row.organizer_id else None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_booking(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        event_id=EventId(row.event_id),
        user_id=ProfileId(row.user_id),
        num_tickets=row.num_tickets,
        total_price=Money(row.total_price),
        status=BookingStatus(row.status),
        created_at=row.created_at,
    )


def _to_order(row: models.Order, event_titles: dict[UUID, str]) -> Order:
    return Order(
        id=OrderId(row.id),
        user_id=ProfileId(row.user_id),
        event_id=EventId(row.event_id),
        quantity=row.quantity,
        total_amount=Money(row.total_amount),
        status=OrderStatus(row.status),
        created_at=row.created_at,
        user_full_name=row.user.full_name,
        user_email=row.user.email,
        event_title=event_titles.get(row.event_id),
    )


def _apply_draft(row: models.Event, draft: EventDraft) -> None:
    row.title = draft.title
    row.description = draft.description
    row.location = draft.location
    row.event_date = draft.event_date
    row.price = draft.price
    row.category = draft.category
    row.capacity = draft.capacity
    row.image_url = draft.image_url
    row.organizer_id = draft.organizer_id.value if draft.organizer_id else None
    if draft.available_seats is not None:
        row.available_seats = draft.available_seats
    if draft.status is not None:
        row.status = draft.status.value


class DjangoProfileStore(ProfileStore):
    """Profile store backed by the profiles table."""

    def list_profiles(self) -> list[Profile]:
        with _translate_errors("list profiles"):
            return [_to_profile(row) for row in models.Profile.objects.order_by("-created_at")]

    def get_profile(self, profile_id: ProfileId) -> Profile | None:
        with _translate_errors("get profile"):
            row = models.Profile.objects.filter(id=profile_id.value).first()
        return _to_profile(row) if row else None

    def get_profile_for_account(self, account_id: int) -> Profile | None:
        with _translate_errors("get profile for account"):
            row = models.Profile.objects.filter(account_id=account_id).first()
        return _to_profile(row) if row else None

    def set_role(self, profile_id: ProfileId, role: Role) -> Profile | None:
        with _translate_errors("set role"):
            row = models.Profile.objects.filter(id=profile_id.value).first()
            if row is None:
                return None
            row.role = role.value
            row.save(update_fields=["role", "updated_at"])
        return _to_profile(row)


class DjangoEventStore(EventStore):
    """PostgreSQL-backed event store using Django ORM."""

    def list_events(self) -> list[Event]:
        with _translate_errors("list events"):
            return [_to_event(row) for row in models.Event.objects.order_by("event_date")]

    def list_upcoming_events(self, now: datetime) -> list[Event]:
        with _translate_errors("list upcoming events"):
            rows = models.Event.objects.filter(event_date__gte=now).order_by("event_date")
            return [_to_event(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        with _translate_errors("get event"):
            row = models.Event.objects.filter(id=event_id.value).first()
        return _to_event(row) if row else None

    def insert_event(self, draft: EventDraft) -> Event:
        row = models.Event(available_seats=draft.capacity)
        _apply_draft(row, draft)
        with _translate_errors("insert event"), transaction.atomic():
            row.save()
        return _to_event(row)

    def update_event(self, event_id: EventId, draft: EventDraft) -> Event | None:
        with _translate_errors("update event"), transaction.atomic():
            row = models.Event.objects.filter(id=event_id.value).first()
            if row is None:
                return None
            _apply_draft(row, draft)
            row.save()
        return _to_event(row)

    def delete_event(self, event_id: EventId) -> bool:
        with _translate_errors("delete event"):
            deleted, _ = models.Event.objects.filter(id=event_id.value).delete()
        return deleted > 0


class DjangoBookingStore(BookingStore):
    """Booking store backed by the bookings table."""

    def insert_booking(self, new_booking: NewBooking) -> Booking:
        with _translate_errors("insert booking"):
            row = models.Booking.objects.create(
                event_id=new_booking.event_id.value,
                user_id=new_booking.user_id.value,
                num_tickets=new_booking.num_tickets,
                total_price=new_booking.total_price.amount,
                status=new_booking.status.value,
            )
        return _to_booking(row)

    def insert_booking_with_seat_decrement(self, new_booking: NewBooking) -> Booking | None:
        with _translate_errors("insert booking with seat decrement"), transaction.atomic():
            updated = models.Event.objects.filter(
                id=new_booking.event_id.value,
                available_seats__gte=new_booking.num_tickets,
            ).update(available_seats=F("available_seats") - new_booking.num_tickets)
            if not updated:
                return None
            row = models.Booking.objects.create(
                event_id=new_booking.event_id.value,
                user_id=new_booking.user_id.value,
                num_tickets=new_booking.num_tickets,
                total_price=new_booking.total_price.amount,
                status=new_booking.status.value,
            )
        return _to_booking(row)

    def list_bookings_for_user(self, user_id: ProfileId) -> list[BookingWithEvent]:
        with _translate_errors("list bookings"):
            rows = list(models.Booking.objects.filter(user_id=user_id.value).order_by("-created_at"))
            events = models.Event.objects.in_bulk({row.event_id for row in rows})
        return [
            BookingWithEvent(
                booking=_to_booking(row),
                event=_to_event(events[row.event_id]) if row.event_id in events else None,
            )
            for row in rows
        ]

    def cancel_booking(self, booking_id: BookingId, user_id: ProfileId) -> bool:
        with _translate_errors("cancel booking"):
            updated = models.Booking.objects.filter(
                id=booking_id.value, user_id=user_id.value
            ).update(status=BookingStatus.CANCELLED.value)
        return updated > 0


class DjangoOrderStore(OrderStore):
    """Order store joining profile and event display fields."""

    def _joined(self, rows: list[models.Order]) -> list[Order]:
        titles = {
            event_id: event.title
            for event_id, event in models.Event.objects.in_bulk({row.event_id for row in rows}).items()
        }
        return [_to_order(row, titles) for row in rows]

    def list_orders(self) -> list[Order]:
        with _translate_errors("list orders"):
            rows = list(models.Order.objects.select_related("user").order_by("-created_at"))
            return self._joined(rows)

    def set_status(self, order_id: OrderId, status: OrderStatus) -> Order | None:
        with _translate_errors("set order status"):
            updated = models.Order.objects.filter(id=order_id.value).update(status=status.value)
            if not updated:
                return None
            row = models.Order.objects.select_related("user").get(id=order_id.value)
            return self._joined([row])[0]
