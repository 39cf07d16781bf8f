"""Builders for domain objects and sessions used across the test suite."""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from events.domain import (
    Booking,
    BookingId,
    BookingStatus,
    Capacity,
    Event,
    EventId,
    EventStatus,
    Money,
    Order,
    OrderId,
    OrderStatus,
    Profile,
    ProfileId,
    Role,
)
from events.domain.session import Identity, SessionContext

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_profile(
    role: Role = Role.USER,
    email: str = "ada@example.com",
    full_name: str | None = "Ada Lovelace",
    created_at: datetime = NOW,
) -> Profile:
    return Profile(
        id=ProfileId(uuid.uuid4()),
        email=email,
        full_name=full_name,
        role=role,
        created_at=created_at,
        updated_at=created_at,
    )


def make_event(
    title: str = "Live Jazz Night",
    description: str = "An evening of standards",
    location: str = "Music Hall",
    event_date: datetime = NOW + timedelta(days=7),
    price: str = "25.00",
    category: str = "Music",
    capacity: int = 10,
    available_seats: int = 10,
    status: EventStatus = EventStatus.PUBLISHED,
) -> Event:
    return Event(
        id=EventId(uuid.uuid4()),
        title=title,
        description=description,
        location=location,
        event_date=event_date,
        price=Money(Decimal(price)),
        category=category,
        capacity=Capacity(capacity),
        available_seats=Capacity(available_seats),
        status=status,
        image_url=None,
        organizer_id=None,
        created_at=NOW - timedelta(days=30),
        updated_at=NOW - timedelta(days=30),
    )


def make_booking(
    event: Event,
    user: Profile,
    num_tickets: int = 1,
    status: BookingStatus = BookingStatus.CONFIRMED,
    created_at: datetime = NOW,
) -> Booking:
    return Booking(
        id=BookingId(uuid.uuid4()),
        event_id=event.id,
        user_id=user.id,
        num_tickets=num_tickets,
        total_price=event.price.times(num_tickets),
        status=status,
        created_at=created_at,
    )


def make_order(
    event: Event,
    user: Profile,
    total_amount: str = "50.00",
    status: OrderStatus = OrderStatus.PENDING,
    quantity: int = 2,
    created_at: datetime = NOW,
) -> Order:
    return Order(
        id=OrderId(uuid.uuid4()),
        user_id=user.id,
        event_id=event.id,
        quantity=quantity,
        total_amount=Money(Decimal(total_amount)),
        status=status,
        created_at=created_at,
    )


def session_for(profile: Profile) -> SessionContext:
    return SessionContext(identity=Identity(user_id=profile.id, email=profile.email), role=profile.role)
