"""Derived views: the dashboard partition and the admin overview."""

from collections.abc import Iterable, Sequence
from datetime import datetime

from events.domain.models import AdminOverview, BookingWithEvent, Dashboard, Event, Order, Profile
from events.domain.value_objects import BookingStatus, EventStatus, Money, OrderStatus

REVENUE_STATUSES = frozenset({OrderStatus.CONFIRMED, OrderStatus.COMPLETED})
ACTIVE_EVENT_STATUSES = frozenset({EventStatus.ACTIVE, EventStatus.PUBLISHED})


def is_upcoming(item: BookingWithEvent, now: datetime) -> bool:
    """A booking is upcoming iff its event is still ahead and it is confirmed."""
    if item.event is None:
        return False
    return item.event.event_date >= now and item.booking.status is BookingStatus.CONFIRMED


def partition_bookings(bookings: Iterable[BookingWithEvent], now: datetime) -> Dashboard:
    """Split bookings into upcoming and past-or-cancelled, keeping their order."""
    upcoming: list[BookingWithEvent] = []
    past: list[BookingWithEvent] = []
    for item in bookings:
        if is_upcoming(item, now):
            upcoming.append(item)
        else:
            past.append(item)
    return Dashboard(upcoming=tuple(upcoming), past_or_cancelled=tuple(past))


def compute_overview(
    profiles: Sequence[Profile],
    events: Sequence[Event],
    orders: Sequence[Order],
) -> AdminOverview:
    revenue = Money.zero()
    for order in orders:
        if order.status in REVENUE_STATUSES:
            revenue = revenue + order.total_amount

    return AdminOverview(
        total_revenue=revenue,
        total_users=len(profiles),
        admin_users=sum(1 for profile in profiles if profile.is_admin),
        active_events=sum(1 for event in events if event.status in ACTIVE_EVENT_STATUSES),
        total_events=len(events),
        pending_orders=sum(1 for order in orders if order.status is OrderStatus.PENDING),
        total_orders=len(orders),
    )
