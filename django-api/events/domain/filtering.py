"""Pure, in-memory filters over loaded collections.

Every function recomputes its result from scratch; nothing is cached between
calls, so the same inputs always produce the same output.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from events.domain.models import Event, Order, Profile
from events.domain.value_objects import OrderStatus, PriceFilter

ALL_CATEGORIES = "All"
ALL_STATUSES = "all"


@dataclass(frozen=True)
class EventFilters:
    """Listing filters: free-text query, category and price band."""

    query: str = ""
    category: str = ALL_CATEGORIES
    price: PriceFilter = PriceFilter.ALL


def _matches_query(event: Event, query: str) -> bool:
    return (
        query in event.title.lower()
        or query in event.description.lower()
        or query in event.location.lower()
    )


def _matches_price(event: Event, price: PriceFilter) -> bool:
    if price is PriceFilter.FREE:
        return event.price.is_free
    if price is PriceFilter.PAID:
        return not event.price.is_free
    return True


def filter_events(events: Iterable[Event], filters: EventFilters) -> list[Event]:
    """Return the events matching every active filter, in their original order."""
    query = filters.query.lower()
    filtered = list(events)
    if query:
        filtered = [event for event in filtered if _matches_query(event, query)]
    if filters.category != ALL_CATEGORIES:
        filtered = [event for event in filtered if event.category == filters.category]
    return [event for event in filtered if _matches_price(event, filters.price)]


def filter_profiles(profiles: Iterable[Profile], search: str) -> list[Profile]:
    """Case-insensitive substring search over full name and email."""
    needle = search.lower()
    return [
        profile
        for profile in profiles
        if needle in (profile.full_name or "").lower() or needle in profile.email.lower()
    ]


def filter_orders(orders: Iterable[Order], status: OrderStatus | str) -> list[Order]:
    """Keep orders in the given status; "all" keeps everything."""
    if status == ALL_STATUSES:
        return list(orders)
    wanted = OrderStatus(status)
    return [order for order in orders if order.status is wanted]
