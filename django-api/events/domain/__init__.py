from events.domain.models import (
    AdminConsole,
    AdminOverview,
    Booking,
    BookingWithEvent,
    Dashboard,
    Event,
    EventDraft,
    NewBooking,
    Order,
    Profile,
)
from events.domain.value_objects import (
    BookingId,
    BookingStatus,
    Capacity,
    EventId,
    EventStatus,
    Money,
    OrderId,
    OrderStatus,
    PriceFilter,
    ProfileId,
    Role,
)

__all__ = [
    "AdminConsole",
    "AdminOverview",
    "Booking",
    "BookingWithEvent",
    "Dashboard",
    "Event",
    "EventDraft",
    "NewBooking",
    "Order",
    "Profile",
    "EventId",
    "ProfileId",
    "BookingId",
    "OrderId",
    "Money",
    "Capacity",
    "Role",
    "BookingStatus",
    "OrderStatus",
    "EventStatus",
    "PriceFilter",
]
