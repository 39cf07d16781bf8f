from events.stores.interfaces import BookingStore, EventStore, OrderStore, ProfileStore, StoreError

__all__ = [
    "BookingStore",
    "EventStore",
    "OrderStore",
    "ProfileStore",
    "StoreError",
]
