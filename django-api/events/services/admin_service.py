"""Admin console service: events, user roles and orders.

No transition rules are enforced here. Roles flip freely (including the
caller's own), event and order statuses may move from any value to any other,
and deleting an event does not look at its bookings or orders.
"""

from dataclasses import replace

from loguru import logger

from events.domain.aggregation import compute_overview
from events.domain.errors import (
    AdminRequiredError,
    BackendError,
    ConfirmationRequiredError,
    EventNotFoundError,
    InvalidInputError,
    OrderNotFoundError,
    ProfileNotFoundError,
)
from events.domain.filtering import ALL_STATUSES, filter_orders, filter_profiles
from events.domain.models import AdminConsole, Event, EventDraft, Order, Profile
from events.domain.session import SessionContext
from events.domain.value_objects import EventStatus, OrderId, OrderStatus, ProfileId
from events.services.ids import parse_event_id, parse_id
from events.stores.interfaces import EventStore, OrderStore, ProfileStore, StoreError


class AdminService:
    """Service behind the admin console."""

    def __init__(self, profiles: ProfileStore, events: EventStore, orders: OrderStore) -> None:
        self._profiles = profiles
        self._events = events
        self._orders = orders

    @staticmethod
    def _require_admin(session: SessionContext) -> None:
        if not session.is_admin:
            raise AdminRequiredError()

    def load(
        self,
        session: SessionContext,
        *,
        user_search: str = "",
        order_status: str = ALL_STATUSES,
    ) -> AdminConsole:
        """Fetch profiles, events and orders and derive the overview."""
        self._require_admin(session)
        if order_status != ALL_STATUSES and order_status not in {s.value for s in OrderStatus}:
            raise InvalidInputError(f"Unknown order status: {order_status}")
        try:
            profiles = self._profiles.list_profiles()
            events = self._events.list_events()
            orders = self._orders.list_orders()
        except StoreError:
            logger.exception("Error loading admin console")
            raise BackendError("Failed to load admin data.") from None

        return AdminConsole(
            overview=compute_overview(profiles, events, orders),
            profiles=tuple(profiles),
            events=tuple(events),
            orders=tuple(orders),
            filtered_profiles=tuple(filter_profiles(profiles, user_search)),
            filtered_orders=tuple(filter_orders(orders, order_status)),
        )

    def toggle_role(self, session: SessionContext, profile_id: str) -> Profile:
        """Flip a profile between user and admin."""
        self._require_admin(session)
        parsed = parse_id(ProfileId, profile_id, kind="user")
        try:
            current = self._profiles.get_profile(parsed)
            if current is None:
                raise ProfileNotFoundError(profile_id)
            updated = self._profiles.set_role(parsed, current.role.toggled())
        except StoreError:
            logger.exception("Error updating role for {}", profile_id)
            raise BackendError("Failed to update role") from None
        if updated is None:
            raise ProfileNotFoundError(profile_id)

        logger.info("Role of {} updated to {}", profile_id, updated.role.value)
        return updated

    def save_event(self, session: SessionContext, draft: EventDraft, event_id: str | None = None) -> Event:
        """Insert when event_id is absent, otherwise overwrite the editable fields."""
        self._require_admin(session)
        parsed = parse_event_id(event_id) if event_id else None
        try:
            if parsed is None:
                if draft.status is None:
                    draft = replace(draft, status=EventStatus.DRAFT)
                saved = self._events.insert_event(draft)
            else:
                saved = self._events.update_event(parsed, draft)
        except StoreError:
            logger.exception("Error saving event {}", event_id or "(new)")
            raise BackendError("Failed to save event") from None
        if saved is None:
            raise EventNotFoundError(str(event_id))

        logger.info("Event {} {}", saved.id, "updated" if parsed else "created")
        return saved

    def delete_event(self, session: SessionContext, event_id: str, *, confirmed: bool) -> None:
        """Hard delete an event. Its bookings and orders are left behind."""
        self._require_admin(session)
        if not confirmed:
            raise ConfirmationRequiredError("delete this event")
        parsed = parse_event_id(event_id)
        try:
            deleted = self._events.delete_event(parsed)
        except StoreError:
            logger.exception("Error deleting event {}", event_id)
            raise BackendError("Failed to delete event") from None
        if not deleted:
            raise EventNotFoundError(event_id)
        logger.info("Event {} deleted", event_id)

    def set_order_status(self, session: SessionContext, order_id: str, status: str) -> Order:
        """Set an order to any of the four statuses, whatever it was before."""
        self._require_admin(session)
        parsed = parse_id(OrderId, order_id, kind="order")
        try:
            new_status = OrderStatus(status)
        except ValueError:
            raise InvalidInputError(f"Unknown order status: {status}") from None
        try:
            updated = self._orders.set_status(parsed, new_status)
        except StoreError:
            logger.exception("Error updating order {}", order_id)
            raise BackendError("Failed to update order") from None
        if updated is None:
            raise OrderNotFoundError(order_id)
        return updated
