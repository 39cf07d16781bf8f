"""Dashboard service: a user's bookings, partitioned, and booking cancellation."""

from datetime import datetime

from loguru import logger

from events.domain.aggregation import partition_bookings
from events.domain.errors import (
    BackendError,
    BookingNotFoundError,
    ConfirmationRequiredError,
    SignInRequiredError,
)
from events.domain.models import Dashboard
from events.domain.session import SessionContext
from events.domain.value_objects import BookingId
from events.services.ids import parse_id
from events.stores.interfaces import BookingStore, StoreError


class DashboardService:
    """Service for the signed-in user's bookings."""

    def __init__(self, bookings: BookingStore) -> None:
        self._bookings = bookings

    def load(self, session: SessionContext, now: datetime) -> Dashboard:
        """Load every booking of the user and split it around now."""
        if not session.signed_in:
            raise SignInRequiredError()
        try:
            bookings = self._bookings.list_bookings_for_user(session.identity.user_id)
        except StoreError:
            logger.exception("Error loading bookings")
            raise BackendError("Failed to load bookings.") from None
        return partition_bookings(bookings, now)

    def cancel(
        self,
        session: SessionContext,
        booking_id: str,
        *,
        confirmed: bool,
        now: datetime,
    ) -> Dashboard:
        """Cancel one booking, then reload the whole dashboard.

        Only the booking's status changes; the event's seats are left alone.
        """
        if not session.signed_in:
            raise SignInRequiredError()
        if not confirmed:
            raise ConfirmationRequiredError("cancel this booking")

        parsed = parse_id(BookingId, booking_id, kind="booking")
        try:
            cancelled = self._bookings.cancel_booking(parsed, session.identity.user_id)
        except StoreError:
            logger.exception("Error cancelling booking {}", booking_id)
            raise BackendError("Failed to cancel booking. Please try again.") from None
        if not cancelled:
            raise BookingNotFoundError(booking_id)

        logger.info("Cancelled booking {} for user {}", booking_id, session.identity.user_id)
        return self.load(session, now)
