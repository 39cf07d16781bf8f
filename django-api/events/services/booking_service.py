"""Booking workflow: validate the ticket count, write the booking, hand back a redirect.

The default workflow does not touch the event's available_seats, so two
bookings made against the same stale seat count both succeed. With
``decrement_seats`` enabled the seat decrement and the booking insert happen
in one conditional transaction instead.
"""

from dataclasses import dataclass

from loguru import logger

from events.domain.errors import (
    BackendError,
    BookingFailedError,
    EventNotFoundError,
    SignInRequiredError,
    SoldOutError,
    TicketCountOutOfRangeError,
)
from events.domain.models import Booking, Event, NewBooking
from events.domain.redirect import PendingRedirect
from events.domain.session import SessionContext
from events.domain.value_objects import BookingStatus
from events.services.ids import parse_event_id
from events.stores.interfaces import BookingStore, EventStore, StoreError

DEFAULT_REDIRECT_TARGET = "/dashboard"
DEFAULT_REDIRECT_DELAY_SECONDS = 2.0


@dataclass(frozen=True)
class BookingConfirmation:
    booking: Booking
    event: Event
    redirect: PendingRedirect


def validate_ticket_count(event: Event, num_tickets: int) -> None:
    """Accept 1 <= num_tickets <= available_seats, as read right now."""
    if num_tickets < 1 or num_tickets > event.available_seats.value:
        raise TicketCountOutOfRangeError(event.available_seats.value)


class BookingService:
    """Service for booking tickets."""

    def __init__(
        self,
        events: EventStore,
        bookings: BookingStore,
        *,
        decrement_seats: bool = False,
        redirect_to: str = DEFAULT_REDIRECT_TARGET,
        redirect_delay_seconds: float = DEFAULT_REDIRECT_DELAY_SECONDS,
    ) -> None:
        self._events = events
        self._bookings = bookings
        self._decrement_seats = decrement_seats
        self._redirect_to = redirect_to
        self._redirect_delay_seconds = redirect_delay_seconds

    def book(self, session: SessionContext, event_id: str, num_tickets: int) -> BookingConfirmation:
        """Book num_tickets for the signed-in user.

        Raises:
            SignInRequiredError: If nobody is signed in.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            TicketCountOutOfRangeError: If num_tickets is outside [1, available_seats].
            SoldOutError: If seat decrement is enabled and the seats ran out.
            BookingFailedError: If the booking could not be written.
        """
        if not session.signed_in:
            raise SignInRequiredError()

        parsed = parse_event_id(event_id)
        try:
            event = self._events.get_event(parsed)
        except StoreError:
            logger.exception("Error loading event {}", event_id)
            raise BackendError("Failed to load event.") from None
        if event is None:
            raise EventNotFoundError(event_id)

        validate_ticket_count(event, num_tickets)

        new_booking = NewBooking(
            event_id=event.id,
            user_id=session.identity.user_id,
            num_tickets=num_tickets,
            total_price=event.price.times(num_tickets),
            status=BookingStatus.CONFIRMED,
        )
        booking = self._write(new_booking)

        logger.info(
            "Booked {} ticket(s) for event {} by user {}",
            num_tickets,
            event.id,
            session.identity.user_id,
        )
        return BookingConfirmation(
            booking=booking,
            event=event,
            redirect=PendingRedirect(to=self._redirect_to, delay_seconds=self._redirect_delay_seconds),
        )

    def _write(self, new_booking: NewBooking) -> Booking:
        try:
            if not self._decrement_seats:
                return self._bookings.insert_booking(new_booking)
            booking = self._bookings.insert_booking_with_seat_decrement(new_booking)
        except StoreError:
            logger.exception("Error booking event {}", new_booking.event_id)
            raise BookingFailedError() from None
        if booking is None:
            raise SoldOutError(str(new_booking.event_id))
        return booking
