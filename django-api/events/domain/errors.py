"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    INVALID_INPUT = "INVALID_INPUT"
    SIGN_IN_REQUIRED = "SIGN_IN_REQUIRED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    ADMIN_REQUIRED = "ADMIN_REQUIRED"
    CONFIRMATION_REQUIRED = "CONFIRMATION_REQUIRED"
    SOLD_OUT = "SOLD_OUT"
    BACKEND_FAILURE = "BACKEND_FAILURE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")
        self.event_id = event_id


class BookingNotFoundError(DomainError):
    """Raised when a booking does not exist or belongs to someone else."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_FOUND, message="Booking not found")
        self.booking_id = booking_id


class ProfileNotFoundError(DomainError):
    def __init__(self, profile_id: str) -> None:
        super().__init__(code=ErrorCode.PROFILE_NOT_FOUND, message="User not found")
        self.profile_id = profile_id


class OrderNotFoundError(DomainError):
    def __init__(self, order_id: str) -> None:
        super().__init__(code=ErrorCode.ORDER_NOT_FOUND, message="Order not found")
        self.order_id = order_id


class InvalidIdError(DomainError):
    """Raised when an identifier is not a valid UUID."""

    def __init__(self, kind: str = "event") -> None:
        super().__init__(code=ErrorCode.INVALID_ID, message=f"Invalid {kind} ID format")


class InvalidEventIdError(InvalidIdError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(kind="event")


class TicketCountOutOfRangeError(DomainError):
    """Raised when the requested tickets fall outside [1, available_seats]."""

    def __init__(self, available_seats: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_COUNT,
            message=f"Please select between 1 and {available_seats} tickets",
        )
        self.available_seats = available_seats


class InvalidInputError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class SignInRequiredError(DomainError):
    """Raised when an anonymous caller reaches a signed-in operation."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.SIGN_IN_REQUIRED, message="Please sign in to continue")


class InvalidCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_CREDENTIALS, message="Invalid email or password")


class AdminRequiredError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.ADMIN_REQUIRED, message="Access denied, admins only")


class ConfirmationRequiredError(DomainError):
    """Raised when a destructive action arrives without explicit confirmation."""

    def __init__(self, action: str) -> None:
        super().__init__(
            code=ErrorCode.CONFIRMATION_REQUIRED,
            message=f"Please confirm before you {action}",
        )
        self.action = action


class SoldOutError(DomainError):
    """Raised when a seat decrement finds fewer seats than requested."""

    def __init__(self, event_id: str) -> None:
        super().__init__(code=ErrorCode.SOLD_OUT, message="Not enough seats left for this event")
        self.event_id = event_id


class BackendError(DomainError):
    """Generic, retry-prompting failure of the data store."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.BACKEND_FAILURE, message=message)


class BookingFailedError(BackendError):
    def __init__(self) -> None:
        super().__init__(message="Failed to book event. Please try again.")
