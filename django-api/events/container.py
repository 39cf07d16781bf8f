"""Wires services to the Django ORM stores using project settings."""

from django.conf import settings

from events.services import AdminService, BookingService, DashboardService, EventService, SessionService
from events.stores.django_store import (
    DjangoBookingStore,
    DjangoEventStore,
    DjangoOrderStore,
    DjangoProfileStore,
)


def event_service() -> EventService:
    return EventService(DjangoEventStore())


def booking_service() -> BookingService:
    return BookingService(
        DjangoEventStore(),
        DjangoBookingStore(),
        decrement_seats=settings.ATOMIC_SEAT_DECREMENT,
        redirect_to=settings.BOOKING_REDIRECT_TARGET,
        redirect_delay_seconds=settings.BOOKING_REDIRECT_DELAY_SECONDS,
    )


def dashboard_service() -> DashboardService:
    return DashboardService(DjangoBookingStore())


def admin_service() -> AdminService:
    return AdminService(DjangoProfileStore(), DjangoEventStore(), DjangoOrderStore())


def session_service() -> SessionService:
    return SessionService(DjangoProfileStore())
