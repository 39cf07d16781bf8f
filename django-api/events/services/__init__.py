from events.services.admin_service import AdminService
from events.services.booking_service import BookingConfirmation, BookingService
from events.services.dashboard_service import DashboardService
from events.services.event_service import EventService
from events.services.session_service import SessionService

__all__ = [
    "AdminService",
    "BookingConfirmation",
    "BookingService",
    "DashboardService",
    "EventService",
    "SessionService",
]
