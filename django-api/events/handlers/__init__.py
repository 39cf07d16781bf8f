from events.handlers.views import (
    AdminConsoleView,
    AdminEventCreateView,
    AdminEventDetailView,
    AdminOrderStatusView,
    AdminToggleRoleView,
    BookingCancelView,
    BookingCreateView,
    DashboardView,
    EventDetailView,
    EventListView,
    RouteResolveView,
    SessionView,
    SignInView,
    SignOutView,
    SignUpView,
)

__all__ = [
    "AdminConsoleView",
    "AdminEventCreateView",
    "AdminEventDetailView",
    "AdminOrderStatusView",
    "AdminToggleRoleView",
    "BookingCancelView",
    "BookingCreateView",
    "DashboardView",
    "EventDetailView",
    "EventListView",
    "RouteResolveView",
    "SessionView",
    "SignInView",
    "SignOutView",
    "SignUpView",
]
