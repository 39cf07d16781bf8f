from django.urls import path

from events.handlers import (
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

urlpatterns = [
    path("auth/signup", SignUpView.as_view(), name="sign-up"),
    path("auth/signin", SignInView.as_view(), name="sign-in"),
    path("auth/signout", SignOutView.as_view(), name="sign-out"),
    path("auth/session", SessionView.as_view(), name="session"),
    path("routes/resolve", RouteResolveView.as_view(), name="route-resolve"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/bookings", BookingCreateView.as_view(), name="booking-create"),
    path("dashboard", DashboardView.as_view(), name="dashboard"),
    path("bookings/<str:booking_id>/cancel", BookingCancelView.as_view(), name="booking-cancel"),
    path("admin", AdminConsoleView.as_view(), name="admin-console"),
    path("admin/events", AdminEventCreateView.as_view(), name="admin-event-create"),
    path("admin/events/<str:event_id>", AdminEventDetailView.as_view(), name="admin-event-detail"),
    path(
        "admin/users/<str:profile_id>/toggle-role",
        AdminToggleRoleView.as_view(),
        name="admin-toggle-role",
    ),
    path("admin/orders/<str:order_id>", AdminOrderStatusView.as_view(), name="admin-order-status"),
]
