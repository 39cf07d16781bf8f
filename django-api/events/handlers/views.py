"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors reach the exception handler for HTTP mapping
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.db import IntegrityError
from django.utils import timezone
from loguru import logger
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events import container
from events.domain.errors import InvalidCredentialsError, InvalidInputError
from events.domain.filtering import ALL_CATEGORIES, ALL_STATUSES, EventFilters
from events.domain.session import resolve_route
from events.domain.value_objects import PriceFilter
from events.handlers.middleware import reset_session
from events.handlers.permissions import IsAdminRole, IsSignedIn, session_of
from events.handlers.serializers import (
    AdminConsoleSerializer,
    BookingConfirmationSerializer,
    BookingRequestSerializer,
    ConfirmSerializer,
    DashboardSerializer,
    EventInputSerializer,
    EventSerializer,
    OrderSerializer,
    OrderStatusSerializer,
    ProfileSerializer,
    RouteDecisionSerializer,
    SessionSerializer,
    SignInSerializer,
    SignUpSerializer,
)


def _is_true(value: str | None) -> bool:
    return (value or "").lower() in {"1", "true", "yes"}


class SignUpView(APIView):
    """Handler for POST /api/auth/signup"""

    def post(self, request: Request) -> Response:
        payload = SignUpSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data

        User = get_user_model()
        if User.objects.filter(username__iexact=data["email"]).exists():
            raise InvalidInputError("An account with this email already exists")
        try:
            account = User.objects.create_user(
                username=data["email"].lower(),
                email=data["email"].lower(),
                password=data["password"],
                first_name=(data["full_name"] or "")[:150],
            )
        except IntegrityError:
            raise InvalidInputError("An account with this email already exists") from None

        login(request._request, account)
        reset_session(request._request)
        logger.info("Account {} signed up", account.pk)
        return Response(SessionSerializer(session_of(request)).data, status=status.HTTP_201_CREATED)


class SignInView(APIView):
    """Handler for POST /api/auth/signin"""

    def post(self, request: Request) -> Response:
        payload = SignInSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data

        account = authenticate(
            request._request, username=data["email"].lower(), password=data["password"]
        )
        if account is None:
            raise InvalidCredentialsError()
        login(request._request, account)
        reset_session(request._request)
        return Response(SessionSerializer(session_of(request)).data)


class SignOutView(APIView):
    """Handler for POST /api/auth/signout"""

    def post(self, request: Request) -> Response:
        logout(request._request)
        reset_session(request._request)
        return Response(SessionSerializer(session_of(request)).data)


class SessionView(APIView):
    """Handler for GET /api/auth/session"""

    def get(self, request: Request) -> Response:
        return Response(SessionSerializer(session_of(request)).data)


class RouteResolveView(APIView):
    """Handler for GET /api/routes/resolve?path=..."""

    def get(self, request: Request) -> Response:
        path = request.query_params.get("path", "/")
        decision = resolve_route(path, session_of(request))
        return Response(RouteDecisionSerializer(decision).data)


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        try:
            price = PriceFilter(params.get("price", PriceFilter.ALL.value))
        except ValueError:
            raise InvalidInputError("price must be one of: all, free, paid") from None
        filters = EventFilters(
            query=params.get("q", ""),
            category=params.get("category", ALL_CATEGORIES),
            price=price,
        )

        events = container.event_service().browse(timezone.now(), filters)
        return Response(
            {
                "count": len(events),
                "results": EventSerializer(events, many=True).data,
                "categories": settings.EVENT_CATEGORIES,
                "filters": {
                    "q": filters.query,
                    "category": filters.category,
                    "price": filters.price.value,
                },
            }
        )


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = container.event_service().get_event(event_id)
        return Response(EventSerializer(event).data)


class BookingCreateView(APIView):
    """Handler for POST /api/events/{event_id}/bookings"""

    def post(self, request: Request, event_id: str) -> Response:
        payload = BookingRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        confirmation = container.booking_service().book(
            session_of(request), event_id, payload.validated_data["num_tickets"]
        )
        return Response(
            BookingConfirmationSerializer(confirmation).data, status=status.HTTP_201_CREATED
        )


class DashboardView(APIView):
    """Handler for GET /api/dashboard"""

    permission_classes = [IsSignedIn]

    def get(self, request: Request) -> Response:
        dashboard = container.dashboard_service().load(session_of(request), timezone.now())
        return Response(DashboardSerializer(dashboard).data)


class BookingCancelView(APIView):
    """Handler for POST /api/bookings/{booking_id}/cancel"""

    permission_classes = [IsSignedIn]

    def post(self, request: Request, booking_id: str) -> Response:
        payload = ConfirmSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        dashboard = container.dashboard_service().cancel(
            session_of(request),
            booking_id,
            confirmed=payload.validated_data["confirm"],
            now=timezone.now(),
        )
        return Response(DashboardSerializer(dashboard).data)


class AdminConsoleView(APIView):
    """Handler for GET /api/admin"""

    permission_classes = [IsAdminRole]

    def get(self, request: Request) -> Response:
        console = container.admin_service().load(
            session_of(request),
            user_search=request.query_params.get("user_search", ""),
            order_status=request.query_params.get("order_status", ALL_STATUSES),
        )
        return Response(AdminConsoleSerializer(console).data)


class AdminEventCreateView(APIView):
    """Handler for POST /api/admin/events"""

    permission_classes = [IsAdminRole]

    def post(self, request: Request) -> Response:
        payload = EventInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        event = container.admin_service().save_event(session_of(request), payload.to_draft())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class AdminEventDetailView(APIView):
    """Handler for PUT/DELETE /api/admin/events/{event_id}"""

    permission_classes = [IsAdminRole]

    def put(self, request: Request, event_id: str) -> Response:
        payload = EventInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        event = container.admin_service().save_event(
            session_of(request), payload.to_draft(), event_id=event_id
        )
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        container.admin_service().delete_event(
            session_of(request), event_id, confirmed=_is_true(request.query_params.get("confirm"))
        )
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminToggleRoleView(APIView):
    """Handler for POST /api/admin/users/{profile_id}/toggle-role"""

    permission_classes = [IsAdminRole]

    def post(self, request: Request, profile_id: str) -> Response:
        profile = container.admin_service().toggle_role(session_of(request), profile_id)
        return Response(ProfileSerializer(profile).data)


class AdminOrderStatusView(APIView):
    """Handler for PATCH /api/admin/orders/{order_id}"""

    permission_classes = [IsAdminRole]

    def patch(self, request: Request, order_id: str) -> Response:
        payload = OrderStatusSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        order = container.admin_service().set_order_status(
            session_of(request), order_id, payload.validated_data["status"]
        )
        return Response(OrderSerializer(order).data)
