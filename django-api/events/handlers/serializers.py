"""Serializers for transforming domain models to API responses, and request bodies to input."""

from decimal import Decimal

from rest_framework import serializers

from events.domain.models import EventDraft
from events.domain.value_objects import EventStatus, ProfileId


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    location = serializers.CharField()
    event_date = serializers.DateTimeField()
    price = serializers.DecimalField(source="price.amount", max_digits=10, decimal_places=2)
    category = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    available_seats = serializers.IntegerField(source="available_seats.value")
    status = serializers.CharField(source="status.value")
    image_url = serializers.CharField(allow_null=True)
    organizer_id = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_organizer_id(self, obj) -> str | None:
        return str(obj.organizer_id) if obj.organizer_id else None


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    user_id = serializers.UUIDField(source="user_id.value")
    num_tickets = serializers.IntegerField()
    total_price = serializers.DecimalField(source="total_price.amount", max_digits=12, decimal_places=2)
    status = serializers.CharField(source="status.value")
    created_at = serializers.DateTimeField()


class BookingWithEventSerializer(serializers.Serializer):
    booking = BookingSerializer()
    event = EventSerializer(allow_null=True)


class DashboardSerializer(serializers.Serializer):
    upcoming = BookingWithEventSerializer(many=True)
    past_or_cancelled = BookingWithEventSerializer(many=True)


class RedirectSerializer(serializers.Serializer):
    to = serializers.CharField()
    delay_seconds = serializers.FloatField()


class BookingConfirmationSerializer(serializers.Serializer):
    booking = BookingSerializer()
    redirect = RedirectSerializer()


class ProfileSerializer(serializers.Serializer):
    id = serializers.UUIDField(source="id.value")
    email = serializers.EmailField()
    full_name = serializers.CharField(allow_null=True)
    role = serializers.CharField(source="role.value")
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class OrderSerializer(serializers.Serializer):
    id = serializers.UUIDField(source="id.value")
    user_id = serializers.UUIDField(source="user_id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    quantity = serializers.IntegerField()
    total_amount = serializers.DecimalField(source="total_amount.amount", max_digits=12, decimal_places=2)
    status = serializers.CharField(source="status.value")
    created_at = serializers.DateTimeField()
    user_full_name = serializers.CharField(allow_null=True)
    user_email = serializers.CharField(allow_null=True)
    event_title = serializers.CharField(allow_null=True)


class AdminOverviewSerializer(serializers.Serializer):
    total_revenue = serializers.DecimalField(source="total_revenue.amount", max_digits=14, decimal_places=2)
    total_users = serializers.IntegerField()
    admin_users = serializers.IntegerField()
    active_events = serializers.IntegerField()
    total_events = serializers.IntegerField()
    pending_orders = serializers.IntegerField()
    total_orders = serializers.IntegerField()


class AdminConsoleSerializer(serializers.Serializer):
    overview = AdminOverviewSerializer()
    users = ProfileSerializer(source="filtered_profiles", many=True)
    events = EventSerializer(many=True)
    orders = OrderSerializer(source="filtered_orders", many=True)


class SessionSerializer(serializers.Serializer):
    """Serializer for the caller's SessionContext."""

    signed_in = serializers.BooleanField()
    loading = serializers.BooleanField()
    role = serializers.SerializerMethodField()
    user_id = serializers.SerializerMethodField()
    email = serializers.SerializerMethodField()

    def get_role(self, obj) -> str | None:
        return obj.role.value if obj.role else None

    def get_user_id(self, obj) -> str | None:
        return str(obj.identity.user_id) if obj.identity else None

    def get_email(self, obj) -> str | None:
        return obj.identity.email if obj.identity else None


class RouteDecisionSerializer(serializers.Serializer):
    allow = serializers.BooleanField()
    redirect_to = serializers.CharField(allow_null=True)
    waiting = serializers.BooleanField()


# Request bodies


class SignUpSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    full_name = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)


class SignInSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class BookingRequestSerializer(serializers.Serializer):
    num_tickets = serializers.IntegerField()


class ConfirmSerializer(serializers.Serializer):
    confirm = serializers.BooleanField(default=False)


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.CharField()


class EventInputSerializer(serializers.Serializer):
    """Admin event form. Range checks are left to the database constraints."""

    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True, default="")
    location = serializers.CharField()
    event_date = serializers.DateTimeField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0"))
    category = serializers.CharField()
    capacity = serializers.IntegerField()
    available_seats = serializers.IntegerField(required=False, allow_null=True, default=None)
    status = serializers.ChoiceField(
        choices=[s.value for s in EventStatus], required=False, allow_null=True, default=None
    )
    image_url = serializers.URLField(required=False, allow_null=True, allow_blank=True, default=None)
    organizer_id = serializers.UUIDField(required=False, allow_null=True, default=None)

    def to_draft(self) -> EventDraft:
        data = self.validated_data
        return EventDraft(
            title=data["title"],
            description=data["description"],
            location=data["location"],
            event_date=data["event_date"],
            price=data["price"],
            category=data["category"],
            capacity=data["capacity"],
            available_seats=data["available_seats"],
            status=EventStatus(data["status"]) if data["status"] else None,
            image_url=data["image_url"] or None,
            organizer_id=ProfileId(data["organizer_id"]) if data["organizer_id"] else None,
        )
