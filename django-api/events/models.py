"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models


class Profile(models.Model):
    """Persistence model for user profiles, one per auth account."""

    ROLE_CHOICES = [("user", "User"), ("admin", "Admin")]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    account = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile"
    )
    email = models.EmailField(max_length=255)
    full_name = models.CharField(max_length=255, blank=True, null=True)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default="user")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "profiles"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.email


class Event(models.Model):
    """Persistence model for events."""

    STATUS_CHOICES = [
        ("draft", "Draft"),
        ("published", "Published"),
        ("active", "Active"),
        ("completed", "Completed"),
        ("cancelled", "Cancelled"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    location = models.CharField(max_length=255)
    event_date = models.DateTimeField(db_index=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    category = models.CharField(max_length=100)
    capacity = models.PositiveIntegerField()
    available_seats = models.PositiveIntegerField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="draft")
    image_url = models.URLField(max_length=500, blank=True, null=True)
    organizer = models.ForeignKey(
        Profile, on_delete=models.SET_NULL, blank=True, null=True, related_name="organized_events"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "events"
        ordering = ["event_date"]
        constraints = [
            models.CheckConstraint(condition=models.Q(price__gte=0), name="event_price_non_negative"),
            models.CheckConstraint(
                condition=models.Q(available_seats__lte=models.F("capacity")),
                name="event_seats_within_capacity",
            ),
        ]

    def __str__(self) -> str:
        return self.title


class Booking(models.Model):
    """Persistence model for bookings.

    The event reference carries no database constraint and no cascade:
    deleting an event leaves its bookings in place.
    """

    STATUS_CHOICES = [("confirmed", "Confirmed"), ("cancelled", "Cancelled")]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event, on_delete=models.DO_NOTHING, db_constraint=False, related_name="bookings"
    )
    user = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name="bookings")
    num_tickets = models.PositiveIntegerField()
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="confirmed")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "bookings"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(condition=models.Q(num_tickets__gte=1), name="booking_at_least_one_ticket"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} - {self.event_id} x{self.num_tickets}"


class Order(models.Model):
    """Persistence model for admin-managed orders."""

    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("confirmed", "Confirmed"),
        ("completed", "Completed"),
        ("cancelled", "Cancelled"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name="orders")
    event = models.ForeignKey(
        Event, on_delete=models.DO_NOTHING, db_constraint=False, related_name="orders"
    )
    quantity = models.PositiveIntegerField(default=1)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pending")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status})"
