"""Pytest configuration and shared fixtures."""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events.stores.memory_store import (
    InMemoryBackend,
    InMemoryBookingStore,
    InMemoryEventStore,
    InMemoryOrderStore,
    InMemoryProfileStore,
)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def profile_store(backend: InMemoryBackend) -> InMemoryProfileStore:
    return InMemoryProfileStore(backend)


@pytest.fixture
def event_store(backend: InMemoryBackend) -> InMemoryEventStore:
    return InMemoryEventStore(backend)


@pytest.fixture
def booking_store(backend: InMemoryBackend) -> InMemoryBookingStore:
    return InMemoryBookingStore(backend)


@pytest.fixture
def order_store(backend: InMemoryBackend) -> InMemoryOrderStore:
    return InMemoryOrderStore(backend)


# Django ORM fixtures


@pytest.fixture
def make_account(django_user_model):
    """Create an auth account; the profile row comes from the post_save signal."""

    def _make(email: str = "member@example.com", password: str = "s3cret-pass", admin: bool = False):
        account = django_user_model.objects.create_user(
            username=email, email=email, password=password, first_name="Member"
        )
        if admin:
            account.profile.role = "admin"
            account.profile.save()
        return account

    return _make


@pytest.fixture
def member(make_account):
    return make_account()


@pytest.fixture
def admin_account(make_account):
    return make_account(email="admin@example.com", admin=True)


@pytest.fixture
def make_orm_event():
    from events.models import Event

    def _make(**overrides):
        fields = {
            "title": "Live Jazz Night",
            "description": "An evening of standards",
            "location": "Music Hall",
            "event_date": timezone.now() + timedelta(days=7),
            "price": Decimal("25.00"),
            "category": "Music",
            "capacity": 10,
            "available_seats": 10,
            "status": "published",
        }
        fields.update(overrides)
        return Event.objects.create(**fields)

    return _make
