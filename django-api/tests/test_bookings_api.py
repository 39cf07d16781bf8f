"""Integration tests for the dashboard and booking cancellation endpoints."""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events import models


def _book(event, profile, num_tickets=1, status="confirmed"):
    return models.Booking.objects.create(
        event=event,
        user=profile,
        num_tickets=num_tickets,
        total_price=event.price * num_tickets,
        status=status,
    )


@pytest.mark.django_db
class TestDashboard:
    """Tests for GET /api/dashboard"""

    def test_requires_sign_in(self, api_client: APIClient):
        response = api_client.get("/api/dashboard")

        assert response.status_code == 401
        assert response.data["redirect"] == "/login"

    def test_partitions_own_bookings(self, api_client: APIClient, member, make_account, make_orm_event):
        other = make_account(email="other@example.com")
        soon = make_orm_event(title="Soon", event_date=timezone.now() + timedelta(days=1))
        over = make_orm_event(title="Over", event_date=timezone.now() - timedelta(days=1))
        _book(soon, member.profile)
        _book(soon, member.profile, status="cancelled")
        _book(over, member.profile)
        _book(soon, other.profile)
        api_client.force_login(member)

        response = api_client.get("/api/dashboard")

        assert response.status_code == 200
        assert len(response.data["upcoming"]) == 1
        assert response.data["upcoming"][0]["event"]["title"] == "Soon"
        assert len(response.data["past_or_cancelled"]) == 2

    def test_booking_of_deleted_event_is_past(self, api_client: APIClient, member, make_orm_event):
        row = make_orm_event()
        _book(row, member.profile)
        row.delete()
        api_client.force_login(member)

        response = api_client.get("/api/dashboard")

        assert response.data["upcoming"] == []
        assert response.data["past_or_cancelled"][0]["event"] is None


@pytest.mark.django_db
class TestCancelBooking:
    """Tests for POST /api/bookings/{id}/cancel"""

    def test_requires_confirmation(self, api_client: APIClient, member, make_orm_event):
        booking = _book(make_orm_event(), member.profile)
        api_client.force_login(member)

        response = api_client.post(f"/api/bookings/{booking.id}/cancel", {}, format="json")

        assert response.status_code == 400
        assert response.data["code"] == "CONFIRMATION_REQUIRED"
        booking.refresh_from_db()
        assert booking.status == "confirmed"

    def test_cancel_changes_status_only(self, api_client: APIClient, member, make_orm_event):
        row = make_orm_event(available_seats=7)
        booking = _book(row, member.profile, num_tickets=3)
        api_client.force_login(member)

        response = api_client.post(f"/api/bookings/{booking.id}/cancel", {"confirm": True}, format="json")

        assert response.status_code == 200
        assert response.data["upcoming"] == []
        assert response.data["past_or_cancelled"][0]["booking"]["status"] == "cancelled"
        booking.refresh_from_db()
        row.refresh_from_db()
        assert booking.status == "cancelled"
        assert booking.num_tickets == 3
        assert row.available_seats == 7

    def test_cannot_cancel_another_users_booking(
        self, api_client: APIClient, member, make_account, make_orm_event
    ):
        other = make_account(email="other@example.com")
        booking = _book(make_orm_event(), other.profile)
        api_client.force_login(member)

        response = api_client.post(f"/api/bookings/{booking.id}/cancel", {"confirm": True}, format="json")

        assert response.status_code == 404
        booking.refresh_from_db()
        assert booking.status == "confirmed"
