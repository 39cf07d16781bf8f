"""Integration tests for the event catalog and booking endpoints.

Run with: pytest tests/test_event_catalog.py -v
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events import models


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_sorted_by_date(self, api_client: APIClient, make_orm_event):
        """Given upcoming and past events, returns the upcoming ones soonest first."""
        now = timezone.now()
        make_orm_event(title="Later", event_date=now + timedelta(days=9))
        make_orm_event(title="Sooner", event_date=now + timedelta(days=1))
        make_orm_event(title="Yesterday", event_date=now - timedelta(days=1))

        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert response.data["count"] == 2
        assert [e["title"] for e in response.data["results"]] == ["Sooner", "Later"]
        assert response.data["categories"][0] == "All"

    def test_list_events_empty_catalog(self, api_client: APIClient):
        """Given no events, returns empty list."""
        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert response.data["count"] == 0
        assert response.data["results"] == []

    def test_search_matches_location(self, api_client: APIClient, make_orm_event):
        """A query for "music" finds an event held in the Music Hall."""
        make_orm_event(title="Live Jazz Night", location="Music Hall", category="Arts")
        make_orm_event(title="Chess Open", location="Library", category="Education")

        response = api_client.get("/api/events", {"q": "music"})

        assert [e["title"] for e in response.data["results"]] == ["Live Jazz Night"]
        assert response.data["filters"] == {"q": "music", "category": "All", "price": "all"}

    def test_category_and_price_filters(self, api_client: APIClient, make_orm_event):
        make_orm_event(title="Free Gig", price=Decimal("0"), category="Music")
        make_orm_event(title="Paid Gig", price=Decimal("15.00"), category="Music")
        make_orm_event(title="Free Talk", price=Decimal("0"), category="Business")

        response = api_client.get("/api/events", {"category": "Music", "price": "free"})

        assert [e["title"] for e in response.data["results"]] == ["Free Gig"]

    def test_unknown_price_filter_is_rejected(self, api_client: APIClient):
        response = api_client.get("/api/events", {"price": "cheap"})

        assert response.status_code == 400
        assert response.data["code"] == "INVALID_INPUT"


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, make_orm_event):
        row = make_orm_event(price=Decimal("25.00"))

        response = api_client.get(f"/api/events/{row.id}")

        assert response.status_code == 200
        assert response.data["id"] == str(row.id)
        assert response.data["price"] == "25.00"
        assert response.data["available_seats"] == 10
        assert response.data["status"] == "published"

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/2d1b6c55-6a58-4f7e-9d0c-3b7b4e2f1a90")

        assert response.status_code == 404
        assert response.data["code"] == "EVENT_NOT_FOUND"
        assert response.data["back_to"] == "/events"

    def test_get_event_invalid_id(self, api_client: APIClient):
        response = api_client.get("/api/events/not-a-uuid")

        assert response.status_code == 400
        assert response.data["code"] == "INVALID_ID"


@pytest.mark.django_db
class TestBookEvent:
    """Tests for POST /api/events/{id}/bookings"""

    def test_anonymous_is_sent_to_sign_in(self, api_client: APIClient, make_orm_event):
        row = make_orm_event()

        response = api_client.post(f"/api/events/{row.id}/bookings", {"num_tickets": 1}, format="json")

        assert response.status_code == 401
        assert response.data["redirect"] == "/login"
        assert not models.Booking.objects.exists()

    @pytest.mark.parametrize("num_tickets", [0, 4])
    def test_ticket_count_out_of_range(self, api_client: APIClient, member, make_orm_event, num_tickets):
        row = make_orm_event(available_seats=3)
        api_client.force_login(member)

        response = api_client.post(
            f"/api/events/{row.id}/bookings", {"num_tickets": num_tickets}, format="json"
        )

        assert response.status_code == 400
        assert response.data["message"] == "Please select between 1 and 3 tickets"
        assert not models.Booking.objects.exists()

    def test_booking_is_created_with_redirect(self, api_client: APIClient, member, make_orm_event):
        row = make_orm_event(price=Decimal("12.50"))
        api_client.force_login(member)

        response = api_client.post(f"/api/events/{row.id}/bookings", {"num_tickets": 2}, format="json")

        assert response.status_code == 201
        assert response.data["booking"]["total_price"] == "25.00"
        assert response.data["booking"]["status"] == "confirmed"
        assert response.data["booking"]["user_id"] == str(member.profile.id)
        assert response.data["redirect"] == {"to": "/dashboard", "delay_seconds": 2.0}

    def test_last_seat_can_be_booked_twice(self, api_client: APIClient, member, make_orm_event):
        """Seat counts are not decremented, so a one-seat event takes two bookings."""
        row = make_orm_event(price=Decimal("25.00"), capacity=10, available_seats=1)
        api_client.force_login(member)

        first = api_client.post(f"/api/events/{row.id}/bookings", {"num_tickets": 1}, format="json")
        second = api_client.post(f"/api/events/{row.id}/bookings", {"num_tickets": 1}, format="json")

        assert first.status_code == 201
        assert first.data["booking"]["total_price"] == "25.00"
        assert second.status_code == 201
        row.refresh_from_db()
        assert row.available_seats == 1
        assert models.Booking.objects.filter(event=row).count() == 2

    def test_atomic_decrement_refuses_second_booking(
        self, api_client: APIClient, member, make_orm_event, settings
    ):
        settings.ATOMIC_SEAT_DECREMENT = True
        row = make_orm_event(available_seats=1)
        api_client.force_login(member)

        first = api_client.post(f"/api/events/{row.id}/bookings", {"num_tickets": 1}, format="json")
        second = api_client.post(f"/api/events/{row.id}/bookings", {"num_tickets": 1}, format="json")

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.data["code"] == "INVALID_TICKET_COUNT"
        row.refresh_from_db()
        assert row.available_seats == 0

    def test_missing_event(self, api_client: APIClient, member):
        api_client.force_login(member)

        response = api_client.post(
            "/api/events/2d1b6c55-6a58-4f7e-9d0c-3b7b4e2f1a90/bookings", {"num_tickets": 1}, format="json"
        )

        assert response.status_code == 404
