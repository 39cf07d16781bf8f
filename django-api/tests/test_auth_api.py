"""Integration tests for sign-up, sign-in, sign-out and route resolution."""

import pytest
from rest_framework.test import APIClient

from events import models


@pytest.mark.django_db
class TestSignUp:
    """Tests for POST /api/auth/signup"""

    def test_sign_up_creates_profile_and_signs_in(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/signup",
            {"email": "Grace@Example.com", "password": "hopper1", "full_name": "Grace Hopper"},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["signed_in"] is True
        assert response.data["role"] == "user"
        assert response.data["email"] == "grace@example.com"
        profile = models.Profile.objects.get(email="grace@example.com")
        assert profile.full_name == "Grace Hopper"
        assert api_client.get("/api/auth/session").data["signed_in"] is True

    def test_duplicate_email_is_rejected(self, api_client: APIClient, member):
        response = api_client.post(
            "/api/auth/signup", {"email": "member@example.com", "password": "another1"}, format="json"
        )

        assert response.status_code == 400
        assert response.data["code"] == "INVALID_INPUT"

    def test_short_password_is_rejected(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/signup", {"email": "x@example.com", "password": "123"}, format="json"
        )

        assert response.status_code == 400
        assert not models.Profile.objects.exists()


@pytest.mark.django_db
class TestSignIn:
    """Tests for POST /api/auth/signin and /api/auth/signout"""

    def test_sign_in_and_out(self, api_client: APIClient, admin_account):
        response = api_client.post(
            "/api/auth/signin", {"email": "admin@example.com", "password": "s3cret-pass"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["signed_in"] is True
        assert response.data["role"] == "admin"

        signed_out = api_client.post("/api/auth/signout")

        assert signed_out.data["signed_in"] is False
        assert api_client.get("/api/auth/session").data["signed_in"] is False

    def test_wrong_password(self, api_client: APIClient, member):
        response = api_client.post(
            "/api/auth/signin", {"email": "member@example.com", "password": "wrong"}, format="json"
        )

        assert response.status_code == 401
        assert response.data["code"] == "INVALID_CREDENTIALS"
        assert response.data["message"] == "Invalid email or password"
        assert api_client.get("/api/auth/session").data["signed_in"] is False

    def test_unknown_email(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/signin", {"email": "nobody@example.com", "password": "whatever"}, format="json"
        )

        assert response.status_code == 401
        assert response.data == {"code": "INVALID_CREDENTIALS", "message": "Invalid email or password"}

    def test_anonymous_session(self, api_client: APIClient):
        response = api_client.get("/api/auth/session")

        assert response.data == {
            "signed_in": False,
            "loading": False,
            "role": None,
            "user_id": None,
            "email": None,
        }


@pytest.mark.django_db
class TestRouteResolve:
    """Tests for GET /api/routes/resolve"""

    def test_anonymous_dashboard_redirects_to_sign_in(self, api_client: APIClient):
        response = api_client.get("/api/routes/resolve", {"path": "/dashboard"})

        assert response.data == {"allow": False, "redirect_to": "/login", "waiting": False}

    def test_member_admin_redirects_to_events(self, api_client: APIClient, member):
        api_client.force_login(member)

        response = api_client.get("/api/routes/resolve", {"path": "/admin"})

        assert response.data["redirect_to"] == "/events"

    def test_admin_reaches_admin(self, api_client: APIClient, admin_account):
        api_client.force_login(admin_account)

        response = api_client.get("/api/routes/resolve", {"path": "/admin"})

        assert response.data["allow"] is True
