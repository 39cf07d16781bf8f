"""Tests for session resolution and route guards."""

import pytest

from events.domain import Role
from events.domain.errors import BackendError
from events.domain.session import Route, SessionContext, match_route, resolve_route
from events.services import SessionService
from helpers import make_profile, session_for


class TestSessionContext:
    def test_anonymous(self):
        session = SessionContext.anonymous()
        assert not session.signed_in
        assert not session.is_admin
        assert not session.loading

    def test_pending_is_loading(self):
        assert SessionContext.pending().loading

    def test_admin(self):
        assert session_for(make_profile(role=Role.ADMIN)).is_admin
        assert not session_for(make_profile(role=Role.USER)).is_admin


class TestMatchRoute:
    @pytest.mark.parametrize(
        "path,route",
        [
            ("/", Route.HOME),
            ("/login", Route.SIGN_IN),
            ("/signup/", Route.SIGN_UP),
            ("/events", Route.EVENTS),
            ("/events/3f1c", Route.EVENT_DETAIL),
            ("/dashboard", Route.DASHBOARD),
            ("/admin", Route.ADMIN),
        ],
    )
    def test_known_paths(self, path, route):
        assert match_route(path) is route

    def test_unknown_path(self):
        assert match_route("/events/1/edit") is None


class TestResolveRoute:
    def test_public_routes_are_open_to_anyone(self):
        anonymous = SessionContext.anonymous()
        for path in ("/login", "/signup", "/events", "/events/abc"):
            assert resolve_route(path, anonymous).allow

    def test_home_redirects_to_events(self):
        decision = resolve_route("/", SessionContext.anonymous())
        assert not decision.allow
        assert decision.redirect_to == "/events"

    def test_protected_route_waits_while_loading(self):
        decision = resolve_route("/dashboard", SessionContext.pending())
        assert decision.waiting
        assert not decision.allow

    def test_anonymous_is_sent_to_sign_in(self):
        for path in ("/dashboard", "/admin"):
            assert resolve_route(path, SessionContext.anonymous()).redirect_to == "/login"

    def test_non_admin_is_sent_to_events(self):
        decision = resolve_route("/admin", session_for(make_profile()))
        assert not decision.allow
        assert decision.redirect_to == "/events"

    def test_signed_in_user_reaches_dashboard(self):
        assert resolve_route("/dashboard", session_for(make_profile())).allow

    def test_admin_reaches_admin(self):
        assert resolve_route("/admin", session_for(make_profile(role=Role.ADMIN))).allow


class TestSessionService:
    def test_no_account_is_anonymous(self, profile_store):
        assert SessionService(profile_store).resolve(None) == SessionContext.anonymous()

    def test_account_resolves_profile_role(self, backend, profile_store):
        admin = backend.add_profile(make_profile(role=Role.ADMIN), account_id=7)

        session = SessionService(profile_store).resolve(7)

        assert session.signed_in
        assert session.identity.user_id == admin.id
        assert session.identity.email == admin.email
        assert session.is_admin

    def test_account_without_profile_is_not_signed_in(self, profile_store):
        session = SessionService(profile_store).resolve(99)
        assert not session.signed_in
        assert session.role is Role.USER

    def test_store_failure_is_generic(self, backend, profile_store):
        backend.failing.add("get_profile_for_account")
        with pytest.raises(BackendError):
            SessionService(profile_store).resolve(1)
