"""Signed-in identity, its session context, and route guards."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Self

from events.domain.value_objects import ProfileId, Role


class Route(str, Enum):
    SIGN_IN = "/login"
    SIGN_UP = "/signup"
    HOME = "/"
    EVENTS = "/events"
    EVENT_DETAIL = "/events/<id>"
    DASHBOARD = "/dashboard"
    ADMIN = "/admin"


PROTECTED_ROUTES = frozenset({Route.DASHBOARD, Route.ADMIN})
ADMIN_ROUTES = frozenset({Route.ADMIN})

_EVENT_DETAIL = re.compile(r"^/events/[^/]+$")


@dataclass(frozen=True)
class Identity:
    """Who is signed in, as reported by the identity provider."""

    user_id: ProfileId
    email: str


@dataclass(frozen=True)
class SessionContext:
    """What route guards and services know about the current caller."""

    identity: Identity | None = None
    role: Role | None = None
    loading: bool = False

    @classmethod
    def anonymous(cls) -> Self:
        return cls()

    @classmethod
    def pending(cls) -> Self:
        return cls(loading=True)

    @property
    def signed_in(self) -> bool:
        return self.identity is not None

    @property
    def is_admin(self) -> bool:
        return self.signed_in and self.role is Role.ADMIN


@dataclass(frozen=True)
class RouteDecision:
    allow: bool
    redirect_to: str | None = None
    waiting: bool = False


def match_route(path: str) -> Route | None:
    """Map a client path onto a known route, ignoring a trailing slash."""
    normalized = path.rstrip("/") or "/"
    for route in Route:
        if route is not Route.EVENT_DETAIL and route.value == normalized:
            return route
    if _EVENT_DETAIL.match(normalized):
        return Route.EVENT_DETAIL
    return None


def resolve_route(path: str, session: SessionContext) -> RouteDecision:
    """Decide whether the caller may view a route, or where to send them instead."""
    route = match_route(path)
    if route is None or route is Route.HOME:
        return RouteDecision(allow=False, redirect_to=Route.EVENTS.value)
    if route not in PROTECTED_ROUTES:
        return RouteDecision(allow=True)
    if session.loading:
        return RouteDecision(allow=False, waiting=True)
    if not session.signed_in:
        return RouteDecision(allow=False, redirect_to=Route.SIGN_IN.value)
    if route in ADMIN_ROUTES and not session.is_admin:
        return RouteDecision(allow=False, redirect_to=Route.EVENTS.value)
    return RouteDecision(allow=True)
