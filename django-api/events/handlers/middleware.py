"""Attaches the caller's SessionContext to every request."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse
from django.utils.functional import SimpleLazyObject

from events import container
from events.domain.session import SessionContext


def resolve_session(request: HttpRequest) -> SessionContext:
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return SessionContext.anonymous()
    return container.session_service().resolve(user.pk)


def reset_session(request: HttpRequest) -> None:
    """Drop the cached context, e.g. after sign-in or sign-out."""
    request.session_context = SimpleLazyObject(lambda: resolve_session(request))


class SessionContextMiddleware:
    """Provides ``request.session_context``, resolved lazily on first use."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        reset_session(request)
        return self.get_response(request)
