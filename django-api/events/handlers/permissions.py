"""Route guards for API endpoints.

Denials raise domain errors so the response carries the same redirect target
the client-side router would use.
"""

from rest_framework.permissions import BasePermission
from rest_framework.request import Request
from rest_framework.views import APIView

from events.domain.errors import AdminRequiredError, SignInRequiredError
from events.domain.session import SessionContext


def session_of(request: Request) -> SessionContext:
    return request.session_context


class IsSignedIn(BasePermission):
    def has_permission(self, request: Request, view: APIView) -> bool:
        if not session_of(request).signed_in:
            raise SignInRequiredError()
        return True


class IsAdminRole(BasePermission):
    def has_permission(self, request: Request, view: APIView) -> bool:
        session = session_of(request)
        if not session.signed_in:
            raise SignInRequiredError()
        if not session.is_admin:
            raise AdminRequiredError()
        return True
