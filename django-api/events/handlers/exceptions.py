"""Maps domain errors to HTTP responses without leaking internal detail."""

from typing import Any

from loguru import logger
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode
from events.domain.session import Route

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ORDER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TICKET_COUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CONFIRMATION_REQUIRED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SIGN_IN_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ADMIN_REQUIRED: status.HTTP_403_FORBIDDEN,
    ErrorCode.SOLD_OUT: status.HTTP_409_CONFLICT,
    ErrorCode.BACKEND_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}

REDIRECT_BY_CODE: dict[ErrorCode, str] = {
    ErrorCode.SIGN_IN_REQUIRED: Route.SIGN_IN.value,
    ErrorCode.ADMIN_REQUIRED: Route.EVENTS.value,
}


def domain_error_response(error: DomainError) -> Response:
    body: dict[str, Any] = {"code": error.code.value, "message": error.message}
    if error.code in REDIRECT_BY_CODE:
        body["redirect"] = REDIRECT_BY_CODE[error.code]
    if error.code is ErrorCode.EVENT_NOT_FOUND:
        body["back_to"] = Route.EVENTS.value
    return Response(body, status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST))


def domain_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """DRF exception handler: domain errors first, then DRF's defaults."""
    if isinstance(exc, DomainError):
        logger.debug("Domain error in {}: {}", context.get("view").__class__.__name__, exc)
        return domain_error_response(exc)
    return exception_handler(exc, context)
