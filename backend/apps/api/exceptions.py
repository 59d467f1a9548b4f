from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

# DRF exception type -> (code, fallback message, keep payload as details)
DRF_ERROR_CODES = (
    (ValidationError, "VALIDATION_ERROR", "Validation failed", True),
    (ParseError, "VALIDATION_ERROR", "Malformed request", False),
    (UnsupportedMediaType, "UNSUPPORTED_MEDIA_TYPE", "Unsupported media type", False),
    ((NotFound, Http404), "NOT_FOUND", "Resource not found", False),
    (MethodNotAllowed, "METHOD_NOT_ALLOWED", "Method not allowed", False),
)


class ApplicationError(Exception):
    """
    Error raised by services and views and rendered as an ``{"error": ...}`` body.

    Subclasses pin ``default_code`` and ``default_status``; the base class can
    also be raised directly with an explicit code and status.
    """

    default_code = "SERVER_ERROR"
    default_status: Optional[int] = None

    def __init__(
        self,
        code: Optional[str],
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status
        self.details = details
        self.headers = headers

    def to_response(self) -> Response:
        return error_response(
            self.code,
            self.message,
            self.details,
            http_status=self.status_code,
            headers=self.headers,
        )


class InvalidRequestError(ApplicationError):
    """Malformed or missing input (400)."""

    default_code = "VALIDATION_ERROR"
    default_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(None, message, details=details)


class ResourceNotFoundError(ApplicationError):
    """A referenced product or cart line does not exist (404)."""

    default_code = "NOT_FOUND"
    default_status = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(None, message, details=details)


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF ``EXCEPTION_HANDLER``: every failure leaves the API as an error body."""
    log = _request_logger(context)

    if isinstance(exc, ApplicationError):
        log.info("Application error", code=exc.code, status=exc.status_code)
        return exc.to_response()

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(
            exc.message_dict if hasattr(exc, "message_dict") else list(exc.messages)
        )

    response = drf_exception_handler(exc, context)
    if response is None:
        log.exception("Unhandled exception")
        return error_response(
            "SERVER_ERROR",
            f"Server error: {exc}" if str(exc) else "Server error",
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    code, message, details = _classify(exc, response)
    log.info("API exception", code=code, status=response.status_code)
    return error_response(
        code,
        message,
        details,
        http_status=response.status_code,
        headers=dict(response.headers) or None,
    )


def _request_logger(context: Dict[str, Any]):
    view = context.get("view")
    request = context.get("request")
    return logger.bind(
        view=type(view).__name__ if view else None,
        method=getattr(request, "method", None),
        path=getattr(request, "path", None),
    )


def _classify(exc: Exception, response: Response) -> Tuple[str, str, Optional[Any]]:
    for exc_types, code, fallback, keep_details in DRF_ERROR_CODES:
        if isinstance(exc, exc_types):
            details = response.data if keep_details else None
            return code, _first_message(response.data, fallback), details
    if response.status_code >= 500:
        return "SERVER_ERROR", _first_message(response.data, "Server error"), None
    return "REQUEST_FAILED", _first_message(response.data, "Request failed"), None


def _first_message(payload: Any, fallback: str) -> str:
    if isinstance(payload, dict):
        payload = payload.get("detail")
    elif isinstance(payload, list) and payload:
        payload = payload[0]
    if isinstance(payload, str) and payload.strip():
        return str(payload)
    return fallback


__all__ = [
    "ApplicationError",
    "InvalidRequestError",
    "ResourceNotFoundError",
    "global_exception_handler",
]
