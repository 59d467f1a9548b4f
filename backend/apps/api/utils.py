from collections.abc import Mapping
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error

ERROR_STATUS_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "UNSUPPORTED_MEDIA_TYPE": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(
    code: str,
    message: str,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
    *,
    headers: Optional[Mapping[str, Any]] = None,
) -> Response:
    """
    ``{"error": message, "code": CODE, "status": n}`` plus ``details`` when given.

    Without ``http_status`` the code picks the status; unknown codes are 400.
    """
    if not code or not code.strip():
        raise ValueError("error_response requires a code")
    if not message or not message.strip():
        raise ValueError("error_response requires a message")

    code = code.strip().upper()
    status_code = int(http_status) if http_status is not None else ERROR_STATUS_MAP.get(
        code, status.HTTP_400_BAD_REQUEST
    )
    if not 100 <= status_code <= 599:
        raise ValueError(f"Invalid HTTP status {status_code}")

    body: Dict[str, Any] = {"error": message.strip(), "code": code, "status": status_code}
    if details is not None:
        if isinstance(details, ValidationError):
            details = as_serializer_error(details)
        elif isinstance(details, Mapping):
            details = dict(details)
        elif isinstance(details, Exception):
            details = {"type": type(details).__name__}
        body["details"] = details
    return Response(
        body,
        status=status_code,
        headers={str(k): str(v) for k, v in headers.items()} if headers else None,
    )
