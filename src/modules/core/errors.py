"""Error translation for the HTTP boundary.

Every client-facing failure body is a flat list of human-readable
strings returned with status 400:

* field violations become ``"<field>: <message>"``, one per field;
* a ``NotFoundError`` becomes a single entry holding its message.

Authentication and permission failures keep DRF's 401 / 403 handling.
"""

from __future__ import annotations

from typing import Any, List

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import NotFoundError
from modules.core.validation import FieldViolation

logger = structlog.get_logger(__name__)

_UNLABELLED_KEYS = ("detail", "non_field_errors")


def translate_failure(failure: Any) -> Response:
    """Convert a service / validation failure into a 400 response.

    Anything other than a violation list or a ``NotFoundError`` is a
    defect and is re-raised for the platform to handle.
    """
    match failure:
        case NotFoundError(message=message):
            errors = [message]
        case [FieldViolation(), *_]:
            errors = [str(violation) for violation in failure]
        case BaseException():
            raise failure
        case _:
            raise TypeError(f"Unsupported failure type: {type(failure).__name__}")

    logger.warning(
        "request.rejected",
        failure=type(failure).__name__,
        errors=errors,
        status_code=status.HTTP_400_BAD_REQUEST,
    )
    return Response(errors, status=status.HTTP_400_BAD_REQUEST)


def api_exception_handler(exc: Exception, context: dict) -> Response | None:
    """DRF ``EXCEPTION_HANDLER`` that flattens framework 400 bodies.

    Malformed JSON or serializer errors raised by DRF itself end up in
    the same list-of-strings shape as ``translate_failure``.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None
    if response.status_code == status.HTTP_400_BAD_REQUEST:
        response.data = flatten_errors(response.data)
        logger.warning(
            "request.rejected",
            failure=type(exc).__name__,
            errors=response.data,
            status_code=response.status_code,
        )
    return response


def flatten_errors(data: Any, field: str = "") -> List[str]:
    """Flatten a nested DRF error payload into ``"<field>: <message>"`` strings."""
    if isinstance(data, dict):
        messages: List[str] = []
        for key, value in data.items():
            child = "" if key in _UNLABELLED_KEYS else str(key)
            if field and child:
                child = f"{field}.{child}"
            messages.extend(flatten_errors(value, child or field))
        return messages
    if isinstance(data, (list, tuple)):
        return [message for item in data for message in flatten_errors(item, field)]
    return [f"{field}: {data}" if field else str(data)]
