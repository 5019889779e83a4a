import time
import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()


def get_correlation_id() -> str:
    """Correlation ID of the request being handled ("" outside a request)."""
    return correlation_id_var.get()


class CorrelationIdMiddleware:
    """Tag every request with a correlation ID and log its outcome.

    Reads the X-Request-ID header from the incoming request, or generates
    a UUID4 when absent.  The ID is bound into structlog's context vars so
    every log line emitted while serving the request carries it, and it is
    echoed back on the response.  Finished requests are logged at INFO,
    client errors at WARNING and server errors at ERROR.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        token = correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        path = request.get_full_path()
        logger.info("request_started", method=request.method, path=path)
        started = time.monotonic()

        try:
            response = self.get_response(request)
        finally:
            correlation_id_var.reset(token)

        if response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info
        log(
            "request_finished",
            method=request.method,
            path=path,
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = cid
        return response
