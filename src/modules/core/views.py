"""Liveness endpoint for load balancers and deploy checks."""

import time

import structlog
from django.db import DatabaseError, connection
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger()


def _check_database() -> dict:
    started = time.monotonic()
    try:
        connection.ensure_connection()
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError:
        logger.error("health.database_unreachable", exc_info=True)
        return {"status": "down"}
    elapsed_ms = (time.monotonic() - started) * 1000
    return {"status": "up", "response_time_ms": round(elapsed_ms, 2)}


def health_check(request: HttpRequest) -> JsonResponse:
    """``GET /health``: 200 while the product store answers, 503 otherwise."""
    database = _check_database()
    healthy = database["status"] == "up"
    if not healthy:
        logger.warning("health.degraded", database=database["status"])

    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": {"database": database},
        },
        status=200 if healthy else 503,
    )
