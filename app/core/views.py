"""
Core views providing infrastructure endpoints.

This module contains views that are not part of the business domain but are
essential for application infrastructure, such as health checks and the
DRF exception handler that renders application errors.
"""

import logging

from django.db import connection
from django.http import JsonResponse
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions import BaseApplicationError

logger = logging.getLogger(__name__)


def health_check(request):
    """
    Health check endpoint for monitoring and orchestration.

    Returns:
        JsonResponse with status and component health:
        - status: "healthy" or "unhealthy"
        - database: "connected" or "disconnected"
        - cache: "connected" or "disconnected"

    HTTP Status Codes:
        200: All systems operational
        503: One or more systems unhealthy
    """
    health_status = {
        "status": "healthy",
        "database": "unknown",
        "cache": "unknown",
    }
    is_healthy = True

    # Check database connectivity
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        health_status["database"] = "connected"
    except Exception:
        logger.exception("Health check database query failed")
        health_status["database"] = "disconnected"
        health_status["status"] = "unhealthy"
        is_healthy = False

    # Check cache connectivity
    try:
        from django.core.cache import cache

        cache.set("health_check", "ok", timeout=1)
        if cache.get("health_check") == "ok":
            health_status["cache"] = "connected"
        else:
            health_status["cache"] = "disconnected"
    except Exception:
        # Cache failure degrades but does not fail the check
        logger.warning("Health check cache round-trip failed", exc_info=True)
        health_status["cache"] = "disconnected"

    status_code = 200 if is_healthy else 503

    return JsonResponse(health_status, status=status_code)


def api_exception_handler(exc, context):
    """
    DRF exception handler that renders BaseApplicationError subclasses.

    Everything else is passed on to DRF's default handler, so serializer
    validation errors and authentication failures keep their usual shape.

    Configured in settings:
        REST_FRAMEWORK["EXCEPTION_HANDLER"] = "core.views.api_exception_handler"
    """
    if isinstance(exc, BaseApplicationError):
        if not exc.is_operational:
            logger.error(f"Unexpected application error: {exc!r}")
        return Response(exc.to_dict(), status=exc.status_code)
    return exception_handler(exc, context)
