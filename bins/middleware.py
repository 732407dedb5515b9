from __future__ import annotations

import logging
from typing import Callable

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.http import HttpRequest, HttpResponse, JsonResponse

logger = logging.getLogger(__name__)

API_PATH_PREFIX = "/api/"


class HealthCheckMiddleware:
    """Answer health checks before any other middleware runs.

    Requests to ``settings.HEALTH_CHECK_PATH`` skip ALLOWED_HOSTS validation
    and never touch the database. The body is ``{"status": "ok"}`` rather than
    plain text because every other response of this service is a JSON object,
    so API clients and load balancer checks can parse it the same way.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        path = getattr(settings, "HEALTH_CHECK_PATH", None)
        if not path:
            msg = "HealthCheckMiddleware needs a non-empty HEALTH_CHECK_PATH setting, e.g. '/healthz/'."
            raise ImproperlyConfigured(msg)
        self.get_response = get_response
        self.health_check_path = path

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Return the health payload or hand the request on."""
        if request.path == self.health_check_path:
            return JsonResponse({"status": "ok"})
        return self.get_response(request)


class ApiExceptionMiddleware:
    """Turn unexpected exceptions under ``/api/`` into a generic JSON 500.

    The traceback is logged; the response carries no internal detail.
    Requests outside the API fall through to Django's normal handling.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        return self.get_response(request)

    def process_exception(self, request: HttpRequest, exception: Exception) -> HttpResponse | None:
        if not request.path.startswith(API_PATH_PREFIX):
            return None
        logger.exception("Unhandled error on %s %s", request.method, request.path, exc_info=exception)
        return JsonResponse({"message": "Something went wrong!"}, status=500)
