import time
import uuid
from contextvars import ContextVar
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from config import logger

CHART_PATH_PREFIX = "/api/charts/"
NON_FILTER_PARAMS = frozenset({"chart"})

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
indicator_var: ContextVar[Optional[str]] = ContextVar("indicator", default=None)


def indicator_from_path(path: str) -> Optional[str]:
    """Indicator key addressed by a chart request, e.g. `/api/charts/tpak` -> `tpak`."""
    if not path.startswith(CHART_PATH_PREFIX):
        return None
    key = path[len(CHART_PATH_PREFIX):].strip("/")
    return key or None


def count_filters(request: Request) -> int:
    return len({name for name in request.query_params.keys() if name not in NON_FILTER_PARAMS})


class DashboardContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and the indicator it asks for, and logs timing."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        indicator = indicator_from_path(request.url.path)
        request_id_var.set(request_id)
        indicator_var.set(indicator)

        context = {"request_id": request_id, "indicator": indicator}
        if indicator:
            context["filter_count"] = count_filters(request)

        logger.info("%s %s", request.method, request.url.path, extra=context)
        started = time.perf_counter()

        response = await call_next(request)

        duration = time.perf_counter() - started
        logger.info(
            "%s %s -> %d in %.1f ms",
            request.method,
            request.url.path,
            response.status_code,
            duration * 1000,
            extra=context,
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        if indicator:
            response.headers["X-Indicator"] = indicator
            response.headers["X-Filter-Count"] = str(context["filter_count"])
        return response


def get_request_id() -> Optional[str]:
    return request_id_var.get()


def get_indicator() -> Optional[str]:
    return indicator_var.get()
