"""Request Logging: one access line per request, tagged with the site token.

Invariants:
    - Every response that leaves the app is logged with method, original
      path, status and duration
    - site_id is the raw siteId path segment when the route has one
      (set by api/dependencies.site_segment), absent otherwise
    - Unhandled exceptions are logged by the catch-all error handler, not here
"""

import logging
import time

from fastapi import FastAPI, Request

from seo_console.api.dependencies import original_url

logger = logging.getLogger(__name__)


def register_request_logging(app: FastAPI) -> None:

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        path = original_url(request)
        logger.info(
            f"{request.method} {path} {response.status_code}",
            extra={
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "site_id": getattr(request.state, "site_token", None),
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response
