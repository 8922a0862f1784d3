"""
API middleware for request logging.
"""

import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from edugraph.utils.logger_config import get_logger

logger = get_logger("api.requests")

# Polled by load balancers; logged at DEBUG to keep INFO readable
QUIET_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log each gateway request and report its duration.

    The elapsed time, which includes every backend call the GraphQL
    resolvers made, is returned in the ``X-Response-Time-Ms`` header.
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.1f}"
        log = logger.debug if request.url.path in QUIET_PATHS else logger.info
        log(
            f"{request.method} {request.url.path} "
            f"status={response.status_code} "
            f"duration={duration_ms:.1f}ms"
        )
        return response
