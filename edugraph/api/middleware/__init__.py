"""
EduGraph API Middleware.

Provides request logging middleware.
"""

from edugraph.api.middleware.logging import RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
]
