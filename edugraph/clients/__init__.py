"""
EduGraph backend clients.

Usage:
    from edugraph.clients import create_backends

    backends = create_backends(get_settings())
    result = await backends.students.search(name="Ada")
"""

from edugraph.clients.http import (
    ApiResult,
    JsonResult,
    TextResult,
    RestRelay,
)
from edugraph.clients.backends import (
    AIBackend,
    Backends,
    CourseBackend,
    StudentBackend,
    build_query,
    create_backends,
)

__all__ = [
    # Relay
    "ApiResult",
    "JsonResult",
    "TextResult",
    "RestRelay",
    # Backends
    "AIBackend",
    "Backends",
    "CourseBackend",
    "StudentBackend",
    "build_query",
    "create_backends",
]
