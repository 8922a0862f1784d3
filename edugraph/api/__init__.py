"""
EduGraph API module.

FastAPI application hosting the GraphQL gateway.
"""

from edugraph.api.main import create_app, run

__all__ = [
    "create_app",
    "run",
]
