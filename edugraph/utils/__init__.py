"""
Utility module for EduGraph.

Provides logging configuration.
"""

from edugraph.utils.logger_config import (
    setup_logging,
    get_logger,
)

__all__ = [
    "setup_logging",
    "get_logger",
]
