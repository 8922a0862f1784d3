"""
Configuration module for EduGraph.

Provides settings management for the backend URLs and the server.
"""

from edugraph.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
