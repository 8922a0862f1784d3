"""
Logging configuration for EduGraph.

Gateway modules log under the ``edugraph`` namespace. Resolver failures are
reported by strawberry under ``strawberry.execution``; both are routed to
the same console handler so a failed backend call shows up next to the
request that triggered it.
"""

import logging
import sys

from edugraph.config.settings import Settings


GATEWAY_LOGGER = "edugraph"
GRAPHQL_ERRORS_LOGGER = "strawberry.execution"


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Configure gateway logging from settings.

    Safe to call more than once: the console handler is replaced, not
    duplicated.

    Args:
        settings: Gateway settings (``log_level`` and ``log_format``)

    Returns:
        The ``edugraph`` logger
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(settings.log_format))

    for name in (GATEWAY_LOGGER, GRAPHQL_ERRORS_LOGGER):
        target = logging.getLogger(name)
        target.setLevel(level)
        target.handlers = [handler]
        target.propagate = False

    return logging.getLogger(GATEWAY_LOGGER)


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a gateway logger.

    Args:
        name: Dotted suffix under ``edugraph`` (None for the root logger)

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"{GATEWAY_LOGGER}.{name}")
    return logging.getLogger(GATEWAY_LOGGER)
