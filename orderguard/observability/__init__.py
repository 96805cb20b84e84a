"""Logging and tracing setup for orderguard."""

from orderguard.settings import Settings, get_settings

from .logging import get_logger, init_logging, log_business_event
from .tracing import get_tracer, init_tracing


def init_observability(config: Settings | None = None) -> bool:
    """
    Initialize logging and tracing from settings at process start.

    Args:
        config (Settings | None): Settings to read, defaults to the global
            settings

    Returns:
        bool: True if span export was enabled
    """
    config = config or get_settings()
    init_logging(config.LOG_LEVEL, config.LOG_DIR)
    return init_tracing(config.SERVICE_NAME, config)


__all__ = [
    "get_logger",
    "init_logging",
    "init_observability",
    "log_business_event",
    "get_tracer",
    "init_tracing",
]
