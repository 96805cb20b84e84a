# ==== STRUCTURED LOGGING WITH LOGURU ==== #

"""
Structured logging with loguru for orderguard.

This module provides JSON log output, optional rotating file sinks, routing
of standard library logging into loguru, and automatic trace context
injection from OpenTelemetry.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict

from loguru import logger
from opentelemetry import trace
from opentelemetry.instrumentation.logging import LoggingInstrumentor


# ==== STANDARD LOGGING BRIDGE ==== #


class InterceptHandler(logging.Handler):
    """Route standard library log records through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


# ==== INITIALIZATION ==== #


def init_logging(level: str = "INFO", log_dir: str | None = None) -> None:
    """Initialize structured logging with loguru.

    Args:
        level: Log level for the console sink (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for rotating JSON log files; no files are written
            when omitted
    """
    # Remove default loguru handler
    logger.remove()

    # Console handler with JSON formatting
    logger.add(
        sys.stdout,
        format="{message}",
        serialize=True,
        level=level.upper(),
        colorize=False,
        backtrace=True,
        diagnose=False,
    )

    if log_dir:
        logs_path = Path(log_dir)
        logs_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            logs_path / "orderguard_{time:YYYY-MM-DD}.log",
            rotation="50 MB",
            retention="14 days",
            compression="gz",
            serialize=True,
            level="DEBUG",
            enqueue=True,
        )

        logger.add(
            logs_path / "orderguard_errors_{time:YYYY-MM-DD}.log",
            rotation="20 MB",
            retention="60 days",
            compression="gz",
            serialize=True,
            level="ERROR",
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    try:
        LoggingInstrumentor().instrument(set_logging_format=False)
    except Exception as e:
        logger.warning(f"Failed to setup OpenTelemetry logging: {e}")

    logger.info("Structured logging initialized", level=level, log_dir=log_dir)


# ==== CONTEXTUAL LOGGER ==== #


class ContextualLogger:
    """Logger wrapper that binds the module name and trace context.

    Every call attaches ``logger_name`` plus ``trace_id``/``span_id`` when a
    recording OpenTelemetry span is active.
    """

    def __init__(self, name: str):
        """Initialize contextual logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.name = name
        self.logger = logger.bind(logger_name=name)

    def _add_context(self, extra: Dict[str, Any] | None = None) -> Dict[str, Any]:
        context: Dict[str, Any] = {"logger_name": self.name}

        if extra:
            context.update(extra)

        span = trace.get_current_span()
        if span.is_recording():
            span_context = span.get_span_context()
            if span_context.is_valid:
                context['trace_id'] = format(span_context.trace_id, '032x')
                context['span_id'] = format(span_context.span_id, '016x')

        return context

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message with context."""
        self.logger.bind(**self._add_context(kwargs)).debug(msg)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message with context."""
        self.logger.bind(**self._add_context(kwargs)).info(msg)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message with context."""
        self.logger.bind(**self._add_context(kwargs)).warning(msg)


# ==== LOGGING UTILITIES ==== #

def get_logger(name: str) -> ContextualLogger:
    """Get a contextual logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(name)


def log_business_event(event_type: str, **context: Any) -> None:
    """Log business events with structured data.

    Args:
        event_type: Type of business event
        **context: Additional business context
    """
    logger.bind(
        event_type=event_type,
        business_event=True,
        **context
    ).info(f"Business event: {event_type}")
