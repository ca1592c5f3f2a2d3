"""Structured logging configuration for decimal weights.

The library itself only logs on failure paths (unparseable text, missing
conversions) and at debug level for conversions, so an application that never
calls ``configure_logging`` sees nothing unusual. Applications that want the
events route them through the standard ``logging`` module with structlog
processors on top.

Usage:
    from decimal_weight.logging import get_logger, configure_logging

    # Configure at application startup
    configure_logging(log_level="INFO", log_format="json")

    # Or send the events to a handler of your own
    configure_logging(handler=logging.FileHandler("weights.log"))

    # Get logger in modules
    logger = get_logger(__name__)
    logger.info("inventory_weighed", total="12.5 kg", items=3)
"""

import logging
import sys
from typing import Callable, Optional, TextIO

import structlog
from structlog.types import Processor


SERVICE_NAME = "decimal-weight"

# Handler installed by the last configure_logging call.
_handler: Optional[logging.Handler] = None


def _create_service_context_processor(
    service_name: str, extra_context: Optional[dict] = None
) -> Callable:
    extra = extra_context or {}

    def _add_service_context(
        logger: logging.Logger, method_name: str, event_dict: dict  # noqa: ARG001
    ) -> dict:
        event_dict["service"] = service_name
        event_dict.update(extra)
        return event_dict

    return _add_service_context


def configure_logging(
    log_level: str = "WARNING",
    log_format: str = "text",
    stream: Optional[TextIO] = None,
    handler: Optional[logging.Handler] = None,
    service_name: str = SERVICE_NAME,
    extra_processors: Optional[list[Processor]] = None,
    extra_context: Optional[dict] = None,
) -> None:
    """Configure structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format - 'json' for structured, 'text' for console
        stream: Output stream (default: sys.stderr)
        handler: Handler to use instead of a stream handler on ``stream``.
            A handler without a formatter gets the plain message format.
        service_name: Service name included in all log entries
        extra_processors: Additional structlog processors to include
        extra_context: Static context dict added to all log entries
    """
    global _handler

    common_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _create_service_context_processor(service_name, extra_context),
    ]

    if extra_processors:
        common_processors.extend(extra_processors)

    if log_format == "json":
        processors = common_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors = common_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.reset_defaults()
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,  # Disable caching for test flexibility
    )

    if handler is None:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if handler.formatter is None:
        handler.setFormatter(logging.Formatter("%(message)s"))

    level = getattr(logging, log_level.upper(), logging.WARNING)
    handler.setLevel(level)

    root_logger = logging.getLogger()
    if _handler is not None and _handler is not handler:
        root_logger.removeHandler(_handler)
        _handler.close()
    if handler not in root_logger.handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    _handler = handler


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance (typically ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


class WeightLogger:
    """Domain-specific logger with predefined weight events."""

    def __init__(self, name: str = None):
        self._logger = get_logger(name)

    def parse_failed(self, text: str, reason: str, **extra) -> None:
        """Log text that could not be read as a weight."""
        self._logger.warning("parse_failed", text=text, reason=reason, **extra)

    def conversion_missing(self, source: str, dest: str, **extra) -> None:
        """Log a unit pair with no conversion table entry."""
        self._logger.warning("conversion_missing", source=source, dest=dest, **extra)

    def conversion_performed(
        self,
        source: str,
        dest: str,
        value: str,
        result: str,
        **extra
    ) -> None:
        self._logger.debug(
            "conversion_performed",
            source=source,
            dest=dest,
            value=value,
            result=result,
            **extra
        )

    def cli_error(self, command: str, error: str, error_type: str = "WeightException", **extra) -> None:
        self._logger.error(
            "cli_error",
            command=command,
            error=error,
            error_type=error_type,
            **extra
        )

    def info(self, event: str, **kwargs) -> None:
        self._logger.info(event, **kwargs)

    def warning(self, event: str, **kwargs) -> None:
        self._logger.warning(event, **kwargs)

    def error(self, event: str, **kwargs) -> None:
        self._logger.error(event, **kwargs)

    def debug(self, event: str, **kwargs) -> None:
        self._logger.debug(event, **kwargs)
