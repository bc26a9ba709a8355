"""Logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, Final

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

    from fabric_udf_samples_api.config import APISettings

SERVICE_NAME: Final[str] = "fabric-udf-samples-api"


def add_service_context(
    settings: APISettings,
) -> Callable[..., dict[str, Any]]:
    """Create a processor that tags every event with the service and environment.

    Values already bound on the event take precedence.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("service", SERVICE_NAME)
        event_dict.setdefault("environment", settings.environment)
        return event_dict

    return processor


def setup_logging(settings: APISettings) -> None:
    """Configure structured logging with structlog.

    httpx logs one line per request at INFO. Those lines are only let through when
    debugging, where they show every fetch made against the samples repository.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.log_level,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(
        logging.INFO if settings.log_level == "DEBUG" else logging.WARNING
    )
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    processors: list[Callable[..., Any]] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_context(settings),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.log_format == "json" or settings.is_production:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.processors.ExceptionRenderer(),
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
