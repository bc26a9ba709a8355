"""Tests the structlog configuration."""

import logging
from collections.abc import Generator

import pytest
import structlog

from fabric_udf_samples_api.config import APISettings
from fabric_udf_samples_api.logging import (
    SERVICE_NAME,
    add_service_context,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None]:
    """Restores the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


def _renderer() -> object:
    return structlog.get_config()["processors"][-1]


def test_setup_logging_console_by_default() -> None:
    """Test the console renderer is used locally."""
    setup_logging(APISettings())
    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


@pytest.mark.parametrize(
    "settings",
    [APISettings(log_format="json"), APISettings(environment="production")],
)
def test_setup_logging_json(settings: APISettings) -> None:
    """Test the JSON renderer is used in production or when requested."""
    setup_logging(settings)
    assert isinstance(_renderer(), structlog.processors.JSONRenderer)


def test_get_logger_logs_events(caplog: pytest.LogCaptureFixture) -> None:
    """Test loggers emit structured events through stdlib logging."""
    setup_logging(APISettings(log_format="json"))
    caplog.set_level(logging.INFO)
    get_logger("tests").info("samples_fetch_started", identifier="a.py")

    out = caplog.text
    assert "samples_fetch_started" in out
    assert '"identifier": "a.py"' in out


def test_add_service_context_tags_events() -> None:
    """Test events are tagged with the service and environment."""
    processor = add_service_context(APISettings(environment="production"))

    event = processor(None, "info", {"event": "samples_fetch_started"})

    assert event == {
        "event": "samples_fetch_started",
        "service": SERVICE_NAME,
        "environment": "production",
    }


def test_add_service_context_keeps_bound_values() -> None:
    """Test values already on the event are not overwritten."""
    processor = add_service_context(APISettings())

    event = processor(None, "info", {"event": "e", "service": "other"})

    assert event["service"] == "other"
    assert event["environment"] == "local"


@pytest.mark.parametrize(
    ("log_level", "httpx_level"),
    [("DEBUG", logging.INFO), ("INFO", logging.WARNING), ("ERROR", logging.WARNING)],
)
def test_httpx_request_logs_only_when_debugging(
    log_level: str, httpx_level: int
) -> None:
    """Test httpx request lines are shown only at DEBUG."""
    setup_logging(APISettings(log_level=log_level))
    assert logging.getLogger("httpx").level == httpx_level


def test_logged_events_carry_service_context(caplog: pytest.LogCaptureFixture) -> None:
    """Test rendered events include the service name."""
    setup_logging(APISettings(log_format="json"))
    caplog.set_level(logging.INFO)
    get_logger("tests").info("samples_cache_hit")

    assert f'"service": "{SERVICE_NAME}"' in caplog.text
