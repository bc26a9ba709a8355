"""Tests the API settings."""

import re

import pytest
from pydantic import ValidationError

from fabric_udf_samples_api.config import (
    APISettings,
    generate_auth_token,
    get_settings,
    settings,
)


def test_generate_auth_token_is_64_hex() -> None:
    """Test generated tokens match the required pattern."""
    token = generate_auth_token()
    assert re.fullmatch(r"[a-f0-9]{64}", token)
    assert token != generate_auth_token()


def test_invalid_token_is_rejected() -> None:
    """Test tokens not matching the pattern are invalid."""
    with pytest.raises(ValidationError):
        APISettings(TOKEN="short")


def test_is_production() -> None:
    """Test the production flag follows the environment."""
    assert not APISettings().is_production
    assert APISettings(environment="production").is_production


def test_fetch_timeout_must_be_positive() -> None:
    """Test a non-positive fetch timeout is invalid."""
    with pytest.raises(ValidationError):
        APISettings(FETCH_TIMEOUT_SECONDS=0)


async def test_get_settings_returns_singleton() -> None:
    """Test the settings dependency returns the module settings."""
    assert await get_settings() is settings
