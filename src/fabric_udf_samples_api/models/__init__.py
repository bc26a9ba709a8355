"""Models used for messages and responses at API endpoints."""

from .common import HealthCheck, Ok
from .samples import (
    CatalogEntry,
    ResourceCategory,
    SampleAction,
    UserDataFunctionSamples,
)

__all__ = [
    "CatalogEntry",
    "HealthCheck",
    "Ok",
    "ResourceCategory",
    "SampleAction",
    "UserDataFunctionSamples",
]
