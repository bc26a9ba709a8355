"""Interfaces for interacting with outside services."""

from .samples_repo import SamplesRepoAPI, SamplesRepoRoutes

__all__ = [
    "SamplesRepoAPI",
    "SamplesRepoRoutes",
]
