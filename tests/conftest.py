"""Root configuration for pytest."""

from collections.abc import Callable, Generator
from typing import Self

import pytest
from fastapi.testclient import TestClient

from fabric_udf_samples_api.__main__ import app
from fabric_udf_samples_api.cache import ContentCache
from fabric_udf_samples_api.catalog import CATALOG
from fabric_udf_samples_api.config import settings
from fabric_udf_samples_api.deps import get_samples_service
from fabric_udf_samples_api.exceptions import FetchError
from fabric_udf_samples_api.interfaces.samples_repo import SamplesRepoRoutes
from fabric_udf_samples_api.services.samples import SamplesService

SAMPLES_LIST_CONTENT = "# Fabric User Data Functions samples\n\n- Warehouse\n"


def sample_content(identifier: str) -> str:
    """Returns the fake content of a sample file."""
    return f"import fabric.functions as fn\n\n# {identifier}\n"


class FakeFetcher:
    """A fetcher serving files from memory and recording every call."""

    def __init__(
        self: Self,
        files: dict[str, str],
        failures: dict[str, FetchError] | None = None,
    ) -> None:
        """Files maps identifiers to content; failures maps them to errors."""
        self.files = files
        self.failures = failures or {}
        self.calls: list[tuple[str, str]] = []

    async def fetch(self: Self, identifier: str, base_url: str) -> str:
        """Returns the stored content or raises the stored error."""
        self.calls.append((identifier, base_url))
        if identifier in self.failures:
            raise self.failures[identifier]
        if identifier not in self.files:
            raise FetchError(
                f"404 Not Found for {base_url}{identifier}", status_code=404
            )
        return self.files[identifier]

    @property
    def identifiers(self: Self) -> list[str]:
        """The identifiers fetched, in call order."""
        return [identifier for identifier, _ in self.calls]


@pytest.fixture
def mock_token() -> str:
    """Sets a token."""
    token = "safe" * 16
    settings.TOKEN = token
    return token


@pytest.fixture
def sample_files() -> dict[str, str]:
    """Content for the samples list and every catalogued file."""
    files = {SamplesRepoRoutes.SAMPLES_LIST: SAMPLES_LIST_CONTENT}
    for identifiers in CATALOG.values():
        files.update({i: sample_content(i) for i in identifiers})
    return files


@pytest.fixture
def make_fetcher(
    sample_files: dict[str, str],
) -> Callable[..., FakeFetcher]:
    """Returns a factory for fake fetchers failing on the given identifiers."""

    def _make(failures: dict[str, FetchError] | None = None) -> FakeFetcher:
        return FakeFetcher(dict(sample_files), failures)

    return _make


@pytest.fixture
def fetcher(sample_files: dict[str, str]) -> FakeFetcher:
    """A fake fetcher knowing every catalogued file."""
    return FakeFetcher(sample_files)


@pytest.fixture
def cache() -> ContentCache:
    """An empty content cache."""
    return ContentCache()


@pytest.fixture
def samples_service(fetcher: FakeFetcher, cache: ContentCache) -> SamplesService:
    """A samples service using the fake fetcher and an empty cache."""
    return SamplesService(fetcher, cache)


@pytest.fixture
def client(
    mock_token: str, samples_service: SamplesService
) -> Generator[TestClient]:
    """Returns a test client authorized with the token and a fake service."""
    app.dependency_overrides[get_samples_service] = lambda: samples_service
    with TestClient(app) as c:
        c.headers[settings.TOKEN_HEADER_NAME] = mock_token
        yield c
    app.dependency_overrides.clear()
