"""Service for resolving, fetching and combining User Data Function samples."""

from typing import Final, Protocol

from fabric_udf_samples_api import catalog
from fabric_udf_samples_api.cache import SAMPLES_LIST_KEY, CacheKey, ContentCache
from fabric_udf_samples_api.exceptions import (
    FetchError,
    NoMappingError,
    SamplesValidationError,
)
from fabric_udf_samples_api.interfaces.samples_repo import SamplesRepoRoutes
from fabric_udf_samples_api.logging import get_logger
from fabric_udf_samples_api.models.samples import (
    ResourceCategory,
    SampleAction,
    UserDataFunctionSamples,
)

logger = get_logger(__name__)

FILE_HEADER: Final[str] = "# File: {identifier}\n\n"
SEPARATOR: Final[str] = "\n\n# ========================================\n\n"


class Fetcher(Protocol):
    """Anything that can fetch a file's text relative to a base url."""

    async def fetch(self, identifier: str, base_url: str) -> str:
        """Returns the text content of a single file."""
        ...


class SamplesService:
    """Service for handling sample content requests."""

    def __init__(
        self,
        fetcher: Fetcher,
        cache: ContentCache,
        base_url: str = SamplesRepoRoutes.BASE_URL,
    ) -> None:
        """Initialize the service with a fetcher and the cache it fills."""
        self._fetcher = fetcher
        self._cache = cache
        self._base_url = base_url

    async def get(
        self,
        category: str | None,
        action: str | None = None,
        filename: str | None = None,
    ) -> str:
        """Returns the content for a resource category and action.

        The samples list is returned as fetched. Code samples are returned as one
        document with a header per file, in catalog order. Nothing is returned if
        any file fails to fetch, but files fetched before the failure stay cached.

        Raises:
            SamplesValidationError: If the request is malformed
            NoMappingError: If the catalog has no files for the request
            FetchError: If a file could not be fetched
        """
        resource, sample_action = self.validate(category, action, filename)
        return await self._get_validated(resource, sample_action, filename)

    async def get_samples(
        self,
        category: str | None,
        action: str | None = None,
        filename: str | None = None,
    ) -> UserDataFunctionSamples:
        """Like get(), but returns the content with the parsed resource and action."""
        resource, sample_action = self.validate(category, action, filename)
        content = await self._get_validated(resource, sample_action, filename)
        return UserDataFunctionSamples(
            resource=resource, action=sample_action, content=content
        )

    async def _get_validated(
        self,
        resource: ResourceCategory,
        sample_action: SampleAction | None,
        filename: str | None,
    ) -> str:
        """Resolves, fetches and combines the content of a validated request."""
        if resource is ResourceCategory.samples_list:
            return await self._get_content(
                CacheKey(resource, SAMPLES_LIST_KEY), SamplesRepoRoutes.SAMPLES_LIST
            )

        # Handled in validate(), duplicated for typing
        if sample_action is None:
            raise SamplesValidationError(
                "action",
                "The action parameter is required for code resource types.",
            )
        files = catalog.resolve(resource, sample_action, filename)
        if not files:
            raise NoMappingError(resource.value, sample_action.value)

        sections = []
        for file in files:
            content = await self._get_content(CacheKey(resource, file), file)
            sections.append(FILE_HEADER.format(identifier=file) + content)
        return SEPARATOR.join(sections)

    @staticmethod
    def validate(
        category: str | None, action: str | None, filename: str | None
    ) -> tuple[ResourceCategory, SampleAction | None]:
        """Checks a raw request and converts it to its enum values.

        Blank strings are treated as missing. An action given for the samples list
        is still validated, but otherwise ignored.
        """
        if not category or not category.strip():
            raise SamplesValidationError(
                "resource", "The resource parameter is required."
            )
        try:
            resource = ResourceCategory(category)
        except ValueError as e:
            choices = ", ".join(f"'{c.value}'" for c in ResourceCategory)
            raise SamplesValidationError(
                "resource", f"Invalid resource '{category}'. Must be one of {choices}."
            ) from e

        if not action or not action.strip():
            if resource is not ResourceCategory.samples_list:
                raise SamplesValidationError(
                    "action",
                    "The action parameter is required for code resource types.",
                )
            return resource, None

        try:
            sample_action = SampleAction(action)
        except ValueError as e:
            choices = ", ".join(f"'{a.value}'" for a in SampleAction)
            raise SamplesValidationError(
                "action", f"Invalid action '{action}'. Must be one of {choices}."
            ) from e

        if sample_action is SampleAction.specific and (
            not filename or not filename.strip()
        ):
            raise SamplesValidationError(
                "filename",
                "The filename parameter is required when action is 'specific'.",
            )
        return resource, sample_action

    async def _get_content(self, key: CacheKey, identifier: str) -> str:
        """Returns cached content, fetching and caching it on a miss."""
        cached = self._cache.try_get(key)
        if cached is not None:
            logger.debug(
                "samples_cache_hit",
                resource=key.category.value,
                identifier=identifier,
            )
            return cached

        logger.info(
            "samples_fetch_started",
            resource=key.category.value,
            identifier=identifier,
        )
        try:
            content = await self._fetcher.fetch(identifier, self._base_url)
        except FetchError as e:
            logger.error(
                "samples_fetch_failed",
                resource=key.category.value,
                identifier=identifier,
                status_code=e.status_code,
                transport=e.transport,
                error=e.message,
            )
            raise
        self._cache.insert(key, content)
        return content
