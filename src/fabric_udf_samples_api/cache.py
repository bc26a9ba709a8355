"""In-memory cache for fetched sample content."""

from typing import NamedTuple, Self

from fabric_udf_samples_api.models.samples import ResourceCategory

SAMPLES_LIST_KEY = "<samples-list>"
"""Reserved identifier for the samples index within its own category."""


class CacheKey(NamedTuple):
    """Identifies cached content by resource category and file path."""

    category: ResourceCategory
    identifier: str


class ContentCache:
    """Caches fetched content for the lifetime of the process.

    Entries are never evicted or overwritten by the service, which only inserts
    after a cache miss. There is no locking. Two concurrent misses on the same
    key both fetch, and whichever inserts last is kept. Both values are copies of
    the same remote file.
    """

    Storage = dict[CacheKey, str]
    """Type alias for the storage backend instance."""

    storage: Storage

    def __init__(self: Self) -> None:
        """Initializes an empty cache."""
        self.storage = {}

    def try_get(self: Self, key: CacheKey) -> str | None:
        """Returns the cached content for a key, or None on a miss."""
        return self.storage.get(key)

    def insert(self: Self, key: CacheKey, content: str) -> None:
        """Stores fetched content under a key."""
        self.storage[key] = content

    def __contains__(self: Self, key: object) -> bool:
        return key in self.storage

    def __len__(self: Self) -> int:
        return len(self.storage)


content_cache = ContentCache()
