"""Errors raised while resolving and fetching User Data Function samples."""


class SamplesError(Exception):
    """Base class for errors raised when retrieving samples."""


class SamplesValidationError(SamplesError, ValueError):
    """Raised when a samples request is missing a field or has an invalid one."""

    def __init__(self, field: str, message: str) -> None:
        """The field is the name of the offending request parameter."""
        super().__init__(message)
        self.field = field


class NoMappingError(SamplesError, LookupError):
    """Raised when the catalog has no files for a resource and action."""

    def __init__(self, category: str, action: str | None) -> None:
        """Stores the unmapped category and action pair."""
        super().__init__(
            f"No files found for resource '{category}' and action '{action}'"
        )
        self.category = category
        self.action = action


class FetchError(SamplesError):
    """Raised when a sample file could not be fetched.

    Exactly one of `status_code` and `transport` is set: `status_code` when the
    remote answered with a non-success status, `transport` (the name of the
    underlying exception) when no usable response was received: the request did
    not complete or the body could not be decoded.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        transport: str | None = None,
    ) -> None:
        """Stores the status code or transport cause of the failure."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.transport = transport

    @property
    def is_transport_error(self) -> bool:
        """Whether no usable response was received from the remote."""
        return self.status_code is None
