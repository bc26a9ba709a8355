"""Interface for reading files from the Fabric User Data Functions samples repo."""

from typing import Final, Self

import httpx

from fabric_udf_samples_api.exceptions import FetchError


class SamplesRepoRoutes:
    """Contains locations of the samples repository used by this API."""

    BASE_URL: Final[str] = (
        "https://raw.githubusercontent.com/microsoft/"
        "fabric-user-data-functions-samples/refs/heads/main/PYTHON/"
    )
    SAMPLES_LIST: Final[str] = "samples-llms.txt"
    USER_AGENT: Final[str] = "fabric-udf-samples-api"


class SamplesRepoAPI:
    """Class for fetching raw files from the samples repository."""

    def __init__(
        self: Self,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """The transport can be replaced, i.e. with httpx.MockTransport."""
        self._timeout = timeout
        self._transport = transport
        self._headers = {"User-Agent": SamplesRepoRoutes.USER_AGENT}

    async def fetch(
        self: Self, identifier: str, base_url: str = SamplesRepoRoutes.BASE_URL
    ) -> str:
        """Makes a GET request for a single file.

        The identifier is appended to the base url as given.

        Returns:
            The response body as text

        Raises:
            FetchError: If the response is not 2xx, the request did not complete or
                the body is not UTF-8
        """
        url = f"{base_url}{identifier}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                res = await client.get(url, headers=self._headers)
            res.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"{e.response.status_code} {e.response.reason_phrase} for {url}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise FetchError(
                f"Request to {url} failed: {e}", transport=type(e).__name__
            ) from e
        try:
            return res.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FetchError(
                f"Response from {url} is not valid UTF-8: {e}",
                transport=type(e).__name__,
            ) from e
