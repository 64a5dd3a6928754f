"""HTTP client for the virtual file system listing endpoint."""

import logging

import httpx

from .entries import Listing, parse_listing
from .errors import ApplicationError, MalformedResponseError, TransportError

logger = logging.getLogger(__name__)

LISTING_ENDPOINT = "/vfs"
TRANSPORT_ERROR_MESSAGE = "Could not reach the server"


def _error_message(response: httpx.Response) -> str:
    """Pull the backend's message out of an error response.

    The reference backend writes its JSON error body with ``http.Error``,
    which labels it text/plain, so the content type is not checked.
    """
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return f"Request failed with status {response.status_code}"


class ListingClient:
    """Fetch directory listings from a ``/vfs`` backend."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = 30.0,
        endpoint: str = LISTING_ENDPOINT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    async def fetch_listing(self, root: str | None) -> Listing:
        """Request the listing of ``root`` (or the server default if None).

        Raises:
            TransportError: The request did not complete
            ApplicationError: The backend answered with a non-2xx status
            MalformedResponseError: The 2xx payload could not be used
        """
        params = {"root": root} if root else None
        logger.debug("GET %s root=%r", self.endpoint, root)
        try:
            response = await self._client.get(self.endpoint, params=params)
        except httpx.HTTPError as e:
            detail = str(e)
            message = f"{TRANSPORT_ERROR_MESSAGE}: {detail}" if detail else TRANSPORT_ERROR_MESSAGE
            raise TransportError(message) from e

        if not response.is_success:
            raise ApplicationError(_error_message(response), response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                "Malformed listing response: body is not valid JSON"
            ) from e

        return parse_listing(payload)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ListingClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
