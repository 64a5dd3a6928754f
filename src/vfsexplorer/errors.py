"""Error kinds raised while fetching a directory listing."""


class ListingError(Exception):
    """Base class for a failed listing request.

    ``message`` is human readable and is shown to the user as-is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(ListingError):
    """The request could not complete (connection refused, timeout, ...)."""


class ApplicationError(ListingError):
    """The backend answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ListingError):
    """The backend answered 2xx but the payload has the wrong shape."""
