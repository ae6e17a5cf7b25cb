"""Exceptions raised by the Wikipedia HTTP layer.

None of these reach the article resolver: ``WikipediaClient.lookup`` turns
every ClientError into a "no result".
"""


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class TransientError(ClientError):
    """A failure worth retrying: network trouble or a non-2xx status."""

    pass


class ConnectionError(TransientError):
    """Raised when the network keeps failing after every attempt."""

    def __init__(self, message: str, attempts: int = 1, *args, **kwargs):
        self.attempts = attempts
        super().__init__(message, *args, **kwargs)


class APIError(TransientError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, url: str | None = None, *args, **kwargs):
        self.status_code = status_code
        self.url = url
        super().__init__(message, *args, **kwargs)


class RateLimitError(APIError):
    """Raised on a 429 response."""

    def __init__(self, message: str = "Rate limit exceeded", url: str | None = None):
        super().__init__(message, status_code=429, url=url)


class NotFoundError(APIError):
    """Raised on a 404 response from the API endpoint itself."""

    def __init__(self, message: str = "Resource not found", url: str | None = None):
        super().__init__(message, status_code=404, url=url)


class InvalidResponseError(ClientError):
    """Raised when a 2xx body is not a query response we can read."""

    def __init__(self, message: str, page_id: int | None = None, errors: list | None = None):
        self.page_id = page_id
        self.errors = errors or []
        super().__init__(message)
