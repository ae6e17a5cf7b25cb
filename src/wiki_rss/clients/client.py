"""Base HTTP client with short, bounded retries."""

import logging
from abc import ABC, abstractmethod
from time import sleep
from typing import Any

import httpx

from .exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    TransientError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_RETRY_ATTEMPTS = 2
DEFAULT_RETRY_DELAY = 0.12


class Client(ABC):
    """Base class for network clients.

    Wraps a lazily created httpx.Client configured from a plain dict. A
    request is tried ``retry_attempts`` times in total; the wait before try
    ``n + 1`` is ``retry_delay * n`` seconds.

    Config keys:
        base_url (required): Base URL for all requests
        timeout: Request timeout in seconds (default: 10)
        retry_attempts: Total tries per request (default: 2)
        retry_delay: Base backoff in seconds (default: 0.12)
        headers: Headers sent with every request
    """

    def __init__(self, config: dict):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"])

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", DEFAULT_TIMEOUT))

    @property
    def retry_attempts(self) -> int:
        return max(1, int(self._config.get("retry_attempts", DEFAULT_RETRY_ATTEMPTS)))

    @property
    def retry_delay(self) -> float:
        return float(self._config.get("retry_delay", DEFAULT_RETRY_DELAY))

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._config.get("headers", {}))

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _check_status(self, response: httpx.Response) -> httpx.Response:
        """Raise an APIError subclass for any non-2xx response."""
        if response.is_success:
            return response

        url = str(response.url)
        if response.status_code == 404:
            raise NotFoundError(f"Not found: {url}", url=url)
        if response.status_code == 429:
            raise RateLimitError(f"Rate limited: {url}", url=url)
        raise APIError(
            f"HTTP {response.status_code} from {url}",
            status_code=response.status_code,
            url=url,
        )

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send a request, retrying transport failures and non-2xx statuses.

        Args:
            method: HTTP method
            path: URL path relative to base_url
            **kwargs: Passed through to httpx.Client.request

        Returns:
            The successful response

        Raises:
            ConnectionError: If every try failed before a response was read
            APIError: If the last try got a non-2xx response
        """
        last_error: Exception | None = None

        for attempt in range(1, self.retry_attempts + 1):
            try:
                return self._check_status(self.client.request(method, path, **kwargs))
            except httpx.RequestError as e:
                last_error = e
                logger.warning(f"{method} {path} failed ({attempt}/{self.retry_attempts}): {e}")
            except TransientError as e:
                last_error = e
                logger.warning(f"{e.message} ({attempt}/{self.retry_attempts})")

            if attempt < self.retry_attempts:
                sleep(self.retry_delay * attempt)

        if isinstance(last_error, APIError):
            raise last_error
        raise ConnectionError(
            f"Connection failed after {self.retry_attempts} attempts",
            attempts=self.retry_attempts,
        ) from last_error

    def get(self, path: str, **kwargs) -> httpx.Response:
        return self._request("GET", path, **kwargs)

    @abstractmethod
    def fetch(self, *args, **kwargs) -> Any:
        """Fetch data from the API. Must be implemented by subclasses."""
        pass
