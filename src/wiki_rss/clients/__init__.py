"""Network clients for external data sources."""

from .client import Client
from .exceptions import (
    APIError,
    ClientError,
    ConnectionError,
    InvalidResponseError,
    NotFoundError,
    RateLimitError,
    TransientError,
)
from .lookup import PageLookup
from .wikipedia_client import WikipediaClient

__all__ = [
    "Client",
    "PageLookup",
    "WikipediaClient",
    "ClientError",
    "TransientError",
    "ConnectionError",
    "APIError",
    "RateLimitError",
    "NotFoundError",
    "InvalidResponseError",
]
