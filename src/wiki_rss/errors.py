"""Domain exceptions for feed building and article resolution."""

from datetime import date


class WikiRssError(Exception):
    """Base exception for all feed errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InvalidRequestError(WikiRssError):
    """Raised when a cadence or date supplied by the caller is malformed."""

    pass


class ArticleUnavailableError(WikiRssError):
    """Raised when no candidate page could be resolved for a date."""

    def __init__(self, article_date: date, message: str | None = None):
        self.date = article_date
        super().__init__(
            message
            or f"unable to resolve wikipedia article for date {article_date.isoformat()}"
        )


class ResolutionCancelledError(WikiRssError):
    """Raised when resolution is abandoned through its cancel signal."""

    pass


class InternalError(WikiRssError):
    """Raised for unexpected failures, with a short diagnostic message."""

    pass
