"""Errors raised while retrieving repositories."""

from typing import Optional


class ShowcaseError(Exception):
    """Base class for pages-showcase errors."""


class CacheMiss(ShowcaseError):
    """No usable cache entry for a user. Handled internally by triggering a fetch."""


class ParseError(ShowcaseError):
    """The API answered 200 but the body is not a valid repository list."""


class NetworkError(ShowcaseError):
    """Non-200 response or transport failure."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidUser(ShowcaseError):
    """The user identifier is empty or blank."""


class PageError(ShowcaseError):
    """An HTML page is missing the template or a container's username."""
