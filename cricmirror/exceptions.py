"""Custom exceptions for cricmirror."""


class CricmirrorError(Exception):
    """Base class for all cricmirror exceptions."""

    pass


class FetchError(CricmirrorError):
    """Raised when a page could not be fetched from the remote origin."""

    def __init__(self, url: str, status_code: int | None, reason: str):
        """Initialize fetch error.

        Args:
            url: URL that was requested
            status_code: HTTP status code received, or None if no response arrived
            reason: Human readable cause (timeout, connection error, bad status)

        """
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f'Failed to fetch {url} (status={status_code}): {reason}')


class MarkupParseError(CricmirrorError):
    """Raised when fetched markup cannot be loaded into a document tree."""

    def __init__(self, url: str, reason: str):
        """Initialize parse error.

        Args:
            url: URL the markup was fetched from
            reason: Why the parser gave up

        """
        self.url = url
        self.reason = reason
        super().__init__(f'Failed to parse markup from {url}: {reason}')
