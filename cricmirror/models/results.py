"""Result types for fetch operations."""

from dataclasses import dataclass

from cricmirror.exceptions import FetchError


@dataclass
class FetchResult:
    """Result of an HTML fetch operation.

    Attributes:
        url: URL from which the HTML is grabbed
        html: HTML content grabbed from the URL, None on failure
        status_code: HTTP status code, None if no response arrived
        error: Why the fetch failed, None on success
        fetch_time: Total time for the HTML to be fetched

    """

    url: str
    html: str | None = None
    status_code: int | None = None
    error: str | None = None
    fetch_time: float = 0.0

    @property
    def success(self) -> bool:
        """Whether the fetch was successful.

        Returns:
            True if the HTML was fetched with a 2xx status

        """
        return self.html is not None and self.error is None

    def raise_for_failure(self) -> str:
        """Return the fetched HTML or raise.

        Returns:
            The HTML text

        Raises:
            FetchError: If the fetch did not succeed

        """
        if not self.success:
            raise FetchError(self.url, self.status_code, self.error or 'empty response')
        assert self.html is not None
        return self.html
