"""Abstract base class for HTML fetchers."""

from abc import ABC, abstractmethod

from cricmirror.models.results import FetchResult


class HTMLFetcher(ABC):
    """Abstract base class for HTML fetchers.

    Implement this interface to plug a different transport into the
    extractor. Implementations make exactly one attempt per call and
    report failures through the returned FetchResult instead of raising.
    """

    @abstractmethod
    def fetch(self, url: str) -> FetchResult:
        """Fetch HTML from an absolute URL.

        Args:
            url: URL to fetch

        Returns:
            FetchResult with HTML on success, or the failure cause

        """
        pass

    def close(self):
        """Release any held resources."""
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
