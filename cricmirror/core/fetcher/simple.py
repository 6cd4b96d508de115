"""Single-attempt HTTP fetcher with browser-like headers."""

import logging
import time

import logfire
import requests

from cricmirror.config import DEFAULT_TIMEOUT
from cricmirror.core.fetcher.base import HTMLFetcher
from cricmirror.models.results import FetchResult
from cricmirror.utils.headers import HeaderGenerator, UserAgentRotator


class SimpleFetcher(HTMLFetcher):
    """HTTP fetcher that issues one GET per call.

    There is no retry and no cache: a timeout, connection error or
    non-2xx status is reported as a failed FetchResult.

    The timeout is handed to requests, which applies it to the connect
    and to each socket read, not to the whole transfer. A server that
    keeps trickling bytes can hold a call past it.

    Attributes:
        timeout: Connect and per-read timeout in seconds
        user_agent: User-Agent sent with every request
        rotate_user_agent: Pick a random browser user agent per request instead
        session: Requests session instance if use_session is True

    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
        rotate_user_agent: bool = False,
        use_session: bool = True,
    ):
        """Initialize the simple fetcher.

        Args:
            timeout: Seconds allowed for the connect and for each socket read
            user_agent: User agent to send. Defaults to a desktop Chrome one.
            rotate_user_agent: If True use a different browser user agent for each request
            use_session: If True reuse connections through a requests.Session

        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.rotate_user_agent = rotate_user_agent

        self.session: requests.Session | None = requests.Session() if use_session else None
        self.logger = logging.getLogger(__name__)

    def _get_headers(self) -> dict[str, str]:
        user_agent = UserAgentRotator.get_random() if self.rotate_user_agent else self.user_agent
        return HeaderGenerator.generate_headers(user_agent=user_agent)

    def fetch(self, url: str) -> FetchResult:
        """Fetch HTML with a single GET request.

        Args:
            url: The absolute URL that is being fetched

        Returns:
            The fetched HTML and status, or the failure cause

        """
        start_time = time.time()
        headers = self._get_headers()
        getter = self.session.get if self.session else requests.get

        try:
            response = getter(url, headers=headers, timeout=self.timeout, allow_redirects=True)
        except requests.Timeout:
            return self._failure(url, None, f'timed out after {self.timeout}s', start_time)
        except requests.RequestException as e:
            return self._failure(url, None, str(e), start_time)

        if not response.ok:
            return self._failure(url, response.status_code, f'HTTP {response.status_code}', start_time)

        html = response.text
        fetch_time = time.time() - start_time
        self.logger.debug('Fetched %s (%d chars, %.2fs)', url, len(html), fetch_time)
        logfire.info('HTML fetched', url=url, size_chars=len(html), status_code=response.status_code)

        return FetchResult(url=url, html=html, status_code=response.status_code, fetch_time=fetch_time)

    def _failure(self, url: str, status_code: int | None, reason: str, start_time: float) -> FetchResult:
        self.logger.warning('Error fetching %s: %s', url, reason)
        logfire.error('Failed to fetch HTML', url=url, status_code=status_code, error=reason)
        return FetchResult(
            url=url,
            html=None,
            status_code=status_code,
            error=reason,
            fetch_time=time.time() - start_time,
        )

    def close(self):
        """Close the session if it exists."""
        if self.session:
            self.session.close()
