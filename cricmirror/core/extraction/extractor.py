"""Turns a page path into a structured snapshot of the remote page."""

import logfire
from bs4 import BeautifulSoup

from cricmirror.config import MirrorSettings
from cricmirror.core.extraction.inventory import InventoryBuilder, script_text
from cricmirror.core.extraction.locator import scan_scripts
from cricmirror.core.fetcher import HTMLFetcher, create_fetcher
from cricmirror.exceptions import CricmirrorError, FetchError, MarkupParseError
from cricmirror.models.snapshot import FastSnapshot, FullSnapshot, Snapshot
from cricmirror.utils.urls import resolve_page_url


class SnapshotExtractor:
    """Fetches a page, parses it and builds a fast or full snapshot.

    Every call is independent: nothing from one extraction is kept for
    the next, so a single extractor can serve concurrent callers as long
    as its fetcher can.

    Attributes:
        settings: Origin, timeout and user agent
        fetcher: Transport used for the single GET per extraction
        inventory: Builder for the full-mode inventory

    """

    def __init__(self, settings: MirrorSettings | None = None, fetcher: HTMLFetcher | None = None):
        """Initialize the extractor.

        Args:
            settings: Runtime settings. Defaults to MirrorSettings().
            fetcher: Fetcher to use. Defaults to a SimpleFetcher built from settings.

        """
        self.settings = settings or MirrorSettings()
        self.fetcher = fetcher or create_fetcher(
            'simple', timeout=self.settings.timeout, user_agent=self.settings.user_agent
        )
        self.inventory = InventoryBuilder(self.settings.base_url)

    def extract(self, page_path: str = '/', fast_mode: bool = False) -> Snapshot | None:
        """Extract a snapshot, returning None on any failure.

        Args:
            page_path: Path on the origin, or an absolute URL. Defaults to '/'.
            fast_mode: Only locate news cards and matches. Defaults to False.

        Returns:
            FastSnapshot or FullSnapshot, or None if the page could not be
            fetched or parsed.

        """
        try:
            return self.extract_or_raise(page_path, fast_mode)
        except CricmirrorError as e:
            logfire.error('Extraction failed', page_path=page_path, fast_mode=fast_mode, error=str(e))
            return None
        except Exception:
            logfire.exception('Unexpected error during extraction', page_path=page_path, fast_mode=fast_mode)
            return None

    def extract_or_raise(self, page_path: str = '/', fast_mode: bool = False) -> Snapshot:
        """Extract a snapshot, raising on failure.

        Args:
            page_path: Path on the origin, or an absolute URL. Defaults to '/'.
            fast_mode: Only locate news cards and matches. Defaults to False.

        Returns:
            FastSnapshot or FullSnapshot

        Raises:
            FetchError: If the page could not be fetched or came back empty
            MarkupParseError: If the markup could not be parsed

        """
        url = resolve_page_url(page_path, self.settings.base_url)

        with logfire.span('extract_everything', url=url, fast_mode=fast_mode):
            result = self.fetcher.fetch(url)
            html = result.raise_for_failure()
            if not html:
                raise FetchError(url, result.status_code, 'empty response body')

            soup = self._parse(url, html)
            embedded = scan_scripts(script_text(tag) for tag in soup.find_all('script'))

            if fast_mode:
                snapshot: Snapshot = FastSnapshot(
                    news_cards=embedded.news_cards,
                    matches_list=embedded.matches_list,
                    html_length=len(html),
                )
                logfire.info(
                    'Fast extraction complete',
                    url=url,
                    news_cards=len(snapshot.news_cards),
                    matches=len(snapshot.matches_list),
                )
                return snapshot

            snapshot = self.inventory.build(soup, html, embedded)
            self._log_summary(url, snapshot)
            return snapshot

    def _parse(self, url: str, html: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(html, 'lxml')
        except Exception as e:
            raise MarkupParseError(url, str(e)) from e

    def _log_summary(self, url: str, snapshot: FullSnapshot):
        logfire.info(
            'Full extraction complete',
            url=url,
            elements=len(snapshot.elements),
            css_classes=len(snapshot.css.all_classes),
            css_ids=len(snapshot.css.all_ids),
            images=len(snapshot.images),
            links=len(snapshot.links),
            news_cards=len(snapshot.news_cards),
            matches=len(snapshot.matches_list),
            raw_html_kb=round(snapshot.html_length / 1024),
        )

    def close(self):
        """Close the underlying fetcher."""
        self.fetcher.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def extract_everything(
    page_path: str = '/',
    fast_mode: bool = False,
    settings: MirrorSettings | None = None,
    fetcher: HTMLFetcher | None = None,
) -> Snapshot | None:
    """Extract one page in a single call.

    Builds a fresh extractor (and, unless one is given, a fresh fetcher)
    for the call, so concurrent calls share nothing.

    Args:
        page_path: Path on the origin, or an absolute URL. Defaults to '/'.
        fast_mode: Only locate news cards and matches. Defaults to False.
        settings: Runtime settings. Defaults to MirrorSettings().
        fetcher: Fetcher to use instead of a new SimpleFetcher.

    Returns:
        The snapshot, or None if the page could not be fetched or parsed.

    """
    extractor = SnapshotExtractor(settings=settings, fetcher=fetcher)
    try:
        return extractor.extract(page_path, fast_mode)
    finally:
        if fetcher is None:
            extractor.close()
