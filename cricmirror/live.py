"""Live news and match lookups with a fallback page.

The homepage usually carries both live structures. When it comes back
without them, a second, more specific page is tried once.
"""

import logfire

from cricmirror.config import MirrorSettings
from cricmirror.core.extraction.extractor import SnapshotExtractor

NEWS_PATHS = ('/', '/cricket-news')
MATCHES_PATHS = ('/', '/cricket-match/live-scores')


def _first_non_empty(extractor: SnapshotExtractor, paths: tuple[str, ...], field_name: str) -> list:
    for path in paths:
        snapshot = extractor.extract(path, fast_mode=True)
        items = getattr(snapshot, field_name, None) or []
        if items:
            logfire.info('Live data found', field=field_name, path=path, count=len(items))
            return items
        logfire.info('No live data on page', field=field_name, path=path)
    return []


def fetch_live_news(extractor: SnapshotExtractor | None = None, settings: MirrorSettings | None = None) -> list:
    """Return the live news cards, trying the homepage then the news page.

    Args:
        extractor: Extractor to reuse. Defaults to a new one for this call.
        settings: Settings for a new extractor. Ignored if extractor is given.

    Returns:
        List of news cards, empty if neither page carried any

    """
    if extractor is not None:
        return _first_non_empty(extractor, NEWS_PATHS, 'news_cards')
    with SnapshotExtractor(settings=settings) as owned:
        return _first_non_empty(owned, NEWS_PATHS, 'news_cards')


def fetch_live_matches(extractor: SnapshotExtractor | None = None, settings: MirrorSettings | None = None) -> list:
    """Return the live matches, trying the homepage then the live-scores page.

    Args:
        extractor: Extractor to reuse. Defaults to a new one for this call.
        settings: Settings for a new extractor. Ignored if extractor is given.

    Returns:
        List of matches, empty if neither page carried any

    """
    if extractor is not None:
        return _first_non_empty(extractor, MATCHES_PATHS, 'matches_list')
    with SnapshotExtractor(settings=settings) as owned:
        return _first_non_empty(owned, MATCHES_PATHS, 'matches_list')
