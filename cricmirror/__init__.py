"""cricmirror - structured snapshots of a live cricket site.

Fetch a page, then get either its live news/match data (fast mode) or
a complete DOM/CSS/JS inventory with the raw markup (full mode).
"""

from cricmirror.config import MirrorSettings
from cricmirror.core.extraction import (
    EmbeddedData,
    InventoryBuilder,
    SnapshotExtractor,
    extract_everything,
    locate,
    scan_scripts,
)
from cricmirror.core.fetcher import HTMLFetcher, SimpleFetcher, create_fetcher
from cricmirror.exceptions import CricmirrorError, FetchError, MarkupParseError
from cricmirror.live import fetch_live_matches, fetch_live_news
from cricmirror.models import FastSnapshot, FetchResult, FullSnapshot, Snapshot
from cricmirror.outputs import save_snapshot

__all__ = [
    # Engine
    'SnapshotExtractor',
    'extract_everything',
    'InventoryBuilder',
    'EmbeddedData',
    'locate',
    'scan_scripts',
    # Fetchers
    'HTMLFetcher',
    'SimpleFetcher',
    'create_fetcher',
    'FetchResult',
    # Live data
    'fetch_live_news',
    'fetch_live_matches',
    # Models
    'FastSnapshot',
    'FullSnapshot',
    'Snapshot',
    # Configuration and output
    'MirrorSettings',
    'save_snapshot',
    # Errors
    'CricmirrorError',
    'FetchError',
    'MarkupParseError',
]
