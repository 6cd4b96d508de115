"""Extraction engine: locator, inventory builder and mode dispatcher."""

from cricmirror.core.extraction.extractor import SnapshotExtractor, extract_everything
from cricmirror.core.extraction.inventory import InventoryBuilder
from cricmirror.core.extraction.locator import MATCHES_LIST, NEWS_CARDS, EmbeddedData, locate, scan_scripts

__all__ = [
    'EmbeddedData',
    'InventoryBuilder',
    'MATCHES_LIST',
    'NEWS_CARDS',
    'SnapshotExtractor',
    'extract_everything',
    'locate',
    'scan_scripts',
]
