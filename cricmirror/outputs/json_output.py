"""JSON output for extracted snapshots."""

import json
import os

from cricmirror.models.snapshot import Snapshot
from cricmirror.utils.files import snapshot_filename


def format_json(snapshot: Snapshot) -> dict:
    """Format a snapshot as JSON-compatible data with camelCase keys.

    Args:
        snapshot: Fast or full snapshot

    Returns:
        Dictionary ready for JSON serialization.

    """
    return snapshot.to_dict()


def save_json(filepath: str, snapshot: Snapshot):
    """Save a snapshot as a pretty-printed JSON file.

    Args:
        filepath: Path to save the file
        snapshot: Fast or full snapshot

    """
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(format_json(snapshot), f, indent=2, ensure_ascii=False)


def save_snapshot(snapshot: Snapshot, page_path: str, output_dir: str = 'extracted') -> str:
    """Save a page's snapshot under output_dir, named after its path.

    Args:
        snapshot: Fast or full snapshot
        page_path: Path (or URL) the snapshot was extracted from
        output_dir: Directory to write into. Defaults to 'extracted'.

    Returns:
        Path to the saved file.

    """
    filepath = os.path.join(output_dir, snapshot_filename(page_path))
    save_json(filepath, snapshot)
    return filepath
