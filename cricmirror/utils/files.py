"""Utility functions for file and directory management in cricmirror."""

from pathlib import Path


def get_project_root() -> Path:
    """Find the project root by searching upwards from the Current Working Directory.

    Stops at the first directory containing a marker file.
    """
    current_path = Path.cwd()

    markers = {'.git', 'pyproject.toml', '.cricmirror', 'requirements.txt'}

    for parent in [current_path] + list(current_path.parents):
        if any((parent / marker).exists() for marker in markers):
            return parent

    # No markers (e.g. running in /tmp): use the current directory
    return current_path


def get_logs_path() -> Path:
    """Return the path to the logs directory in .cricmirror."""
    root = get_project_root()
    return root / '.cricmirror' / 'logs'


def snapshot_filename(page_path: str) -> str:
    """Build the file name a page's snapshot is saved under.

    Slashes become underscores, so '/' is saved as '_.json' and
    '/cricket-news' as '_cricket-news.json'. Absolute URLs keep only
    their path part.

    Args:
        page_path: Page path or absolute URL that was extracted

    Returns:
        File name ending in .json

    """
    if page_path.startswith('http'):
        page_path = '/' + page_path.split('://', 1)[-1].partition('/')[2]
    name = page_path.split('?', 1)[0].replace('/', '_') or 'homepage'
    return f'{name}.json'
