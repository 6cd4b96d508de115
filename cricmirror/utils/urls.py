"""URL helpers for turning page paths and asset references into absolute URLs."""

from urllib.parse import urlsplit


def is_absolute(url: str) -> bool:
    """Return True if the URL carries a scheme (http, data, mailto, javascript...)."""
    try:
        return bool(urlsplit(url).scheme)
    except ValueError:
        # Malformed netloc such as an unclosed IPv6 bracket
        return url.startswith('http')


def absolutize(url: str, base_url: str) -> str:
    """Rewrite a relative URL against the remote origin.

    Args:
        url: href/src value as found in the markup
        base_url: Origin without a trailing slash, e.g. https://www.cricbuzz.com

    Returns:
        The URL unchanged if it has a scheme, otherwise an absolute URL
        on the origin. Protocol-relative URLs get https.

    """
    if is_absolute(url):
        return url
    if url.startswith('//'):
        return f'https:{url}'
    base_url = base_url.rstrip('/')
    if not url.startswith('/'):
        url = f'/{url}'
    return f'{base_url}{url}'


def resolve_page_url(page_path: str, base_url: str) -> str:
    """Resolve a page path (or absolute URL) to the URL to fetch."""
    return absolutize(page_path or '/', base_url)
