import pytest

from cricmirror.config import MirrorSettings
from cricmirror.core.fetcher.base import HTMLFetcher
from cricmirror.models.results import FetchResult


class StubFetcher(HTMLFetcher):
    """Serves canned HTML per URL and records what was requested."""

    def __init__(self, pages: dict[str, str] | None = None, default: str | None = None):
        self.pages = pages or {}
        self.default = default
        self.requested: list[str] = []
        self.closed = False

    def fetch(self, url: str) -> FetchResult:
        self.requested.append(url)
        html = self.pages.get(url, self.default)
        if html is None:
            return FetchResult(url=url, status_code=404, error='HTTP 404')
        return FetchResult(url=url, html=html, status_code=200)

    def close(self):
        self.closed = True


@pytest.fixture
def make_fetcher():
    return StubFetcher


@pytest.fixture
def settings():
    return MirrorSettings()


@pytest.fixture
def minimal_html():
    return '<html><body><div class="a b" id="x">Hello World!!</div></body></html>'


@pytest.fixture
def cricket_page_html():
    return r"""<!DOCTYPE html>
<html lang="en">
<head>
  <title>Live Cricket Scores</title>
  <meta charset="utf-8">
  <meta name="description" content="Live cricket scores and news">
  <meta property="og:title" content="Cricbuzz">
  <link rel="stylesheet" href="/styles/main.css" media="screen">
  <link rel="stylesheet" href="https://cdn.example.com/vendor.css">
  <link rel="icon" href="/favicon.ico">
  <style type="text/css">.cb-nav { color: red; }</style>
  <script src="/js/app.js"></script>
  <script type="application/ld+json">{"@type": "WebSite", "name": "Cricbuzz"}</script>
  <script type="application/ld+json">{not valid json</script>
  <script>
    var pageConfig = {"theme": "dark"};
    let counter = 0;
    function initMenu() { return true; }
    function initMenu() { return false; }
  </script>
  <script>
    window.__STATE__ = {"newsCardsData": [{"id": 101, "headline": "India win by 5 wickets", "tags": ["IND", "AUS"]}, {"id": 102, "headline": "Rain delays \"final\" day"}], "matchesList": {"matches": [{"matchId": 9, "teams": {"t1": "IND", "t2": "AUS"}}], "total": 1}};
  </script>
</head>
<body class="cb-body">
  <nav id="main-nav" class="cb-nav cb-sticky" data-menu="primary">
    <a href="/cricket-news" class="cb-nav-link">News</a>
    <a href="https://www.cricbuzz.com/live" class="cb-nav-link">Live</a>
  </nav>
  <div id="hero" class="cb-hero" style="background: #fff" data-menu="hero">
    <img src="/images/logo.png" alt="Cricbuzz" title="Logo" class="cb-logo" id="logo">
    <img data-src="/images/lazy.jpg" alt="Lazy">
    <img src="https://static.example.com/banner.jpg">
    <img alt="no source">
    <p class="cb-text">Latest updates from the ground.</p>
  </div>
</body>
</html>
"""


@pytest.fixture
def expected_news_cards():
    return [
        {'id': 101, 'headline': 'India win by 5 wickets', 'tags': ['IND', 'AUS']},
        {'id': 102, 'headline': 'Rain delays "final" day'},
    ]


@pytest.fixture
def expected_matches():
    return [{'matchId': 9, 'teams': {'t1': 'IND', 't2': 'AUS'}}]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""
    for item in items:
        file_path = str(item.path)

        if '/tests/integration/' in file_path:
            item.add_marker(pytest.mark.integration)
        elif '/tests/unit/' in file_path:
            item.add_marker(pytest.mark.unit)
