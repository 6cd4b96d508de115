from cricmirror.core.extraction.extractor import SnapshotExtractor
from cricmirror.live import fetch_live_matches, fetch_live_news

HOME = 'https://www.cricbuzz.com/'
NEWS = 'https://www.cricbuzz.com/cricket-news'
SCORES = 'https://www.cricbuzz.com/cricket-match/live-scores'


def test_news_from_homepage(make_fetcher, settings, cricket_page_html, expected_news_cards):
    fetcher = make_fetcher(pages={HOME: cricket_page_html})
    extractor = SnapshotExtractor(settings=settings, fetcher=fetcher)

    assert fetch_live_news(extractor=extractor) == expected_news_cards
    assert fetcher.requested == [HOME]


def test_news_falls_back_to_news_page(make_fetcher, settings, minimal_html, cricket_page_html, expected_news_cards):
    fetcher = make_fetcher(pages={HOME: minimal_html, NEWS: cricket_page_html})
    extractor = SnapshotExtractor(settings=settings, fetcher=fetcher)

    assert fetch_live_news(extractor=extractor) == expected_news_cards
    assert fetcher.requested == [HOME, NEWS]


def test_matches_fall_back_after_failed_homepage(make_fetcher, settings, cricket_page_html, expected_matches):
    fetcher = make_fetcher(pages={SCORES: cricket_page_html})
    extractor = SnapshotExtractor(settings=settings, fetcher=fetcher)

    assert fetch_live_matches(extractor=extractor) == expected_matches
    assert fetcher.requested == [HOME, SCORES]


def test_nothing_anywhere(make_fetcher, settings, minimal_html):
    fetcher = make_fetcher(default=minimal_html)
    extractor = SnapshotExtractor(settings=settings, fetcher=fetcher)

    assert fetch_live_news(extractor=extractor) == []
    assert fetch_live_matches(extractor=extractor) == []
    assert fetcher.requested == [HOME, NEWS, HOME, SCORES]


def test_owned_extractor_is_closed(mocker, make_fetcher, cricket_page_html, expected_matches):
    fetcher = make_fetcher(default=cricket_page_html)
    mocker.patch('cricmirror.core.extraction.extractor.create_fetcher', return_value=fetcher)

    assert fetch_live_matches() == expected_matches
    assert fetcher.closed is True
