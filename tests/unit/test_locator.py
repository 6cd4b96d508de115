import json

import pytest

from cricmirror.core.extraction.locator import (
    MATCHES_LIST,
    NEWS_CARDS,
    literal_end,
    literal_start,
    locate,
    regex_candidates,
    scan_candidates,
    scan_scripts,
    unescape_literal,
)


@pytest.fixture
def nested_cards():
    return [
        {'id': 1, 'title': 'He said "hi"', 'meta': {'tags': ['a', 'b'], 'n': {'deep': [1, [2]]}}},
        {'id': 2, 'title': "India's win", 'path': 'C:\\scores\\live'},
    ]


def test_news_cards_with_nested_values_and_escaped_quotes(nested_cards):
    script = f'window.__DATA__ = {{ newsCardsData: {json.dumps(nested_cards)}, other: 1 }};'

    assert locate(script, NEWS_CARDS) == nested_cards


def test_matches_list_returns_only_matches_array():
    matches = [{'id': 7, 'teams': ['IND', 'AUS'], 'state': {'score': '245/3'}}]
    script = f'var matchesList = {json.dumps({"matches": matches, "other": {"x": [1, 2]}})};'

    assert locate(script, MATCHES_LIST) == matches


def test_scan_keeps_brackets_inside_strings():
    script = 'newsCardsData: [ [1,2], {"a":"]"} , 3]'

    assert locate(script, NEWS_CARDS) == [[1, 2], {'a': ']'}, 3]


def test_regex_fast_path_handles_flat_literal():
    script = 'const newsCardsData = [1, 2, 3];'

    assert list(regex_candidates(script, 'newsCardsData', '[')) == [[1, 2, 3]]
    assert locate(script, NEWS_CARDS) == [1, 2, 3]


def test_regex_fast_path_gives_up_on_nested_literal():
    script = 'newsCardsData: [[1, 2], [3]]'

    assert list(regex_candidates(script, 'newsCardsData', '[')) == []
    assert list(scan_candidates(script, 'newsCardsData', '[')) == [[[1, 2], [3]]]


def test_literal_embedded_in_escaped_string_payload(nested_cards):
    cards = [{'id': 3, 'headline': "Kohli's century", 'links': ['/a', '/b']}]
    payload = json.dumps(json.dumps({'newsCardsData': cards, 'matchesList': {'matches': [{'id': 1}]}}))
    script = f'self.__next_f.push([1,{payload}])'

    assert '\\"newsCardsData\\"' in script
    assert locate(script, NEWS_CARDS) == cards
    assert locate(script, MATCHES_LIST) == [{'id': 1}]


def test_legacy_match_list_alias():
    script = 'data = {"matchList": {"matches": [{"id": 11}]}}'

    assert locate(script, MATCHES_LIST) == [{'id': 11}]


def test_key_in_comment_is_rejected():
    script = '// newsCardsData: filled in below\nvar x = 1;'

    assert locate(script, NEWS_CARDS) is None


def test_key_inside_unrelated_string_is_rejected():
    script = 'var label = "newsCardsData = [not json]";'

    assert locate(script, NEWS_CARDS) is None


def test_later_occurrence_in_same_script_is_found():
    script = '/* newsCardsData: [broken */ var state = {"newsCardsData": [{"id": 5}]};'

    assert locate(script, NEWS_CARDS) == [{'id': 5}]


@pytest.mark.parametrize(
    'script',
    [
        'newsCardsData: []',
        'newsCardsData: {"id": 1}',
        'newsCardsData = "nothing"',
    ],
)
def test_news_cards_shape_check(script):
    assert locate(script, NEWS_CARDS) is None


@pytest.mark.parametrize(
    'script',
    [
        'matchesList = {"foo": 1}',
        'matchesList = {"matches": "none"}',
        'matchesList = [1, 2]',
    ],
)
def test_matches_shape_check(script):
    assert locate(script, MATCHES_LIST) is None


def test_script_without_keys_is_skipped():
    assert locate('console.log("hello")', NEWS_CARDS) is None
    assert locate('', MATCHES_LIST) is None


def test_literal_start_skips_whitespace_and_backslashes():
    text = 'key\\": \\[1]'

    assert literal_start(text, 3, '[') == text.index('[')


def test_literal_start_rejects_other_values():
    assert literal_start('key: 42, other: [1]', 3, '[') == -1
    assert literal_start('key with no separator', 3, '[') == -1


def test_literal_end_tracks_quotes_of_both_kinds():
    text = """[{"a": "it's ]"}, ['x]', "y"]] trailing"""

    assert text[: literal_end(text, 0)] == """[{"a": "it's ]"}, ['x]', "y"]]"""


def test_literal_end_unbalanced():
    assert literal_end('[1, [2, 3]', 0) == -1


def test_unescape_literal():
    assert unescape_literal('{\\"a\\": \\"b\\\\\\"c\\"}') == '{"a": "b\\"c"}'
    assert unescape_literal("\\'x\\'") == "'x'"


def test_scan_scripts_first_valid_wins():
    scripts = [
        'nothing here',
        'newsCardsData = [1]',
        'newsCardsData = [1, 2, 3]; matchesList = {"matches": [{"id": 2}]}',
        'matchesList = {"matches": [{"id": 3}, {"id": 4}]}',
    ]

    embedded = scan_scripts(scripts)

    assert embedded.news_cards == [1]
    assert embedded.matches_list == [{'id': 2}]


def test_scan_scripts_stops_once_both_found(mocker):
    spy = mocker.patch('cricmirror.core.extraction.locator.locate', wraps=locate)
    scripts = ['newsCardsData = [1]; matchesList = {"matches": []}', 'newsCardsData = [2]']

    embedded = scan_scripts(scripts)

    assert embedded.news_cards == [1]
    assert embedded.matches_list == []
    assert spy.call_count == 2


def test_scan_scripts_nothing_found():
    embedded = scan_scripts(['var a = 1;', 'function f() {}'])

    assert embedded.news_cards == []
    assert embedded.matches_list == []


@pytest.mark.parametrize(
    'script',
    [
        'window.__S__ = {"newsCards": [{"id": 1, "t": "x"}]};',
        "window.__S__ = {'newsCards': [{\"id\": 1, \"t\": \"x\"}]};",
        'self.__next_f.push([1,"{\\"newsCards\\": [{\\"id\\": 1, \\"t\\": \\"x\\"}]}"])',
    ],
)
def test_quoted_news_cards_alias(script):
    assert locate(script, NEWS_CARDS) == [{'id': 1, 't': 'x'}]
    assert scan_scripts([script]).news_cards == [{'id': 1, 't': 'x'}]


def test_news_cards_data_wins_over_alias():
    script = '{"newsCards": [{"id": 1}], "newsCardsData": [{"id": 2}]}'

    assert locate(script, NEWS_CARDS) == [{'id': 2}]


def test_bare_news_cards_word_is_not_a_key():
    assert locate('newsCards = [{"id": 1}]', NEWS_CARDS) is None
