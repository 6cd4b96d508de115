"""Locates live-data literals embedded in inline script text.

The remote page ships its news cards and match list as JSON-like
literals written straight into <script> blocks, sometimes plainly
(``newsCardsData: [...]``), sometimes inside an escaped string payload
(``\\"matchesList\\":{...}``). Each data kind is looked up with an
ordered list of candidate strategies; the first candidate that parses
and has the expected shape wins.
"""

import json
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

import logfire

CLOSERS = {'[': ']', '{': '}'}

# A strategy yields every parsed value it can find for (script, key, opener)
Strategy = Callable[[str, str, str], Iterator[Any]]


@dataclass(frozen=True)
class DataKind:
    """One embedded data structure the locator knows how to find.

    Attributes:
        name: Snapshot field the result lands in
        keys: Key spellings to look for, in priority order
        opener: '[' if the literal is an array, '{' if an object
        accept: Returns the list to keep, or None if the value has the wrong shape

    """

    name: str
    keys: tuple[str, ...]
    opener: str
    accept: Callable[[Any], list | None]


def _accept_news_cards(value: Any) -> list | None:
    if isinstance(value, list) and value:
        return value
    return None


def _accept_matches(value: Any) -> list | None:
    if isinstance(value, dict) and isinstance(value.get('matches'), list):
        return value['matches']
    return None


# Quoted 'newsCards' spellings only: the bare word is a prefix of newsCardsData
NEWS_CARDS = DataKind(
    name='newsCards',
    keys=('newsCardsData', '"newsCards"', "'newsCards'"),
    opener='[',
    accept=_accept_news_cards,
)
MATCHES_LIST = DataKind(name='matchesList', keys=('matchesList', 'matchList'), opener='{', accept=_accept_matches)


def unescape_literal(text: str) -> str:
    """Undo one level of string escaping around an embedded literal."""
    return text.replace('\\\\', '\\').replace('\\"', '"').replace("\\'", "'")


def _loads(text: str) -> Any | None:
    try:
        return json.loads(text)
    except ValueError:
        return None


def regex_candidates(script: str, key: str, opener: str) -> Iterator[Any]:
    """Yield values captured by a minimal non-greedy key pattern.

    Cheap, but the capture stops at the first closing bracket, so it
    only works for literals without nested brackets of the same kind.
    """
    closer = CLOSERS[opener]
    pattern = re.compile(
        rf'{re.escape(key)}["\']?\s*[:=]\s*({re.escape(opener)}[\s\S]*?{re.escape(closer)})',
    )
    for match in pattern.finditer(script):
        value = _loads(match.group(1))
        if value is not None:
            yield value


def literal_start(text: str, key_end: int, opener: str) -> int:
    """Find the opening bracket of the literal assigned to a key.

    Looks for the first ':' or '=' after the key, then skips whitespace,
    backslashes and further '=' characters.

    Args:
        text: Script text
        key_end: Offset just past the key
        opener: Expected opening bracket

    Returns:
        Offset of the opener, or -1 if something else comes first

    """
    separators = [i for i in (text.find(':', key_end), text.find('=', key_end)) if i != -1]
    if not separators:
        return -1

    for i in range(min(separators) + 1, len(text)):
        char = text[i]
        if char == opener:
            return i
        if not (char.isspace() or char in '\\='):
            return -1
    return -1


def literal_end(text: str, start: int) -> int:
    """Find the end of the bracketed literal opening at ``start``.

    Tracks nesting of the opener's bracket pair. Inside a quoted string
    (single or double, closed only by the same quote) brackets are
    ignored, and a backslash always consumes the next character.

    Args:
        text: Script text
        start: Offset of the opening bracket

    Returns:
        Offset one past the matching closing bracket, or -1 if unbalanced

    """
    opener = text[start]
    closer = CLOSERS[opener]
    depth = 0
    quote: str | None = None
    escaped = False

    for i in range(start, len(text)):
        char = text[i]
        if escaped:
            escaped = False
            continue
        if char == '\\':
            escaped = True
            continue
        if quote:
            if char == quote:
                quote = None
            continue
        if char in '"\'':
            quote = char
        elif char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return i + 1
    return -1


def _scan_text(text: str, key: str, opener: str) -> Iterator[Any]:
    key_index = text.find(key)
    while key_index != -1:
        key_end = key_index + len(key)
        start = literal_start(text, key_end, opener)
        if start != -1:
            end = literal_end(text, start)
            if end != -1:
                span = text[start:end]
                value = _loads(span)
                if value is None:
                    unescaped = unescape_literal(span)
                    if unescaped != span:
                        value = _loads(unescaped)
                if value is not None:
                    yield value
        key_index = text.find(key, key_end)


def scan_candidates(script: str, key: str, opener: str) -> Iterator[Any]:
    """Yield values found by the bracket-balancing scanner.

    Scans the script as-is first. If the script carries escaped quotes
    (a literal serialized inside a JS string), the unescaped script is
    scanned too, so quotes and apostrophes inside values are seen for
    what they are.
    """
    yield from _scan_text(script, key, opener)

    unescaped = unescape_literal(script)
    if unescaped != script:
        yield from _scan_text(unescaped, key, opener)


STRATEGIES: tuple[tuple[str, Strategy], ...] = (
    ('regex', regex_candidates),
    ('scan', scan_candidates),
)


def locate(script: str, kind: DataKind) -> list | None:
    """Find one data kind in one script block.

    Args:
        script: Text of an inline script
        kind: Which structure to look for

    Returns:
        The accepted list, or None if the script does not carry a valid one

    """
    if not script:
        return None
    if not any(key in script for key in kind.keys):
        unescaped = unescape_literal(script)
        if not any(key in unescaped for key in kind.keys):
            return None

    for strategy_name, strategy in STRATEGIES:
        for key in kind.keys:
            for value in strategy(script, key, kind.opener):
                accepted = kind.accept(value)
                if accepted is not None:
                    logfire.debug('Embedded data located', kind=kind.name, key=key, strategy=strategy_name)
                    return accepted
    return None


@dataclass
class EmbeddedData:
    """Live data found across a page's scripts.

    Attributes:
        news_cards: Parsed newsCardsData array, empty if not found
        matches_list: The matches array of matchesList, empty if not found

    """

    news_cards: list = field(default_factory=list)
    matches_list: list = field(default_factory=list)


def scan_scripts(scripts: Iterable[str]) -> EmbeddedData:
    """Run the locator over every script block, first valid match per kind wins.

    Scanning stops as soon as both kinds are found.

    Args:
        scripts: Inline script texts in document order

    Returns:
        EmbeddedData with whatever was found

    """
    found: dict[str, list | None] = {NEWS_CARDS.name: None, MATCHES_LIST.name: None}
    kinds = (NEWS_CARDS, MATCHES_LIST)

    for index, script in enumerate(scripts):
        for kind in kinds:
            if found[kind.name] is not None:
                continue
            result = locate(script, kind)
            if result is not None:
                found[kind.name] = result
                logfire.info('Found embedded data', kind=kind.name, count=len(result), script_index=index)
        if all(value is not None for value in found.values()):
            break

    return EmbeddedData(
        news_cards=found[NEWS_CARDS.name] or [],
        matches_list=found[MATCHES_LIST.name] or [],
    )
