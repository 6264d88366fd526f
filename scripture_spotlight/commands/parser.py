"""Reference grammar: normalizer and the ordered matcher chain."""

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional, Tuple

from scripture_spotlight.data.canon import resolve_book, resolve_month
from scripture_spotlight.data.topics import TopicIndex
from scripture_spotlight.data.types import (
    BibleVerse,
    DailyText,
    FullTextSearch,
    Help,
    ParsedReference,
    Topic,
    WatchtowerIssue,
)


HELP_TOKEN = "help"
DAILY_TEXT_TOKENS = ("dt", "daily", "daily text", "dailytext")

TOPIC_PATTERN = re.compile(r"^i\s+(.+)$")
WATCHTOWER_PATTERN = re.compile(r"^wt\s+([a-z]{2,})\s+(\d{4})$")
SEARCH_PATTERN = re.compile(r"^wol\s+(.+)$")
BIBLE_PATTERN = re.compile(r"^([1-3]?\s?[a-z\s]+)(?:\s+(\d+)(?::(\d+))?)?$")


@dataclass
class ParseContext:
    """Collaborators the matchers may consult."""

    topics: TopicIndex = field(default_factory=lambda: TopicIndex(sources=[]))
    today: Callable[[], date] = date.today


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a matcher whose pattern applied.

    reference is None when the input had the matcher's shape but could not
    be resolved (unknown book, month or topic); the chain stops there.
    """

    matcher: str
    reference: Optional[ParsedReference]


Matcher = Callable[[str, ParseContext], Optional[MatchResult]]


def normalize(raw: str) -> str:
    """Trim and lowercase raw input."""
    return raw.strip().lower()


def match_help(text: str, ctx: ParseContext) -> Optional[MatchResult]:
    """help - exact token."""
    if text == HELP_TOKEN:
        return MatchResult("help", Help())
    return None


def match_topic(text: str, ctx: ParseContext) -> Optional[MatchResult]:
    """i <term> - e.g. "i respect", "i  resp"."""
    match = TOPIC_PATTERN.match(text)
    if not match:
        return None
    term = match.group(1).strip()
    document_id = ctx.topics.lookup(term)
    if document_id is None:
        return MatchResult("topic", None)
    return MatchResult("topic", Topic(document_id))


def match_daily_text(text: str, ctx: ParseContext) -> Optional[MatchResult]:
    """dt | daily | daily text | dailytext"""
    if text not in DAILY_TEXT_TOKENS:
        return None
    # Gregorian calendar date; strftime digits do not depend on the locale
    return MatchResult("daily_text", DailyText(ctx.today().strftime("%Y%m%d")))


def match_watchtower(text: str, ctx: ParseContext) -> Optional[MatchResult]:
    """wt <month> <yyyy> - e.g. "wt sep 2025", "wt september 2025"."""
    match = WATCHTOWER_PATTERN.match(text)
    if not match:
        return None
    month_code = resolve_month(match.group(1))
    if month_code is None:
        return MatchResult("watchtower", None)
    return MatchResult("watchtower", WatchtowerIssue(year=match.group(2), month_code=month_code))


def match_search(text: str, ctx: ParseContext) -> Optional[MatchResult]:
    """wol <term>"""
    match = SEARCH_PATTERN.match(text)
    if not match:
        return None
    return MatchResult("search", FullTextSearch(match.group(1).strip()))


def match_bible(text: str, ctx: ParseContext) -> Optional[MatchResult]:
    """<book> [<chapter>[:<verse>]] - e.g. "john 3:16", "1 pet 2:9", "ps 23"."""
    match = BIBLE_PATTERN.match(text)
    if not match:
        return None

    book_text = match.group(1).strip().replace(".", "")
    book = resolve_book(book_text)
    if book is None:
        return MatchResult("bible", None)

    try:
        chapter = int(match.group(2)) if match.group(2) else 0
        verse = int(match.group(3)) if match.group(3) else 0
    except ValueError:
        # digit runs past the int conversion limit
        return MatchResult("bible", None)
    return MatchResult("bible", BibleVerse(book.ordinal, chapter, verse))


# Priority order; the first matcher whose pattern applies decides
MATCHERS: List[Tuple[str, Matcher]] = [
    ("help", match_help),
    ("topic", match_topic),
    ("daily_text", match_daily_text),
    ("watchtower", match_watchtower),
    ("search", match_search),
    ("bible", match_bible),
]


def match_reference(text: str, ctx: Optional[ParseContext] = None) -> Optional[MatchResult]:
    """Run the matcher chain over normalized text.

    Returns:
        MatchResult of the first matcher that applied, or None
    """
    if not text:
        return None
    ctx = ctx or ParseContext()
    for _, matcher in MATCHERS:
        result = matcher(text, ctx)
        if result is not None:
            return result
    return None


def resolve(text: str, ctx: Optional[ParseContext] = None) -> Optional[ParsedReference]:
    """Resolve normalized text to a single reference.

    Args:
        text: Output of normalize()
        ctx: Topic index and clock; defaults to an empty index and today

    Returns:
        ParsedReference or None
    """
    result = match_reference(text, ctx)
    return result.reference if result else None


def get_matcher_names() -> List[str]:
    """Get the matcher names in priority order."""
    return [name for name, _ in MATCHERS]
