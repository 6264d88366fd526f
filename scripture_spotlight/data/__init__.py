"""Data types, canon metadata and the topical index."""

from scripture_spotlight.data.types import (
    BibleVerse,
    DailyText,
    FullTextSearch,
    Help,
    ParsedReference,
    Topic,
    TopicDocument,
    WatchtowerIssue,
)
from scripture_spotlight.data.canon import (
    BibleBookEntry,
    BOOK_ORDER,
    CONSERVATIVE_MAX_VERSE,
    MONTHS,
    book_by_ordinal,
    book_chapters,
    resolve_book,
    resolve_month,
)
from scripture_spotlight.data.topics import TopicIndex

__all__ = [
    "BibleVerse",
    "DailyText",
    "FullTextSearch",
    "Help",
    "ParsedReference",
    "Topic",
    "TopicDocument",
    "WatchtowerIssue",
    "BibleBookEntry",
    "BOOK_ORDER",
    "CONSERVATIVE_MAX_VERSE",
    "MONTHS",
    "book_by_ordinal",
    "book_chapters",
    "resolve_book",
    "resolve_month",
    "TopicIndex",
]
