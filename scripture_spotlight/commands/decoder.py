"""Decoder: free text or shortcut parameters to a deep-link URI."""

import logging
from datetime import date
from typing import Callable, Optional, Union

from scripture_spotlight.commands.parser import ParseContext, normalize, resolve
from scripture_spotlight.commands.uri import build_uri
from scripture_spotlight.data.canon import (
    BibleBookEntry,
    book_by_ordinal,
    clamp_chapter,
    clamp_verse,
    get_book,
    resolve_book,
)
from scripture_spotlight.data.topics import TopicIndex
from scripture_spotlight.data.types import BibleVerse, ParsedReference

logger = logging.getLogger(__name__)

# Sources a shortcut may ask for; only the Bible is linked so far
SOURCES = ("bible", "watchtower", "insight", "wol")


class Decoder:
    """Turns user input into a single URI.

    The topic index is shared by every decode call and loaded on first use.
    """

    def __init__(
        self,
        topics: Optional[TopicIndex] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.topics = topics if topics is not None else TopicIndex()
        self._context = ParseContext(topics=self.topics, today=today)

    def parse(self, raw: str) -> Optional[ParsedReference]:
        """Parse raw input into a reference without rendering it."""
        return resolve(normalize(raw), self._context)

    def decode(self, raw: str) -> Optional[str]:
        """Decode free text into a URI.

        Args:
            raw: Text as typed, e.g. "John 3:16" or "wt sep 2025"

        Returns:
            URI string or None when nothing matched
        """
        ref = self.parse(raw)
        if ref is None:
            logger.debug("No match for input: %r", raw)
            return None
        uri = build_uri(ref)
        logger.debug("Decoded %r to %s", raw, uri)
        return uri

    def decode_structured(
        self,
        source: str = "bible",
        book: Union[int, str, None] = None,
        chapter: Optional[int] = None,
        verse: Optional[int] = None,
    ) -> Optional[str]:
        """Build a URI from shortcut parameters, bypassing the grammar.

        Chapter is clamped to the book's chapter count and verse to
        CONSERVATIVE_MAX_VERSE; negative values become 0.

        Args:
            source: One of SOURCES
            book: Book ordinal (1-66) or name
            chapter: Chapter number, None for the whole book
            verse: Verse number, None for the whole chapter

        Returns:
            URI string or None
        """
        if source != "bible":
            logger.debug("Source %r is not linked", source)
            return None

        entry = _lookup_book(book)
        if entry is None:
            logger.debug("Unknown book: %r", book)
            return None

        ref = BibleVerse(
            book_ordinal=entry.ordinal,
            chapter=clamp_chapter(entry.ordinal, chapter),
            verse=clamp_verse(verse),
        )
        return build_uri(ref)


def _lookup_book(book: Union[int, str, None]) -> Optional[BibleBookEntry]:
    """Find a book by ordinal, canonical key or fragment."""
    # bool is an int subclass but never a book
    if book is None or isinstance(book, bool):
        return None
    if isinstance(book, int):
        return book_by_ordinal(book)
    text = normalize(book).replace(".", "")
    if text.isdecimal():
        try:
            return book_by_ordinal(int(text))
        except ValueError:
            return None
    return get_book(text) or resolve_book(text)
