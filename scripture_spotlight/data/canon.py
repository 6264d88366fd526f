"""Bible canon metadata - book keys, ordinals, chapters - and month codes."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class BibleBookEntry:
    """Metadata for a Bible book."""

    key: str
    ordinal: int
    chapters: int


# Declaration order is the lookup order for substring matching
_BOOK_TABLE: Sequence[BibleBookEntry] = (
    # Hebrew-Aramaic Scriptures
    BibleBookEntry("genesis", 1, 50),
    BibleBookEntry("exodus", 2, 40),
    BibleBookEntry("leviticus", 3, 27),
    BibleBookEntry("numbers", 4, 36),
    BibleBookEntry("deuteronomy", 5, 34),
    BibleBookEntry("joshua", 6, 24),
    BibleBookEntry("judges", 7, 21),
    BibleBookEntry("ruth", 8, 4),
    BibleBookEntry("1 samuel", 9, 31),
    BibleBookEntry("2 samuel", 10, 24),
    BibleBookEntry("1 kings", 11, 22),
    BibleBookEntry("2 kings", 12, 25),
    BibleBookEntry("1 chronicles", 13, 29),
    BibleBookEntry("2 chronicles", 14, 36),
    BibleBookEntry("ezra", 15, 10),
    BibleBookEntry("nehemiah", 16, 13),
    BibleBookEntry("esther", 17, 10),
    BibleBookEntry("job", 18, 42),
    BibleBookEntry("psalms", 19, 150),
    BibleBookEntry("proverbs", 20, 31),
    BibleBookEntry("ecclesiastes", 21, 12),
    BibleBookEntry("song of solomon", 22, 8),
    BibleBookEntry("isaiah", 23, 66),
    BibleBookEntry("jeremiah", 24, 52),
    BibleBookEntry("lamentations", 25, 5),
    BibleBookEntry("ezekiel", 26, 48),
    BibleBookEntry("daniel", 27, 12),
    BibleBookEntry("hosea", 28, 14),
    BibleBookEntry("joel", 29, 3),
    BibleBookEntry("amos", 30, 9),
    BibleBookEntry("obadiah", 31, 1),
    BibleBookEntry("jonah", 32, 4),
    BibleBookEntry("micah", 33, 7),
    BibleBookEntry("nahum", 34, 3),
    BibleBookEntry("habakkuk", 35, 3),
    BibleBookEntry("zephaniah", 36, 3),
    BibleBookEntry("haggai", 37, 2),
    BibleBookEntry("zechariah", 38, 14),
    BibleBookEntry("malachi", 39, 4),
    # Christian Greek Scriptures
    BibleBookEntry("matthew", 40, 28),
    BibleBookEntry("mark", 41, 16),
    BibleBookEntry("luke", 42, 24),
    BibleBookEntry("john", 43, 21),
    BibleBookEntry("acts", 44, 28),
    BibleBookEntry("romans", 45, 16),
    BibleBookEntry("1 corinthians", 46, 16),
    BibleBookEntry("2 corinthians", 47, 13),
    BibleBookEntry("galatians", 48, 6),
    BibleBookEntry("ephesians", 49, 6),
    BibleBookEntry("philippians", 50, 4),
    BibleBookEntry("colossians", 51, 4),
    BibleBookEntry("1 thessalonians", 52, 5),
    BibleBookEntry("2 thessalonians", 53, 3),
    BibleBookEntry("1 timothy", 54, 6),
    BibleBookEntry("2 timothy", 55, 4),
    BibleBookEntry("titus", 56, 3),
    BibleBookEntry("philemon", 57, 1),
    BibleBookEntry("hebrews", 58, 13),
    BibleBookEntry("james", 59, 5),
    BibleBookEntry("1 peter", 60, 5),
    BibleBookEntry("2 peter", 61, 3),
    BibleBookEntry("1 john", 62, 5),
    BibleBookEntry("2 john", 63, 1),
    BibleBookEntry("3 john", 64, 1),
    BibleBookEntry("jude", 65, 1),
    BibleBookEntry("revelation", 66, 22),
)

# Book order list
BOOK_ORDER: List[str] = [book.key for book in _BOOK_TABLE]

# Lookup tables
_BOOK_BY_KEY: Dict[str, BibleBookEntry] = {book.key: book for book in _BOOK_TABLE}
_BOOK_BY_ORDINAL: Dict[int, BibleBookEntry] = {book.ordinal: book for book in _BOOK_TABLE}

# Full month names in calendar order with their issue codes
MONTHS: Sequence[Tuple[str, str]] = (
    ("january", "01"),
    ("february", "02"),
    ("march", "03"),
    ("april", "04"),
    ("may", "05"),
    ("june", "06"),
    ("july", "07"),
    ("august", "08"),
    ("september", "09"),
    ("october", "10"),
    ("november", "11"),
    ("december", "12"),
)

# Verse cap used where no per-chapter verse counts are available
CONSERVATIVE_MAX_VERSE = 200


def all_books() -> List[BibleBookEntry]:
    """Return every book in canonical order."""
    return list(_BOOK_TABLE)


def get_book(key: str) -> Optional[BibleBookEntry]:
    """Get a book by its canonical key."""
    return _BOOK_BY_KEY.get(key)


def book_by_ordinal(ordinal: int) -> Optional[BibleBookEntry]:
    """Get a book by its 1-based position in the canon."""
    return _BOOK_BY_ORDINAL.get(ordinal)


def book_chapters(ordinal: int) -> int:
    """Return the number of chapters in a book, 0 if unknown."""
    book = _BOOK_BY_ORDINAL.get(ordinal)
    return book.chapters if book else 0


def resolve_book(text: str) -> Optional[BibleBookEntry]:
    """Resolve user text to a book.

    A book matches when its canonical key contains the text, so "jo" finds
    "joshua" before "job" or "john". The first match in canonical order wins.

    Args:
        text: Lowercase book fragment, e.g. "1 pet" or "gen"

    Returns:
        Matching BibleBookEntry or None
    """
    if not text:
        return None
    for book in _BOOK_TABLE:
        if text in book.key:
            return book
    return None


def resolve_month(text: str) -> Optional[str]:
    """Resolve a month name or abbreviation to its 2-digit code."""
    if not text:
        return None
    for name, code in MONTHS:
        if text in name:
            return code
    return None


def clamp_chapter(ordinal: int, chapter: Optional[int]) -> int:
    """Clamp a chapter number to [0, chapter count of the book]."""
    safe = chapter or 0
    if safe < 0:
        return 0
    max_chapter = book_chapters(ordinal)
    if max_chapter > 0 and safe > max_chapter:
        return max_chapter
    return safe


def clamp_verse(verse: Optional[int]) -> int:
    """Clamp a verse number to [0, CONSERVATIVE_MAX_VERSE]."""
    safe = verse or 0
    if safe < 0:
        return 0
    return min(safe, CONSERVATIVE_MAX_VERSE)
