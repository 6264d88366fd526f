"""Data types for scripture-spotlight."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class TopicDocument:
    """A topical document from the Insight index."""

    document_id: int
    title: str
    toc_title: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "TopicDocument":
        """Create from a decoded JSON record.

        Raises:
            KeyError: A required field is missing
            TypeError: A field has the wrong type
        """
        document_id = data["MepsDocumentId"]
        title = data["Title"]
        toc_title = data.get("TocTitle")
        # bool is an int subclass but never a valid id
        if not isinstance(document_id, int) or isinstance(document_id, bool):
            raise TypeError(f"MepsDocumentId must be an integer, got {document_id!r}")
        if not isinstance(title, str):
            raise TypeError(f"Title must be a string, got {title!r}")
        if toc_title is not None and not isinstance(toc_title, str):
            raise TypeError(f"TocTitle must be a string, got {toc_title!r}")
        return cls(document_id=document_id, title=title, toc_title=toc_title)


@dataclass(frozen=True)
class Help:
    """The help page."""


@dataclass(frozen=True)
class Topic:
    """A topical-index document."""

    document_id: int


@dataclass(frozen=True)
class DailyText:
    """The daily text for a date."""

    iso_date: str  # YYYYMMDD


@dataclass(frozen=True)
class WatchtowerIssue:
    """A study edition issue of The Watchtower."""

    year: str  # YYYY
    month_code: str  # MM

    @property
    def pub_code(self) -> str:
        """Return the publication symbol, e.g. "wp25"."""
        return f"wp{self.year[-2:]}"

    @property
    def issue(self) -> str:
        """Return the issue key, e.g. "202509"."""
        return f"{self.year}{self.month_code}"


@dataclass(frozen=True)
class FullTextSearch:
    """A full-text search for a term."""

    term: str


@dataclass(frozen=True)
class BibleVerse:
    """A Bible location; 0 means chapter or verse was not given."""

    book_ordinal: int
    chapter: int = 0
    verse: int = 0

    @property
    def code(self) -> str:
        """Return the BBCCCVVV location code."""
        return f"{self.book_ordinal:02d}{self.chapter:03d}{self.verse:03d}"


ParsedReference = Union[Help, Topic, DailyText, WatchtowerIssue, FullTextSearch, BibleVerse]
