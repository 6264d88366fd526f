"""Topical document index (Insight) with fuzzy title lookup."""

import json
import logging
import threading
from pathlib import Path
from typing import List, Optional, Sequence, Union

from scripture_spotlight.data.types import TopicDocument

logger = logging.getLogger(__name__)

# Shipped alongside the package when bundled
BUNDLED_INDEX_PATH = Path(__file__).parent / "Insight.json"
# Lets the index be iterated on without rebuilding the package
FALLBACK_INDEX_PATH = Path.home() / "Insight" / "Insight.json"

PathLike = Union[str, Path]


def default_sources(extra: Sequence[PathLike] = ()) -> List[Path]:
    """Return the ordered list of index sources, configured paths first."""
    sources = [Path(p).expanduser() for p in extra]
    sources.extend([BUNDLED_INDEX_PATH, FALLBACK_INDEX_PATH])
    return sources


def _read_documents(path: Path) -> Optional[List[TopicDocument]]:
    """Read one index source, or None when it is missing or malformed."""
    if not path.exists():
        return None

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise TypeError(f"expected a list of documents, got {type(data).__name__}")
        return [TopicDocument.from_dict(item) for item in data]
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read topic index %s: %s", path, e)
    except (KeyError, TypeError, AttributeError) as e:
        logger.warning("Topic index decode error in %s: %s", path, e)
    return None


class TopicIndex:
    """Read-only collection of topical documents.

    The documents are loaded on first access from the first source that
    exists and decodes; when none does the index stays empty. Loading
    happens at most once, also under concurrent first access.
    """

    def __init__(self, sources: Optional[Sequence[PathLike]] = None) -> None:
        self._sources = [Path(p) for p in sources] if sources is not None else default_sources()
        self._documents: List[TopicDocument] = []
        self._loaded = False
        self._lock = threading.Lock()

    @classmethod
    def from_documents(cls, documents: Sequence[TopicDocument]) -> "TopicIndex":
        """Create an already-loaded index from in-memory documents."""
        index = cls(sources=[])
        index._documents = list(documents)
        index._loaded = True
        return index

    @property
    def loaded(self) -> bool:
        """Whether load() has run."""
        return self._loaded

    @property
    def documents(self) -> List[TopicDocument]:
        """Get all documents, loading them if needed."""
        self.load()
        return self._documents.copy()

    def __len__(self) -> int:
        self.load()
        return len(self._documents)

    def load(self) -> None:
        """Load the documents from the first usable source."""
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            for path in self._sources:
                documents = _read_documents(path)
                if documents is not None:
                    self._documents = documents
                    logger.info("Loaded %d topic documents from %s", len(documents), path)
                    break
            else:
                logger.info("No topic index found; topic lookups will not match")
            self._loaded = True

    def lookup(self, query: str) -> Optional[int]:
        """Find a document id for a search term.

        Prefers a title that starts with the term, then a title that
        contains it, then a table-of-contents title that contains it.

        Args:
            query: Search term

        Returns:
            MEPS document id of the first hit or None
        """
        term = query.strip().lower()
        if not term:
            return None

        self.load()
        for doc in self._documents:
            if doc.title.lower().startswith(term):
                return doc.document_id
        for doc in self._documents:
            if term in doc.title.lower():
                return doc.document_id
        for doc in self._documents:
            if term in (doc.toc_title or "").lower():
                return doc.document_id
        return None
