"""Tests for the decoder."""

from datetime import date

import pytest

from scripture_spotlight.commands.decoder import Decoder
from scripture_spotlight.data.topics import TopicIndex
from scripture_spotlight.data.types import TopicDocument, WatchtowerIssue


FINDER = "jwlibrary:///finder?srcid=jwlshare&wtlocale=E&prefer=lang"


def bible_uri(code: str) -> str:
    return f"{FINDER}&bible={code}&pub=nwtsty"


@pytest.fixture
def decoder():
    topics = TopicIndex.from_documents([
        TopicDocument(1200003717, "Respect", "Honor"),
    ])
    return Decoder(topics, today=lambda: date(2026, 1, 5))


class TestDecode:
    """Test free-text decoding end to end."""

    def test_no_match(self, decoder):
        """Unrecognised input decodes to None."""
        assert decoder.decode("") is None
        assert decoder.decode("   ") is None
        assert decoder.decode("xyz123") is None

    def test_help(self, decoder):
        assert decoder.decode("help") == "https://judes.club/app/scripture-spotlight"
        assert decoder.decode("  HELP ") == "https://judes.club/app/scripture-spotlight"

    def test_john(self, decoder):
        assert decoder.decode("John 3:16") == bible_uri("43003016")

    def test_first_peter(self, decoder):
        assert decoder.decode("1 pet 2:9") == bible_uri("60002009")

    def test_chapter_and_verse_omitted(self, decoder):
        assert decoder.decode("Psalms") == bible_uri("19000000")
        assert decoder.decode("Psalms 23") == bible_uri("19023000")

    def test_watchtower(self, decoder):
        short = decoder.decode("wt sep 2025")
        assert short == decoder.decode("wt september 2025")
        assert short == f"{FINDER}&pub=wp25&issue=202509"

    def test_watchtower_unknown_month(self, decoder):
        assert decoder.decode("wt xx 2025") is None

    @pytest.mark.parametrize("text", ["dt", "daily", "Daily Text", "dailytext"])
    def test_daily_text(self, decoder, text):
        assert decoder.decode(text) == (
            "https://www.jw.org/finder?srcid=jwlshare&wtlocale=E&prefer=lang"
            "&alias=daily-text&date=20260105"
        )

    def test_search(self, decoder):
        assert decoder.decode("wol grace") == (
            "https://wol.jw.org/en/wol/s/r1/lp-e?q=grace&p=par&r=occ&st=a"
        )

    def test_topic(self, decoder):
        assert decoder.decode("i respect") == f"{FINDER}&docid=1200003717"

    def test_topic_miss(self, decoder):
        assert decoder.decode("i patience") is None

    def test_topic_with_empty_index(self):
        decoder = Decoder(TopicIndex(sources=[]))
        assert decoder.decode("i respect") is None

    def test_idempotent(self, decoder):
        """Repeated calls give the same link."""
        assert decoder.decode("i respect") == decoder.decode("i respect")
        assert decoder.decode("John 3:16") == decoder.decode("John 3:16")

    def test_oversized_verse(self, decoder):
        """Numbers too long to convert end the decode with no link."""
        assert decoder.decode("john 3:" + "9" * 5000) is None

    def test_oversized_chapter(self, decoder):
        assert decoder.decode("john " + "1" * 5000) is None

    @pytest.mark.parametrize("text", [
        "john 3:" + "9" * 5000,
        "john " + "1" * 5000,
        "john \u0969:\u0967\u096c",
        "::",
        "wt",
        "wt sep " + "2" * 5000,
        "i " + "\x00",
        "wol " + "%" * 10,
        "1 2:3",
        "\ufeff",
    ])
    def test_never_raises(self, decoder, text):
        """Hostile input gives a link or None, never an exception."""
        result = decoder.decode(text)
        assert result is None or isinstance(result, str)

    def test_non_ascii_digits(self, decoder):
        """Devanagari digits convert like ASCII ones."""
        assert decoder.decode("john \u0969:\u0967\u096c") == bible_uri("43003016")

    def test_parse(self, decoder):
        assert decoder.parse("wt may 2024") == WatchtowerIssue("2024", "05")


class TestDecodeStructured:
    """Test shortcut parameters with range clamping."""

    def test_verse(self, decoder):
        assert decoder.decode_structured("bible", 43, 3, 16) == bible_uri("43003016")

    def test_defaults(self, decoder):
        """Missing chapter and verse render as 000."""
        assert decoder.decode_structured("bible", 1) == bible_uri("01000000")

    def test_chapter_clamped_to_book(self, decoder):
        assert decoder.decode_structured("bible", 43, 40, 1) == bible_uri("43021001")

    def test_negative_values(self, decoder):
        assert decoder.decode_structured("bible", 43, -3, -1) == bible_uri("43000000")

    def test_verse_cap(self, decoder):
        assert decoder.decode_structured("bible", 19, 119, 999) == bible_uri("19119200")

    def test_book_by_name(self, decoder):
        assert decoder.decode_structured("bible", "1 Peter", 2, 9) == bible_uri("60002009")
        assert decoder.decode_structured("bible", "rev", 1, 1) == bible_uri("66001001")
        assert decoder.decode_structured("bible", "60", 2, 9) == bible_uri("60002009")

    def test_missing_or_unknown_book(self, decoder):
        assert decoder.decode_structured("bible", None, 1, 1) is None
        assert decoder.decode_structured("bible", 67, 1, 1) is None
        assert decoder.decode_structured("bible", "xyz") is None

    def test_bool_is_not_a_book(self, decoder):
        assert decoder.decode_structured("bible", True, 1, 1) is None
        assert decoder.decode_structured("bible", False) is None

    def test_oversized_book_number(self, decoder):
        assert decoder.decode_structured("bible", "6" * 5000) is None

    @pytest.mark.parametrize("source", ["watchtower", "insight", "wol"])
    def test_unlinked_sources(self, decoder, source):
        assert decoder.decode_structured(source, 43, 3, 16) is None
