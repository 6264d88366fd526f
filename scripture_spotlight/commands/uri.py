"""Deep-link URI templates for JW Library and jw.org."""

from urllib.parse import quote

from scripture_spotlight.data.types import (
    BibleVerse,
    DailyText,
    FullTextSearch,
    Help,
    ParsedReference,
    Topic,
    WatchtowerIssue,
)


APP_SCHEME = "jwlibrary"
# Share parameters: source id, English locale, prefer the language setting
SHARE_PARAMS = "srcid=jwlshare&wtlocale=E&prefer=lang"
FINDER_URL = f"{APP_SCHEME}:///finder?{SHARE_PARAMS}"

HELP_URL = "https://judes.club/app/scripture-spotlight"
SEARCH_URL = "https://wol.jw.org/en/wol/s/r1/lp-e"
# https so the link works whichever app scheme is registered
DAILY_TEXT_URL = f"https://www.jw.org/finder?{SHARE_PARAMS}&alias=daily-text"

STUDY_BIBLE_PUB = "nwtsty"


def build_uri(ref: ParsedReference) -> str:
    """Render a parsed reference as a URI.

    Args:
        ref: One of the ParsedReference variants

    Returns:
        The deep link for the reference

    Raises:
        TypeError: ref is not a ParsedReference variant
    """
    if isinstance(ref, Help):
        return HELP_URL
    if isinstance(ref, BibleVerse):
        return f"{FINDER_URL}&bible={ref.code}&pub={STUDY_BIBLE_PUB}"
    if isinstance(ref, WatchtowerIssue):
        return f"{FINDER_URL}&pub={ref.pub_code}&issue={ref.issue}"
    if isinstance(ref, Topic):
        return f"{FINDER_URL}&docid={ref.document_id}"
    if isinstance(ref, FullTextSearch):
        return f"{SEARCH_URL}?q={quote(ref.term, safe=':/')}&p=par&r=occ&st=a"
    if isinstance(ref, DailyText):
        return f"{DAILY_TEXT_URL}&date={ref.iso_date}"
    raise TypeError(f"Not a parsed reference: {ref!r}")
