"""Reference grammar, URI templates and the decoder."""

from scripture_spotlight.commands.parser import normalize, resolve, MatchResult, ParseContext
from scripture_spotlight.commands.uri import build_uri
from scripture_spotlight.commands.decoder import Decoder, SOURCES

__all__ = [
    "normalize",
    "resolve",
    "MatchResult",
    "ParseContext",
    "build_uri",
    "Decoder",
    "SOURCES",
]
