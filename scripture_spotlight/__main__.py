"""Entry point for scripture-spotlight."""

import argparse
import logging
import sys
from typing import List, Optional

from scripture_spotlight.commands import SOURCES, Decoder
from scripture_spotlight.config import get_config
from scripture_spotlight.data.topics import TopicIndex, default_sources
from scripture_spotlight.launcher import open_uri


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="scripture-spotlight",
        description="Open a scripture or publication reference in JW Library.",
    )
    parser.add_argument(
        "reference",
        nargs="*",
        help='reference to open, e.g. "John 3:16" or "wt sep 2025"; omit to start the launcher',
    )
    parser.add_argument("--source", choices=SOURCES, default="bible", help="source for --book")
    parser.add_argument("--book", help="book number (1-66) or name")
    parser.add_argument("--chapter", type=int, help="chapter number")
    parser.add_argument("--verse", type=int, help="verse number")
    parser.add_argument("--print-only", action="store_true", help="print the link without opening it")
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the scripture-spotlight command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = get_config()

    if not args.reference and args.book is None:
        from scripture_spotlight.app import SpotlightApp

        SpotlightApp(config=config).run()
        return 0

    decoder = Decoder(TopicIndex(default_sources(config.topic_index_paths)))
    if args.book is not None:
        book = int(args.book) if args.book.isdigit() else args.book
        uri = decoder.decode_structured(args.source, book, args.chapter, args.verse)
    else:
        uri = decoder.decode(" ".join(args.reference))

    if uri is None:
        print("No match for input", file=sys.stderr)
        return 1

    print(uri)
    if not args.print_only:
        open_uri(uri, config.open_command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
