"""
Command line interface for media-masonry.

Commands:
    layout  Lay out a JSON list of items and write the layout as JSON,
            optionally also as HTML and/or a PNG contact sheet.
    fetch   Fetch pages of items from the media API into a JSON list.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from media_masonry import __version__
from media_masonry.core.models import MediaKind
from media_masonry.core.schemas import ValidationError
from media_masonry.core.utils import load_items_json, save_items_json
from media_masonry.feed import FeedConfig, FeedError, KlipyPageSource, MediaFeed
from media_masonry.layout import LayoutConfig, layout_items, load_layout_config
from media_masonry.output import ContactSheetRenderer, DirectoryThumbnailProvider, HtmlRenderer

logger = logging.getLogger("media_masonry")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-masonry",
        description="Fixed-width masonry layout for media streams",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    layout = sub.add_parser("layout", help="Lay out a JSON list of items")
    layout.add_argument("items", type=Path, help="JSON list of items")
    layout.add_argument(
        "--kind",
        choices=[k.value for k in MediaKind],
        help="Treat entries as raw API records of this kind",
    )
    layout.add_argument("--config", type=Path, help="JSON file with layout options")
    layout.add_argument("--output", "-o", type=Path, help="Layout JSON output (default: stdout)")
    layout.add_argument("--html", type=Path, help="Also write an HTML fragment")
    layout.add_argument("--png", type=Path, help="Also write a PNG contact sheet")
    layout.add_argument("--thumbs", type=Path, help="Directory of <id>.<ext> thumbnails for --png")

    fetch = sub.add_parser("fetch", help="Fetch items from the media API")
    fetch.add_argument("--kind", choices=[k.value for k in MediaKind], default=MediaKind.GIF.value)
    fetch.add_argument("--query", "-q", default="", help="Search text (default: trending)")
    fetch.add_argument("--pages", type=int, default=1, help="Pages to fetch")
    fetch.add_argument("--api-key", required=True, help="Media API key")
    fetch.add_argument("--per-page", type=int, default=50)
    fetch.add_argument("--output", "-o", type=Path, required=True, help="Items JSON output")

    return parser


def _run_layout(args: argparse.Namespace) -> int:
    config = load_layout_config(args.config) if args.config else LayoutConfig()
    kind = MediaKind(args.kind) if args.kind else None
    items = load_items_json(args.items, kind=kind)

    result = layout_items(items, config)
    payload = json.dumps(result.to_dict(), indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info(f"Layout written to {args.output}")
    else:
        sys.stdout.write(payload + "\n")

    if args.html:
        HtmlRenderer(config).render_to_file(result, args.html)
    if args.png:
        provider = DirectoryThumbnailProvider(args.thumbs) if args.thumbs else None
        ContactSheetRenderer(config, provider).render_to_file(result, args.png)

    if result.dropped_ids:
        logger.warning(f"{len(result.dropped_ids)} items dropped (invalid dimensions)")
    return 0


def _run_fetch(args: argparse.Namespace) -> int:
    feed_config = FeedConfig(api_key=args.api_key, per_page=args.per_page)
    feed = MediaFeed(
        KlipyPageSource(feed_config),
        MediaKind(args.kind),
        query=args.query,
        per_page=feed_config.per_page,
    )
    feed.fetch_pages(args.pages)
    save_items_json(feed.items, args.output)
    logger.info(f"Saved {len(feed.items)} items from {feed.pages_loaded} pages to {args.output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        if args.command == "layout":
            return _run_layout(args)
        return _run_fetch(args)
    except (FeedError, ValidationError, ValueError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
