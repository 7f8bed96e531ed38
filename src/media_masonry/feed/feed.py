"""
Module: feed.feed

Purpose:
    Accumulate media items page by page for the current kind and query.
    Produces the ordered, id-deduplicated item stream the layout engine
    consumes.

Key Classes:
    - MediaFeed: Paged item accumulator

Dependencies:
    - feed.source: PageSource, FeedError
    - core.utils.serialization: parse_item_record

Used By:
    - cli: fetch command
"""

from __future__ import annotations

import logging
from typing import List, Optional

from media_masonry.core.models import MediaItem, MediaKind
from media_masonry.core.schemas import ValidationError
from media_masonry.core.utils import parse_item_record

from .source import DEFAULT_PER_PAGE, PageSource

logger = logging.getLogger(__name__)


class MediaFeed:
    """
    Ordered item stream that grows one page at a time.

    A page shorter than per_page marks the end of the results. Items whose
    id was already seen are ignored (first occurrence wins). Changing the
    kind or query via reset() starts over; callers must lay out the new
    item list from scratch.

    Example:
        >>> feed = MediaFeed(source, MediaKind.GIF, query="cats")
        >>> feed.fetch_next_page()
        50
        >>> layout = layout_items(feed.items, LayoutConfig())
    """

    def __init__(
        self,
        source: PageSource,
        kind: MediaKind = MediaKind.GIF,
        query: str = "",
        per_page: int = DEFAULT_PER_PAGE,
    ):
        if per_page <= 0:
            raise ValueError(f"per_page must be positive: {per_page}")
        self.source = source
        self.per_page = per_page
        self.kind = kind
        self.query = query
        self._items: List[MediaItem] = []
        self._seen_ids: set[str] = set()
        self._pages_loaded = 0
        self._has_more = True

    @property
    def items(self) -> List[MediaItem]:
        """Items fetched so far, in order (a copy)."""
        return list(self._items)

    @property
    def pages_loaded(self) -> int:
        return self._pages_loaded

    @property
    def has_more(self) -> bool:
        """False once a page came back shorter than per_page."""
        return self._has_more

    def reset(self, *, kind: Optional[MediaKind] = None, query: Optional[str] = None) -> None:
        """Clear all items and switch to a new kind and/or query."""
        if kind is not None:
            self.kind = kind
        if query is not None:
            self.query = query
        self._items = []
        self._seen_ids = set()
        self._pages_loaded = 0
        self._has_more = True
        logger.debug(f"Feed reset to {self.kind} query={self.query!r}")

    def fetch_next_page(self) -> int:
        """
        Fetch the next page and append its new items.

        Returns:
            Number of items appended (0 when there are no more pages)

        Raises:
            FeedError: If the page source fails; feed state is unchanged
        """
        if not self._has_more:
            return 0

        page = self._pages_loaded + 1
        records = self.source.fetch_page(self.kind, self.query, page, self.per_page)

        added = 0
        for record in records:
            try:
                item = parse_item_record(record, self.kind)
            except ValidationError as e:
                logger.warning(f"Skipping malformed {self.kind} record on page {page}: {e}")
                continue
            if item.id in self._seen_ids:
                continue
            self._seen_ids.add(item.id)
            self._items.append(item)
            added += 1

        self._pages_loaded = page
        self._has_more = len(records) >= self.per_page

        logger.info(
            f"Page {page}: {added} new {self.kind} items "
            f"({len(self._items)} total, more={self._has_more})"
        )
        return added

    def fetch_pages(self, count: int) -> int:
        """Fetch up to count pages, stopping early when results run out."""
        added = 0
        for _ in range(count):
            if not self._has_more:
                break
            added += self.fetch_next_page()
        return added
